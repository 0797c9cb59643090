"""Shared API dependencies."""
from fastapi import Request

from showcase.core.security import verify_admin_token, verify_user_token
from showcase.db import get_db
from showcase.services.deadline import ensure_voting_open
from showcase.services.identity import ResolvedIdentity, resolve_identity


def get_identity(request: Request) -> ResolvedIdentity:
    """Resolve the voter identity once per request.

    The result is also kept on ``request.state`` so error responses can
    still hand out a freshly minted visitor cookie.
    """
    resolved = resolve_identity(request)
    request.state.resolved_identity = resolved
    return resolved


def require_voting_open() -> None:
    """Reject votes after the configured voting deadline."""
    ensure_voting_open()


__all__ = ["get_db", "get_identity", "require_voting_open", "verify_admin_token", "verify_user_token"]
