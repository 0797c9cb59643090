"""Voter identity resolution.

A voter is either an anonymous browser, known only by its ``visitorId``
cookie, or a logged-in user who usually also carries that cookie. Both keys
are kept so a vote cast before logging in is still recognised afterwards.
"""
import re
from dataclasses import dataclass
from typing import Optional, Union

from fastapi import Request, Response

from showcase.core import config
from showcase.core.constants import VISITOR_ID_MAX_LENGTH
from showcase.core.security import decode_access_token, generate_visitor_id, get_bearer_token


@dataclass(frozen=True)
class AnonymousIdentity:
    visitor_id: str

    @property
    def user_id(self) -> None:
        return None


@dataclass(frozen=True)
class AuthenticatedIdentity:
    user_id: str
    visitor_id: Optional[str] = None


Identity = Union[AnonymousIdentity, AuthenticatedIdentity]

# Url-safe token characters; minted ids are uuid4 strings
_VISITOR_ID_RE = re.compile(r"[A-Za-z0-9_-]+")


@dataclass(frozen=True)
class ResolvedIdentity:
    """Identity plus whether its visitor id was minted for this request."""

    identity: Identity
    is_new_visitor_id: bool = False

    @property
    def user_id(self) -> Optional[str]:
        return self.identity.user_id

    @property
    def visitor_id(self) -> Optional[str]:
        return self.identity.visitor_id


def resolve_identity(request: Request) -> ResolvedIdentity:
    """
    Resolve the voter identity for a request.

    The visitor id comes from the cookie, or is freshly minted when the
    cookie is absent or malformed. A bearer token that fails verification
    is ignored and the request proceeds anonymously.
    """
    cookie_name = config.settings.VISITOR_COOKIE_NAME
    visitor_id = request.cookies.get(cookie_name)
    is_new = False
    if not is_valid_visitor_id(visitor_id):
        visitor_id = generate_visitor_id()
        is_new = True

    user_id = None
    token = get_bearer_token(request)
    if token:
        payload = decode_access_token(token)
        if payload:
            user_id = payload.get("userId")

    if user_id:
        identity: Identity = AuthenticatedIdentity(user_id=str(user_id), visitor_id=visitor_id)
    else:
        identity = AnonymousIdentity(visitor_id=visitor_id)

    return ResolvedIdentity(identity=identity, is_new_visitor_id=is_new)


def is_valid_visitor_id(value: Optional[str]) -> bool:
    """Whether a client-sent visitor id can be stored as-is."""
    if not value or len(value) > VISITOR_ID_MAX_LENGTH:
        return False
    return _VISITOR_ID_RE.fullmatch(value) is not None


def persist_visitor_cookie(response: Response, resolved: ResolvedIdentity) -> None:
    """Write the visitor cookie back only when it was minted for this request."""
    if not resolved.is_new_visitor_id:
        return

    response.set_cookie(
        key=config.settings.VISITOR_COOKIE_NAME,
        value=resolved.visitor_id,
        httponly=True,  # Not readable from JavaScript
        secure=config.settings.cookie_secure,  # Requires HTTPS in production
        samesite="lax",
        max_age=config.settings.VISITOR_COOKIE_MAX_AGE,
    )
