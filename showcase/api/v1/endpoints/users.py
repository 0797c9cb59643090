"""User-scoped endpoints."""
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.orm import Session

from showcase.api.deps import get_db, verify_user_token
from showcase.core.rate_limit import limiter, RATE_LIMITS
from showcase.schemas import FavoritesPage
from showcase.services.projects import list_user_favorites

router = APIRouter()


@router.get(
    "/{user_id}/favorites",
    response_model=FavoritesPage,
    responses={
        401: {"description": "Missing, expired or invalid token"},
        403: {"description": "Token belongs to another user"},
    },
)
@limiter.limit(RATE_LIMITS["favorites"])
def list_favorites_endpoint(
    request: Request,
    user_id: str,
    page: int = Query(1, ge=1),
    limit: int = Query(6, ge=1, le=50),
    token_payload: dict = Depends(verify_user_token),
    db: Session = Depends(get_db),
):
    """
    List the projects a user has voted for, most recent vote first.

    Users can only read their own list.

    Args:
        request: FastAPI Request (for rate limiting)
        user_id: Owner of the list
        page: 1-based page number
        limit: Page size (default 6)
        token_payload: Verified bearer token claims (injected)
        db: Database session (injected)

    Returns:
        FavoritesPage with ``projects`` (each with ``likedAt``),
        ``totalCount``, ``totalPages``, ``currentPage`` and ``hasMore``

    Raises:
        HTTPException: 401 without a valid token, 403 for another user's list
    """
    if str(token_payload["userId"]) != user_id:
        raise HTTPException(status_code=403, detail="Not authorized")
    return list_user_favorites(db, user_id, page=page, limit=limit)
