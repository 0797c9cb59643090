"""Project listing and voting endpoints."""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response
from sqlalchemy.orm import Session

from showcase.api.deps import get_db, get_identity, require_voting_open
from showcase.core.rate_limit import limiter, RATE_LIMITS
from showcase.schemas import ProjectSummary, VoteResponse, ErrorResponse
from showcase.services.identity import ResolvedIdentity, persist_visitor_cookie
from showcase.services.projects import get_project, list_projects
from showcase.services.vote import toggle_vote

router = APIRouter()


@router.get("", response_model=List[ProjectSummary])
@limiter.limit(RATE_LIMITS["list_projects"])
def list_projects_endpoint(
    request: Request,
    response: Response,
    bootcamp_id: Optional[str] = Query(None, alias="bootcampId"),
    resolved: ResolvedIdentity = Depends(get_identity),
    db: Session = Depends(get_db),
):
    """
    List approved projects, most votes first.

    Each project carries ``hasVoted`` for the requesting browser or user.
    Anonymous browsers without a ``visitorId`` cookie get one minted and set
    on this response, so their later votes can be recognised.

    Args:
        request: FastAPI Request (for rate limiting and identity)
        response: Response used to set the visitor cookie
        bootcamp_id: Optional bootcamp filter (``?bootcampId=``)
        resolved: Voter identity (injected)
        db: Database session (injected)

    Returns:
        List of ProjectSummary ranked by vote count. Ties are broken by
        submission time, earliest first.

    Rate Limit:
        300 requests per minute per IP
    """
    projects = list_projects(db, resolved.identity, bootcamp_id=bootcamp_id)
    persist_visitor_cookie(response, resolved)
    return projects


@router.get(
    "/{project_id}",
    response_model=ProjectSummary,
    responses={404: {"description": "Project not found"}},
)
def get_project_endpoint(
    project_id: str,
    response: Response,
    resolved: ResolvedIdentity = Depends(get_identity),
    db: Session = Depends(get_db),
):
    """Get a single approved project with ``hasVoted``."""
    project = get_project(db, project_id, resolved.identity)
    if project is None:
        raise HTTPException(status_code=404, detail="Project not found")
    persist_visitor_cookie(response, resolved)
    return project


@router.post(
    "/{project_id}/vote",
    response_model=VoteResponse,
    responses={
        403: {"model": ErrorResponse, "description": "Not approved, own project, or voting closed"},
        404: {"model": ErrorResponse, "description": "Project or user not found"},
        500: {"model": ErrorResponse, "description": "Vote could not be stored"},
    },
    dependencies=[Depends(require_voting_open)],
)
@limiter.limit(RATE_LIMITS["vote"])
def vote_endpoint(
    request: Request,
    response: Response,
    project_id: str,
    resolved: ResolvedIdentity = Depends(get_identity),
    db: Session = Depends(get_db),
) -> VoteResponse:
    """
    Toggle the caller's vote on a project.

    Calling this once casts a vote, calling it again withdraws it. Votes are
    accepted from logged-in users (``Authorization: Bearer``) and from
    anonymous browsers identified by the ``visitorId`` cookie. A browser
    that voted anonymously and then logs in still sees its earlier vote.

    Args:
        request: FastAPI Request (for rate limiting and identity)
        response: Response used to set the visitor cookie
        project_id: ID of the project to vote for
        resolved: Voter identity (injected)
        db: Database session (injected)

    Returns:
        VoteResponse with ``voted`` and the project's new ``voteCount``

    Raises:
        VoteError subclasses, rendered by the application's error handler:
        PROJECT_NOT_FOUND (404), USER_NOT_FOUND (404),
        PROJECT_NOT_APPROVED (403), CANNOT_VOTE_OWN_PROJECT (403),
        VOTING_CLOSED (403), VOTE_FAILED (500)

    Rate Limit:
        60 requests per minute per IP

    Example:
        Request:
            POST /api/v1/projects/7d3c.../vote
            Cookie: visitorId=visitor-abc

        Response (200):
            {
                "voted": true,
                "voteCount": 1,
                "message": "Vote recorded"
            }

        Response (403):
            {
                "success": false,
                "error": {
                    "code": "CANNOT_VOTE_OWN_PROJECT",
                    "message": "You cannot vote for your own project"
                }
            }
    """
    result = toggle_vote(db, project_id, resolved.identity)
    persist_visitor_cookie(response, resolved)
    return VoteResponse(
        voted=result.voted,
        vote_count=result.vote_count,
        message="Vote recorded" if result.voted else "Vote withdrawn",
    )
