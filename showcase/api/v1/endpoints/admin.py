"""Admin endpoints."""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.orm import Session

from showcase.api.deps import get_db, get_identity, verify_admin_token
from showcase.core.rate_limit import limiter, RATE_LIMITS
from showcase.schemas import ProjectApprovalUpdate, ProjectSummary, SuccessResponse
from showcase.services.identity import ResolvedIdentity
from showcase.services.projects import (
    delete_project,
    get_project,
    list_projects,
    set_project_approval,
)

router = APIRouter(dependencies=[Depends(verify_admin_token)])


@router.get("/projects", response_model=List[ProjectSummary])
@limiter.limit(RATE_LIMITS["admin_read"])
def admin_list_projects(
    request: Request,
    bootcamp_id: Optional[str] = Query(None, alias="bootcampId"),
    resolved: ResolvedIdentity = Depends(get_identity),
    db: Session = Depends(get_db),
):
    """
    List all projects including those awaiting approval (admin only).

    Requires a bearer JWT with ``role: ADMIN``. Ordering is the same as the
    public ranking.
    """
    return list_projects(db, resolved.identity, bootcamp_id=bootcamp_id, include_unapproved=True)


@router.patch("/projects/{project_id}/approval", response_model=ProjectSummary)
@limiter.limit(RATE_LIMITS["admin_write"])
def admin_set_approval(
    request: Request,
    project_id: str,
    body: ProjectApprovalUpdate,
    resolved: ResolvedIdentity = Depends(get_identity),
    db: Session = Depends(get_db),
):
    """
    Approve or unapprove a project (admin only).

    Only the approval flag changes. ``voteCount`` is left to the vote
    endpoint, so an approval issued while votes are coming in cannot reset
    the counter.

    Raises:
        HTTPException: 404 if the project doesn't exist
    """
    if not set_project_approval(db, project_id, body.is_approved):
        raise HTTPException(status_code=404, detail="Project not found")
    return get_project(db, project_id, resolved.identity, include_unapproved=True)


@router.delete("/projects/{project_id}", response_model=SuccessResponse)
@limiter.limit(RATE_LIMITS["admin_write"])
def admin_delete_project(
    request: Request,
    project_id: str,
    db: Session = Depends(get_db),
) -> SuccessResponse:
    """Delete a project and all of its votes (admin only)."""
    if not delete_project(db, project_id):
        raise HTTPException(status_code=404, detail="Project not found")
    return SuccessResponse(success=True, message="Project deleted successfully")
