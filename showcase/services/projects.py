"""Project listing, ranking, favorites and admin moderation."""
import math
from typing import Any, Iterable, Optional

from sqlalchemy import func, or_, select, update
from sqlalchemy.orm import Session, joinedload

from showcase.core.logging_config import get_logger
from showcase.db.models import Project, Vote
from showcase.services.identity import Identity
from showcase.services.vote import vote_identity_filters

logger = get_logger(__name__)

# Most votes first; ties go to the earlier submission, then to id so the
# order is reproducible across backends.
RANKING_ORDER = (Project.vote_count.desc(), Project.created_at.asc(), Project.id.asc())


def _project_to_dict(project: Project, has_voted: bool) -> dict[str, Any]:
    author = project.author
    bootcamp = project.bootcamp
    return {
        "id": project.id,
        "title": project.title,
        "description": project.description,
        "cover_image": project.cover_image,
        "is_approved": project.is_approved,
        "vote_count": project.vote_count,
        "author": {"id": author.id, "nickname": author.nickname} if author else None,
        "bootcamp": {"id": bootcamp.id, "name": bootcamp.name} if bootcamp else None,
        "created_at": project.created_at,
        "has_voted": has_voted,
    }


def get_voted_project_ids(db: Session, project_ids: Iterable[str], identity: Identity) -> set[str]:
    """Return the subset of ``project_ids`` this voter has a vote on."""
    project_ids = list(project_ids)
    if not project_ids:
        return set()

    rows = db.execute(
        select(Vote.project_id)
        .where(Vote.project_id.in_(project_ids), or_(*vote_identity_filters(identity)))
        .distinct()
    ).scalars().all()
    return set(rows)


def annotate_has_voted(db: Session, projects: list[Project], identity: Identity) -> list[dict[str, Any]]:
    """
    Attach ``has_voted`` to already-fetched projects.

    One membership query covers the whole list. Input order is preserved and
    nothing is written.
    """
    voted = get_voted_project_ids(db, (p.id for p in projects), identity)
    return [_project_to_dict(p, p.id in voted) for p in projects]


def list_projects(
    db: Session,
    identity: Identity,
    bootcamp_id: Optional[str] = None,
    include_unapproved: bool = False,
) -> list[dict[str, Any]]:
    """List projects ranked by vote count, annotated for the requesting voter.

    Args:
        db: Database session
        identity: Voter identity used for ``has_voted``
        bootcamp_id: Restrict to one bootcamp
        include_unapproved: Admin view; also return projects pending approval

    Returns:
        list of project dicts, highest vote count first
    """
    stmt = select(Project).options(joinedload(Project.author), joinedload(Project.bootcamp))
    if not include_unapproved:
        stmt = stmt.where(Project.is_approved.is_(True))
    if bootcamp_id:
        stmt = stmt.where(Project.bootcamp_id == bootcamp_id)
    stmt = stmt.order_by(*RANKING_ORDER)

    projects = db.execute(stmt).scalars().unique().all()
    return annotate_has_voted(db, list(projects), identity)


def get_project(
    db: Session, project_id: str, identity: Identity, include_unapproved: bool = False
) -> Optional[dict[str, Any]]:
    """Retrieve one project with ``has_voted``; None if missing or hidden."""
    project = db.execute(
        select(Project)
        .options(joinedload(Project.author), joinedload(Project.bootcamp))
        .where(Project.id == project_id)
    ).scalars().first()

    if not project or (not project.is_approved and not include_unapproved):
        return None

    return annotate_has_voted(db, [project], identity)[0]


def list_user_favorites(db: Session, user_id: str, page: int = 1, limit: int = 6) -> dict[str, Any]:
    """
    Page through the projects a user has voted for, most recent vote first.

    Only votes recorded under the user id count; anonymous votes from the
    user's browsers are not attributed to the account here.

    Args:
        db: Database session
        user_id: Owner of the list
        page: 1-based page number
        limit: Page size

    Returns:
        dict with projects (each carrying ``liked_at``), total_count,
        total_pages, current_page and has_more
    """
    offset = (page - 1) * limit

    total_count = db.execute(
        select(func.count()).select_from(Vote).where(Vote.voter_id == user_id)
    ).scalar_one()

    votes = db.execute(
        select(Vote)
        .options(
            joinedload(Vote.project).joinedload(Project.author),
            joinedload(Vote.project).joinedload(Project.bootcamp),
        )
        .where(Vote.voter_id == user_id)
        .order_by(Vote.created_at.desc(), Vote.id.desc())
        .offset(offset)
        .limit(limit)
    ).scalars().unique().all()

    projects = []
    for vote in votes:
        project = _project_to_dict(vote.project, has_voted=True)
        project["liked_at"] = vote.created_at
        projects.append(project)

    return {
        "projects": projects,
        "total_count": total_count,
        "total_pages": math.ceil(total_count / limit),
        "current_page": page,
        "has_more": offset + limit < total_count,
    }


def set_project_approval(db: Session, project_id: str, is_approved: bool) -> bool:
    """Approve or unapprove a project.

    Only ``is_approved`` is written. The vote counter belongs to the vote
    service and is never overwritten here.

    Returns:
        bool: True if the project exists, False otherwise
    """
    result = db.execute(
        update(Project)
        .where(Project.id == project_id)
        .values(is_approved=is_approved)
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        db.rollback()
        return False

    db.commit()
    logger.info("project_approval_changed", project_id=project_id, is_approved=is_approved)
    return True


def delete_project(db: Session, project_id: str) -> bool:
    """Delete a project; its votes are removed by the cascade.

    Returns:
        bool: True if the project was deleted, False if no project was found
    """
    project = db.get(Project, project_id)
    if project is None:
        db.rollback()
        return False

    try:
        db.delete(project)
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info("project_deleted", project_id=project_id)
    return True
