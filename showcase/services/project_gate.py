"""Project eligibility lookup shared by the vote service."""
from dataclasses import dataclass
from typing import Optional
from sqlalchemy import select
from sqlalchemy.orm import Session

from showcase.db.models import Project


@dataclass(frozen=True)
class ProjectGate:
    project_id: str
    is_approved: bool
    author_id: str
    vote_count: int


def get_project_gate(db: Session, project_id: str, lock: bool = True) -> Optional[ProjectGate]:
    """
    Read the approval and authorship facts for a project.

    Args:
        db: Database session (inside the caller's transaction)
        project_id: Project to look up
        lock: Take a row lock so concurrent toggles and approval changes
            on the same project wait for this transaction

    Returns:
        ProjectGate if the project exists, None otherwise
    """
    stmt = select(
        Project.id, Project.is_approved, Project.author_id, Project.vote_count
    ).where(Project.id == project_id)
    if lock:
        stmt = stmt.with_for_update()

    row = db.execute(stmt).first()
    if row is None:
        return None

    return ProjectGate(
        project_id=row.id,
        is_approved=bool(row.is_approved),
        author_id=row.author_id,
        vote_count=row.vote_count,
    )
