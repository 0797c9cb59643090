"""Vote business logic."""
from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy import or_, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from showcase.core.exceptions import (
    ProjectNotApprovedError,
    ProjectNotFoundError,
    SelfVoteError,
    UserNotFoundError,
    VoteError,
    VoteStoreError,
)
from showcase.core.logging_config import get_logger
from showcase.db.models import Project, User, Vote
from showcase.services.identity import Identity
from showcase.services.project_gate import get_project_gate

logger = get_logger(__name__)


@dataclass(frozen=True)
class VoteResult:
    voted: bool
    vote_count: int


def vote_identity_filters(identity: Identity) -> List:
    """
    Build the OR-able conditions that identify this voter's vote rows.

    A row matches if it carries the same visitor id or the same user id, so
    an anonymous vote is still found after the browser logs in and the
    other way round.
    """
    conditions = []
    if identity.visitor_id:
        conditions.append(Vote.visitor_id == identity.visitor_id)
    if identity.user_id:
        conditions.append(Vote.voter_id == identity.user_id)
    if not conditions:
        raise ValueError("Identity has neither a user id nor a visitor id")
    return conditions


def find_existing_vote(db: Session, project_id: str, identity: Identity) -> Optional[Vote]:
    """Return the voter's vote on a project, oldest first if several match."""
    return db.execute(
        select(Vote)
        .where(Vote.project_id == project_id, or_(*vote_identity_filters(identity)))
        .order_by(Vote.created_at, Vote.id)
        .limit(1)
    ).scalars().first()


def _user_exists(db: Session, user_id: str) -> bool:
    return db.execute(select(User.id).where(User.id == user_id)).first() is not None


def _apply_toggle(db: Session, project_id: str, identity: Identity) -> VoteResult:
    gate = get_project_gate(db, project_id, lock=True)
    if gate is None:
        raise ProjectNotFoundError()

    if not gate.is_approved:
        raise ProjectNotApprovedError()

    user_id = identity.user_id
    if user_id and user_id == gate.author_id:
        raise SelfVoteError()

    if user_id and not _user_exists(db, user_id):
        raise UserNotFoundError()

    existing_vote = find_existing_vote(db, project_id, identity)
    if existing_vote:
        db.delete(existing_vote)
        delta = -1
    else:
        db.add(Vote(
            project_id=project_id,
            voter_id=user_id,
            visitor_id=identity.visitor_id,
        ))
        delta = 1
    db.flush()

    db.execute(
        update(Project)
        .where(Project.id == project_id)
        .values(vote_count=Project.vote_count + delta)
        .execution_options(synchronize_session=False)
    )
    new_count = db.execute(
        select(Project.vote_count).where(Project.id == project_id)
    ).scalar_one()

    return VoteResult(voted=delta > 0, vote_count=new_count)


def toggle_vote(db: Session, project_id: str, identity: Identity) -> VoteResult:
    """
    Cast a vote for a project, or retract it if this voter already voted.

    The eligibility checks, the vote row insert/delete and the counter
    update run in one transaction. Either all of it commits or none of it
    does.

    Args:
        db: Database session with no transaction in progress
        project_id: Project to vote for
        identity: Resolved voter identity

    Returns:
        VoteResult with the new vote state and the project's vote count

    Raises:
        ProjectNotFoundError: project does not exist
        ProjectNotApprovedError: project is not approved yet
        SelfVoteError: the logged-in user is the project's author
        UserNotFoundError: the logged-in user no longer exists
        VoteStoreError: the store failed; nothing was applied
    """
    try:
        result = _apply_toggle(db, project_id, identity)
        db.commit()
    except VoteError as e:
        db.rollback()
        logger.info(
            "vote_rejected",
            project_id=project_id,
            user_id=identity.user_id,
            code=e.code,
        )
        raise
    except IntegrityError as e:
        db.rollback()
        # A concurrent duplicate that slipped past the lookup; the unique
        # constraint (project_id, voter_id) rejected it
        logger.warning(
            "vote_store_failure",
            project_id=project_id,
            user_id=identity.user_id,
            reason="integrity",
            error=str(e.orig) if e.orig is not None else str(e),
        )
        raise VoteStoreError() from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(
            "vote_store_failure",
            project_id=project_id,
            user_id=identity.user_id,
            reason=type(e).__name__,
            error=str(e),
        )
        raise VoteStoreError() from e
    except Exception:
        db.rollback()
        raise

    logger.info(
        "vote_cast" if result.voted else "vote_retracted",
        project_id=project_id,
        user_id=identity.user_id,
        anonymous=identity.user_id is None,
        vote_count=result.vote_count,
    )
    return result
