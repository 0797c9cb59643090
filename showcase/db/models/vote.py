"""Vote model."""
import uuid
from datetime import datetime, timezone as tz
from sqlalchemy import CheckConstraint, Column, String, DateTime, ForeignKey, Index, UniqueConstraint
from sqlalchemy.orm import relationship

from showcase.core.constants import VISITOR_ID_MAX_LENGTH
from showcase.db.base import Base


class Vote(Base):
    __tablename__ = "votes"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    project_id = Column(String(36), ForeignKey("projects.id", ondelete="CASCADE"), nullable=False)
    voter_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=True)
    visitor_id = Column(String(VISITOR_ID_MAX_LENGTH), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(tz.utc))

    # Relationships
    project = relationship("Project", back_populates="votes")
    voter = relationship("User", back_populates="votes")

    __table_args__ = (
        Index("idx_votes_project_visitor", "project_id", "visitor_id"),
        Index("idx_votes_voter", "voter_id"),
        # NULL voter_ids never collide, so anonymous rows are unaffected
        UniqueConstraint("project_id", "voter_id", name="uq_project_voter"),
        CheckConstraint(
            "voter_id IS NOT NULL OR visitor_id IS NOT NULL",
            name="ck_votes_has_identity",
        ),
    )
