"""Project model."""
import uuid
from datetime import datetime, timezone as tz
from sqlalchemy import (
    Boolean, CheckConstraint, Column, DateTime, ForeignKey, Index, Integer, String, Text,
)
from sqlalchemy.orm import relationship

from showcase.db.base import Base


class Project(Base):
    __tablename__ = "projects"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    cover_image = Column(String(500), nullable=True)
    is_approved = Column(Boolean, nullable=False, default=False)
    # Cached count of Vote rows. Only the vote service changes it.
    vote_count = Column(Integer, nullable=False, default=0)
    author_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    bootcamp_id = Column(String(36), ForeignKey("bootcamps.id", ondelete="CASCADE"), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(tz.utc))
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(tz.utc),
        onupdate=lambda: datetime.now(tz.utc),
    )

    # Relationships
    author = relationship("User", back_populates="projects")
    bootcamp = relationship("Bootcamp", back_populates="projects")
    votes = relationship("Vote", back_populates="project", cascade="all, delete-orphan", passive_deletes=True)

    __table_args__ = (
        Index("idx_projects_ranking", "vote_count", "created_at"),
        Index("idx_projects_bootcamp", "bootcamp_id"),
        CheckConstraint("vote_count >= 0", name="ck_projects_vote_count_non_negative"),
    )
