"""Bootcamp model."""
import uuid
from datetime import datetime, timezone as tz
from sqlalchemy import Boolean, Column, String, DateTime
from sqlalchemy.orm import relationship

from showcase.db.base import Base


class Bootcamp(Base):
    __tablename__ = "bootcamps"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(200), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(tz.utc))

    # Relationships
    projects = relationship("Project", back_populates="bootcamp")
