"""User model."""
import uuid
from datetime import datetime, timezone as tz
from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship

from showcase.db.base import Base


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    nickname = Column(String(100), nullable=False)
    planet_number = Column(String(50), unique=True, nullable=False, index=True)
    role = Column(String(20), nullable=False, default="MEMBER")
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(tz.utc))

    # Relationships
    projects = relationship("Project", back_populates="author")
    votes = relationship("Vote", back_populates="voter")
