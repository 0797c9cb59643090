"""Database models."""
from showcase.db.models.user import User
from showcase.db.models.bootcamp import Bootcamp
from showcase.db.models.project import Project
from showcase.db.models.vote import Vote

__all__ = ["User", "Bootcamp", "Project", "Vote"]
