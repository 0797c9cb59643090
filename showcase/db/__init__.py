"""Database package."""
from showcase.db.session import Database, create_db_engine, get_db
from showcase.db.base import Base

__all__ = ["Database", "create_db_engine", "get_db", "Base"]
