"""Database session management.

The engine is owned by a ``Database`` object that the application creates at
startup and disposes at shutdown. Nothing in this module holds a live
connection pool at import time.
"""
from contextlib import contextmanager
from typing import Generator, Optional

from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from showcase.core.config import settings
from showcase.core.logging_config import get_logger

logger = get_logger(__name__)


def _enable_sqlite_immediate_transactions(engine: Engine) -> None:
    """
    Make every SQLite transaction take the write lock up front.

    pysqlite's default deferred BEGIN lets two transactions read the same
    vote state and then race to upgrade their locks. ``BEGIN IMMEDIATE``
    serializes them instead, which is the SQLite stand-in for the row lock
    PostgreSQL takes with ``SELECT ... FOR UPDATE``.
    """

    @event.listens_for(engine, "connect")
    def _disable_pysqlite_begin(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _begin_immediate(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def create_db_engine(
    database_url: str,
    pool_size: Optional[int] = None,
    max_overflow: Optional[int] = None,
) -> Engine:
    """Create an engine configured for the given backend."""
    if database_url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}
        if ":memory:" in database_url or database_url == "sqlite://":
            engine = create_engine(database_url, connect_args=connect_args, poolclass=StaticPool)
        else:
            connect_args["timeout"] = 30
            engine = create_engine(database_url, connect_args=connect_args)
        _enable_sqlite_immediate_transactions(engine)
        return engine

    return create_engine(
        database_url,
        pool_pre_ping=True,
        echo=False,
        pool_size=pool_size if pool_size is not None else settings.DB_POOL_SIZE,
        max_overflow=max_overflow if max_overflow is not None else settings.DB_MAX_OVERFLOW,
    )


class Database:
    """Engine and session factory with an explicit lifecycle."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self.session_factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    @classmethod
    def from_url(cls, database_url: str, **engine_kwargs) -> "Database":
        return cls(create_db_engine(database_url, **engine_kwargs))

    def create_all(self) -> None:
        from showcase.db.base import Base

        Base.metadata.create_all(bind=self.engine)

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """Context manager for getting a session outside of FastAPI."""
        db = self.session_factory()
        try:
            yield db
        finally:
            db.close()

    def pool_status(self) -> dict:
        pool = self.engine.pool
        if not hasattr(pool, "checkedout"):
            return {"class": type(pool).__name__}
        return {
            "class": type(pool).__name__,
            "size": pool.size() if hasattr(pool, "size") else None,
            "checked_in": pool.checkedin(),
            "checked_out": pool.checkedout(),
            "overflow": pool.overflow() if hasattr(pool, "overflow") else None,
        }

    def dispose(self) -> None:
        logger.info("database_disposed", pool=type(self.engine.pool).__name__)
        self.engine.dispose()


def get_db(request: Request) -> Generator[Session, None, None]:
    """Dependency for FastAPI to get database session."""
    database: Database = request.app.state.database
    db = database.session_factory()
    try:
        yield db
    finally:
        db.close()
