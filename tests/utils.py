"""Seeding and inspection helpers for tests.

Every helper opens and closes its own session so no transaction (and no
SQLite write lock) outlives the call. Helpers return ids rather than ORM
objects for the same reason.
"""
from datetime import datetime
from typing import Optional

from sqlalchemy import func, select, update

from showcase.core.security import create_access_token
from showcase.db import Database
from showcase.db.models import Bootcamp, Project, User, Vote


def create_user(
    database: Database,
    user_id: Optional[str] = None,
    nickname: str = "Ada",
    role: str = "MEMBER",
) -> str:
    with database.session() as session:
        user = User(
            id=user_id,
            nickname=nickname,
            planet_number=f"planet-{user_id or nickname}",
            role=role,
        )
        session.add(user)
        session.flush()
        new_id = user.id
        session.commit()
    return new_id


def create_bootcamp(database: Database, name: str = "Spring Camp") -> str:
    with database.session() as session:
        bootcamp = Bootcamp(name=name)
        session.add(bootcamp)
        session.flush()
        new_id = bootcamp.id
        session.commit()
    return new_id


def create_project(
    database: Database,
    author_id: str,
    title: str = "Test Project",
    is_approved: bool = True,
    bootcamp_id: Optional[str] = None,
    created_at: Optional[datetime] = None,
    project_id: Optional[str] = None,
) -> str:
    with database.session() as session:
        project = Project(
            id=project_id,
            title=title,
            author_id=author_id,
            bootcamp_id=bootcamp_id,
            is_approved=is_approved,
            vote_count=0,
        )
        if created_at is not None:
            project.created_at = created_at
        session.add(project)
        session.flush()
        new_id = project.id
        session.commit()
    return new_id


def create_vote(
    database: Database,
    project_id: str,
    voter_id: Optional[str] = None,
    visitor_id: Optional[str] = None,
    created_at: Optional[datetime] = None,
) -> str:
    """Insert a vote row directly and bump the counter to match."""
    with database.session() as session:
        vote = Vote(project_id=project_id, voter_id=voter_id, visitor_id=visitor_id)
        if created_at is not None:
            vote.created_at = created_at
        session.add(vote)
        session.flush()
        session.execute(
            update(Project)
            .where(Project.id == project_id)
            .values(vote_count=Project.vote_count + 1)
        )
        new_id = vote.id
        session.commit()
    return new_id


def get_vote_count(database: Database, project_id: str) -> int:
    """The cached counter on the project row."""
    with database.session() as session:
        return session.execute(
            select(Project.vote_count).where(Project.id == project_id)
        ).scalar_one()


def count_vote_rows(database: Database, project_id: str) -> int:
    """The number of live vote rows for the project."""
    with database.session() as session:
        return session.execute(
            select(func.count()).select_from(Vote).where(Vote.project_id == project_id)
        ).scalar_one()


def assert_counter_consistent(database: Database, project_id: str) -> None:
    assert get_vote_count(database, project_id) == count_vote_rows(database, project_id)


def auth_headers(user_id: str, role: str = "MEMBER", visitor_id: Optional[str] = None) -> dict:
    headers = {"Authorization": f"Bearer {create_access_token({'userId': user_id, 'role': role})}"}
    if visitor_id:
        headers["Cookie"] = f"visitorId={visitor_id}"
    return headers


def visitor_headers(visitor_id: str) -> dict:
    return {"Cookie": f"visitorId={visitor_id}"}
