"""Project schemas."""
from datetime import datetime
from typing import List, Optional

from showcase.schemas.common import CamelModel


class ProjectAuthor(CamelModel):
    id: str
    nickname: str


class ProjectBootcamp(CamelModel):
    id: str
    name: str


class ProjectSummary(CamelModel):
    id: str
    title: str
    description: Optional[str] = None
    cover_image: Optional[str] = None
    is_approved: bool
    vote_count: int
    author: Optional[ProjectAuthor] = None
    bootcamp: Optional[ProjectBootcamp] = None
    created_at: datetime
    has_voted: bool


class ProjectApprovalUpdate(CamelModel):
    is_approved: bool


class FavoriteProject(ProjectSummary):
    liked_at: datetime


class FavoritesPage(CamelModel):
    projects: List[FavoriteProject]
    total_count: int
    total_pages: int
    current_page: int
    has_more: bool
