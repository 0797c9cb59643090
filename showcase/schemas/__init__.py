"""Pydantic schemas for request/response validation."""
from showcase.schemas.project import (
    ProjectAuthor,
    ProjectBootcamp,
    ProjectSummary,
    ProjectApprovalUpdate,
    FavoriteProject,
    FavoritesPage,
)
from showcase.schemas.vote import VoteResponse
from showcase.schemas.deadline import DeadlineResponse
from showcase.schemas.common import SuccessResponse, ErrorResponse, ErrorDetail

__all__ = [
    "ProjectAuthor",
    "ProjectBootcamp",
    "ProjectSummary",
    "ProjectApprovalUpdate",
    "FavoriteProject",
    "FavoritesPage",
    "VoteResponse",
    "DeadlineResponse",
    "SuccessResponse",
    "ErrorResponse",
    "ErrorDetail",
]
