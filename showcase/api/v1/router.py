"""Main API router for v1."""
from fastapi import APIRouter

from showcase.api.v1.endpoints import admin, deadline, projects, users

api_router = APIRouter(prefix="/api/v1")

# Include all endpoint routers
api_router.include_router(projects.router, prefix="/projects", tags=["Projects"])
api_router.include_router(admin.router, prefix="/admin", tags=["Admin"])
api_router.include_router(users.router, prefix="/users", tags=["Users"])
api_router.include_router(deadline.router, prefix="/deadline", tags=["Deadline"])
