"""Main FastAPI application."""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException, Request, Depends
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from sqlalchemy import text
from sqlalchemy.orm import Session

from showcase.api.v1.router import api_router
from showcase.api.deps import get_db
from showcase.core.config import settings
from showcase.core.exceptions import VoteError
from showcase.core.rate_limit import limiter
from showcase.core.logging_config import setup_logging, get_logger
from showcase.db import Database
from showcase.middleware import LoggingMiddleware
from showcase.schemas import ErrorDetail, ErrorResponse
from showcase.services.identity import persist_visitor_cookie

logger = get_logger(__name__)


async def vote_error_handler(request: Request, exc: VoteError) -> JSONResponse:
    """Render domain errors as the standard error body."""
    body = ErrorResponse(error=ErrorDetail(code=exc.code, message=exc.message))
    response = JSONResponse(status_code=exc.status_code, content=body.model_dump())
    resolved = getattr(request.state, "resolved_identity", None)
    if resolved is not None:
        persist_visitor_cookie(response, resolved)
    return response


def create_app(database: Optional[Database] = None) -> FastAPI:
    """
    Build the application.

    Args:
        database: Store handle to use. When omitted, one is created from
            settings at startup and disposed at shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = database is None
        app.state.database = database or Database.from_url(settings.get_database_url())
        if owned and settings.ENVIRONMENT == "development":
            app.state.database.create_all()
        logger.info("database_ready", owned=owned)
        try:
            yield
        finally:
            if owned:
                app.state.database.dispose()

    app = FastAPI(
        title=settings.APP_TITLE,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        lifespan=lifespan,
    )

    # Add rate limiter to app state
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_exception_handler(VoteError, vote_error_handler)

    # Add logging middleware (must be added before other middleware for proper request tracking)
    app.add_middleware(LoggingMiddleware)

    @app.middleware("http")
    async def add_api_version_header(request: Request, call_next):
        """Add X-API-Version header to all responses for version tracking."""
        response = await call_next(request)
        response.headers["X-API-Version"] = settings.APP_VERSION
        return response

    # CORS - the visitor cookie needs credentials allowed
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["*"],
    )

    app.include_router(api_router)

    @app.get("/health")
    def health_check(request: Request, db: Session = Depends(get_db)):
        """
        Health check endpoint.

        Returns:
            - status: "healthy" or "unhealthy"
            - database: connection status and pool metrics
            - environment: current environment setting

        Returns 503 if the database is unreachable.
        """
        health_status = {
            "status": "healthy",
            "environment": settings.ENVIRONMENT,
            "database": {
                "status": "connected",
                "pool": request.app.state.database.pool_status(),
            },
        }

        try:
            db.execute(text("SELECT 1"))
        except Exception as e:
            health_status["status"] = "unhealthy"
            health_status["database"]["status"] = f"error: {str(e)}"
            logger.error("health_check_failed", error=str(e))
            raise HTTPException(status_code=503, detail=health_status)

        return health_status

    return app


# Initialize structured logging
setup_logging(level=settings.LOG_LEVEL)

# Validate production configuration after logging is configured
if settings.ENVIRONMENT == "production":
    settings.validate_production_config()

logger.info(
    "application_starting",
    app_title=settings.APP_TITLE,
    app_version=settings.APP_VERSION,
    environment=settings.ENVIRONMENT,
)

app = create_app()
