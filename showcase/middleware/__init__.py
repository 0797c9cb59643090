"""HTTP middleware."""
from showcase.middleware.logging import LoggingMiddleware

__all__ = ["LoggingMiddleware"]
