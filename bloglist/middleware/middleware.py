# bloglist/middleware/middleware.py
"""
Middleware components for the Bloglist backend.

This module contains middleware for security headers, request logging and
CORS handling, and the lifespan event handler that prepares the database
and releases it on shutdown.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from time import perf_counter
from uuid import uuid4

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from bloglist.configs import Settings
from bloglist.db import Database
from bloglist.errors import DatabaseInitializationError
from bloglist.monitoring import bind_request_id, clear_context, get_logger
from bloglist.utils.helpers import get_summary, host

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Manage application startup and shutdown events."""
    settings: Settings = app.state.settings
    db: Database = app.state.db

    # Startup
    logger.info(f"Starting {app.title}...", environment=settings.ENVIRONMENT)

    if settings.CREATE_TABLES:
        try:
            await db.create_all()
        except Exception as e:
            logger.exception("Failed to initialize database")
            raise DatabaseInitializationError from e

    logger.info("Services initialized successfully")
    logger.info(f"  - Backend API: http://{settings.HOST}:{settings.PORT}")
    logger.info(f"  - API Documentation: http://{settings.HOST}:{settings.PORT}/docs")
    logger.info(f"  - Health Check: http://{settings.HOST}:{settings.PORT}/health")

    yield

    # Shutdown
    logger.info(f"Shutting down {app.title}...")
    try:
        await db.dispose()
        logger.info("Services cleaned up successfully")
    except Exception:
        logger.exception("Error during service cleanup")


def configure_cors(app: FastAPI, settings: Settings) -> None:
    """Configure CORS middleware for the application."""
    allowed_origins: list[str] = [
        "http://localhost:5173",  # Vite development
        "http://127.0.0.1:5173",
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    if frontend_url := settings.PRODUCTION_FRONTEND_URL:
        allowed_origins.append(frontend_url)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Log request summary and timing information under a request id."""

        request_id = request.headers.get("X-Request-ID") or uuid4().hex
        bind_request_id(request_id)

        start_time = perf_counter()
        summary = get_summary(request)
        route_info = summary or f"{request.method} {request.url.path}"
        logger.info(f"Request: {route_info}", ip=host(request))

        try:
            response = await call_next(request)
            duration = perf_counter() - start_time
            logger.info(
                f"Response: {response.status_code} for {request.method} {request.url.path}",
                duration=f"{duration:.3f}s",
            )
            response.headers["X-Request-ID"] = request_id
        finally:
            clear_context()

        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Add security headers to all responses."""

        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        return response
