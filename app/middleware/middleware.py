# app/middleware/middleware.py
"""
Middleware components for the blog posts backend.

This module contains middleware for security headers, request logging and
CORS handling, plus the lifespan handler that creates the store handle on
startup and disposes of it on shutdown.
"""

from collections.abc import AsyncGenerator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from logging import basicConfig, getLogger
from time import perf_counter

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from rich.logging import RichHandler
from rich.traceback import install
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from app.configs import Settings, file_logger
from app.db import Database
from app.utils.helpers import get_summary, host

# --- Logging Configuration ---
basicConfig(
    level="INFO",
    format="%(message)s",
    datefmt="%X",
    handlers=[RichHandler(rich_tracebacks=True)],
)
logger = file_logger(getLogger("rich"))

install()


def build_lifespan(
    settings: Settings,
) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    """Create the lifespan handler bound to ``settings``."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
        """Manage application startup and shutdown events."""
        # Startup
        logger.info(f"Starting {app.title}...")

        database = Database(settings)
        try:
            if settings.LOG_TO_FILE:
                logger.info("Logging to file enabled.")
            await database.init()
            app.state.database = database
            logger.info("Services initialized successfully")
            logger.info(f"  - Backend API: http://{settings.HOST}:{settings.PORT}")
            logger.info(f"  - API Documentation: http://{settings.HOST}:{settings.PORT}/docs")
        except Exception:
            logger.exception("Failed to initialize services")
            await database.close()
            raise

        yield

        # Shutdown
        logger.info(f"Shutting down {app.title}...")
        await database.close()
        logger.info("Services cleaned up successfully")

    return lifespan


def configure_cors(app: FastAPI, settings: Settings) -> None:
    """Configure CORS middleware for the application."""
    allowed_origins: list[str] = [
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
    )


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Log request summary and timing information."""

        start_time = perf_counter()
        summary = get_summary(request)

        route_info = summary or f"{request.method} {request.url.path}"
        logger.info(f"Request: {route_info}, from ip: {host(request)}")

        response = await call_next(request)
        duration = perf_counter() - start_time

        logger.info(
            f"Response: {response.status_code} for {request.method} {request.url.path} "
            f"in {duration:.2f}s",
        )

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
