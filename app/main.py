# app/main.py

"""Blog Posts Backend - paginated CRUD and search API for blog posts."""

from logging import getLogger

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.configs import API_PREFIX, Settings, file_logger, settings
from app.errors import (
    BaseAppError,
    StoreError,
    ValidationError,
    create_exception_handler,
    create_http_exception_handler,
    request_validation_exception_handler,
    store_exception_handler,
    validation_exception_handler,
)
from app.middleware import (
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    build_lifespan,
    configure_cors,
)
from app.routes import categories_router, posts_router
from app.schemas import HealthCheckResponse, MessageResponse
from app.utils.helpers import today_str

VERSION = "1.0.0"

logger = file_logger(getLogger(__name__))


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Parameters
    ----------
    app_settings : Settings | None
        Settings to use; the process-wide settings when omitted.

    Returns
    -------
    FastAPI
        Configured application. The store handle is created by the lifespan.
    """
    app_settings = app_settings or settings

    app = FastAPI(
        title=app_settings.APP_NAME,
        description="Blog posts API",
        version=VERSION,
        lifespan=build_lifespan(app_settings),
        swagger_ui_parameters={
            "docExpansion": "none",
            "operationsSorter": "method",
        },
    )

    configure_cors(app, app_settings)

    app.add_middleware(LoggingMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    routes = [posts_router, categories_router]

    _ = [app.include_router(router, prefix=API_PREFIX) for router in routes]

    errors = [
        (ValidationError, validation_exception_handler),
        (StoreError, store_exception_handler),
        (BaseAppError, create_exception_handler(logger)),
        (RequestValidationError, request_validation_exception_handler),
        (StarletteHTTPException, create_http_exception_handler(logger)),
        (Exception, create_exception_handler(logger)),
    ]

    _ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]

    @app.get(
        "/health",
        tags=["🩺 Health"],
        summary="Health check endpoint",
        response_model=HealthCheckResponse,
        response_class=ORJSONResponse,
        responses={
            200: {
                "content": {
                    "application/json": {
                        "example": {
                            "status": "ok",
                            "version": VERSION,
                            "timestamp": "2025-01-01 00:00:00",
                            "database": "connected",
                        },
                    },
                },
            },
        },
        operation_id="health_check",
    )
    async def health_check(request: Request) -> HealthCheckResponse:
        """
        Health check endpoint.

        Returns
        -------
        HealthCheckResponse
            `ok` when the store answers, `degraded` otherwise.
        """
        database = getattr(request.app.state, "database", None)
        connected = database is not None and await database.ping()
        return HealthCheckResponse(
            status="ok" if connected else "degraded",
            version=VERSION,
            timestamp=today_str(),
            database="connected" if connected else "unavailable",
        )

    @app.get(
        "/",
        tags=["🏠 Root"],
        summary="Root access",
        response_model=MessageResponse,
        response_class=ORJSONResponse,
        operation_id="root_access",
    )
    async def root() -> MessageResponse:
        """Root endpoint."""
        return MessageResponse(message=f"Welcome to {app_settings.APP_NAME}")

    return app


app = create_app()


if __name__ == "__main__":
    from uvicorn import run

    run(app, host=settings.HOST, port=settings.PORT, log_level="info")
