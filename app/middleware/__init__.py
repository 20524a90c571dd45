from app.middleware.middleware import (
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    build_lifespan,
    configure_cors,
)

__all__ = [
    "LoggingMiddleware",
    "SecurityHeadersMiddleware",
    "build_lifespan",
    "configure_cors",
]
