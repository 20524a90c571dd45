from collections.abc import Awaitable, Callable
from logging import Logger
from typing import cast

from fastapi import Request
from fastapi.responses import ORJSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from app.configs.settings import DEFAULT_ERROR_MESSAGE
from app.utils.helpers import host


class BaseAppError(Exception):
    """Base exception class for application errors."""

    def __init__(
        self,
        detail: str = DEFAULT_ERROR_MESSAGE,
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code

    def __str__(self) -> str:
        return self.detail


def create_exception_handler(
    logger: Logger,
) -> Callable[[Request, Exception], Awaitable[ORJSONResponse]]:
    """
    Create a standardized exception handler for the application.

    The response body is ``{"message": <detail>}`` plus any extra public
    attributes carried by the exception (for example validation ``errors``).

    Args:
        logger: Logger instance to use for logging exceptions.

    Returns:
        A callable exception handler.
    """

    async def handler(request: Request, exc: Exception) -> ORJSONResponse:
        # Default values
        status_code = HTTP_500_INTERNAL_SERVER_ERROR
        detail = DEFAULT_ERROR_MESSAGE

        # Extract from custom exception if available
        if isinstance(exc, BaseAppError):
            status_code = exc.status_code
            detail = exc.detail

        logger.warning(f"{detail} for ip: {host(request)} for endpoint {request.url.path}")

        content: dict[str, object] = {"message": detail}
        if isinstance(exc, BaseAppError):
            content.update(
                {
                    k: v
                    for k, v in exc.__dict__.items()
                    if k not in ("status_code", "detail") and not k.startswith("_")
                },
            )

        return ORJSONResponse(content=content, status_code=status_code)

    return handler


def create_http_exception_handler(
    logger: Logger,
) -> Callable[[Request, Exception], Awaitable[ORJSONResponse]]:
    """
    Create a handler rendering framework HTTP errors (unknown route, bad method)
    with the same ``{"message": ...}`` body as application errors.
    """

    async def handler(request: Request, exc: Exception) -> ORJSONResponse:
        http_exc = cast(StarletteHTTPException, exc)
        logger.warning(
            f"{http_exc.detail} for ip: {host(request)} for endpoint {request.url.path}",
        )
        return ORJSONResponse(
            content={"message": http_exc.detail},
            status_code=http_exc.status_code,
            headers=getattr(http_exc, "headers", None),
        )

    return handler
