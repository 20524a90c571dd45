"""Custom validation error handling for FastAPI."""

from logging import getLogger
from typing import Any, cast

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_400_BAD_REQUEST

from app.configs import file_logger
from app.errors.base import BaseAppError, create_exception_handler
from app.utils.helpers import host

logger = file_logger(getLogger(__name__))


class ValidationError(BaseAppError):
    """Raised when a request body is missing required fields or is malformed."""

    def __init__(
        self,
        detail: str = "Validation failed",
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(detail=detail, status_code=HTTP_400_BAD_REQUEST)
        self.errors = errors or []


def format_errors(errors: list[Any], skip_location: int = 0) -> list[dict[str, Any]]:
    """
    Flatten pydantic error dicts into ``{"field", "message", "type"}`` entries.

    Args:
        errors: Raw errors from ``ValidationError.errors()``.
        skip_location: Number of leading ``loc`` parts to drop (``body`` for requests).

    Returns:
        list[dict[str, Any]]: JSON-safe error descriptions.
    """
    formatted_errors = []
    for error in errors:
        formatted_error: dict[str, Any] = {
            "field": ".".join(str(loc) for loc in error.get("loc", [])[skip_location:]),
            "message": error.get("msg", "Invalid value"),
            "type": error.get("type", "validation_error"),
        }
        # ctx may hold exception instances, which are not JSON serializable
        if "ctx" in error:
            formatted_error["context"] = {
                key: str(value) if isinstance(value, Exception) else value
                for key, value in error["ctx"].items()
            }
        formatted_errors.append(formatted_error)
    return formatted_errors


async def request_validation_exception_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Handle FastAPI request validation errors (malformed JSON, wrong body type).

    Args:
        request: The incoming request.
        exc: The RequestValidationError exception.

    Returns:
        ORJSONResponse with status 400 and formatted validation errors.
    """
    exec_error = cast(RequestValidationError, exc)
    formatted_errors = format_errors(list(exec_error.errors()), skip_location=1)

    logger.warning(
        f"Validation error for ip: {host(request)} at endpoint {request.url.path}: {formatted_errors}",
    )

    return ORJSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={
            "message": "Validation failed",
            "errors": formatted_errors,
        },
    )


validation_exception_handler = create_exception_handler(logger)
