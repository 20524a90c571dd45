from app.errors.base import BaseAppError, create_exception_handler, create_http_exception_handler
from app.errors.database import (
    RecordNotFoundError,
    StoreError,
    StoreInitializationError,
    store_exception_handler,
)
from app.errors.validation import (
    ValidationError,
    format_errors,
    request_validation_exception_handler,
    validation_exception_handler,
)

__all__ = [
    "BaseAppError",
    "RecordNotFoundError",
    "StoreError",
    "StoreInitializationError",
    "ValidationError",
    "create_exception_handler",
    "create_http_exception_handler",
    "format_errors",
    "request_validation_exception_handler",
    "store_exception_handler",
    "validation_exception_handler",
]
