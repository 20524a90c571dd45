from logging import getLogger

from starlette.status import HTTP_404_NOT_FOUND, HTTP_500_INTERNAL_SERVER_ERROR

from app.configs import file_logger
from app.configs.settings import POST_NOT_FOUND_MESSAGE
from app.errors.base import BaseAppError, create_exception_handler

logger = file_logger(getLogger(__name__))


class StoreError(BaseAppError):
    """Base exception for record store errors (connection or query failure)."""

    def __init__(
        self,
        detail: str = "Store Error",
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
    ) -> None:
        super().__init__(detail, status_code)


class StoreInitializationError(StoreError):
    """Exception raised when the store schema cannot be created."""

    def __init__(
        self,
        detail: str = "Failed to initialize the store",
    ) -> None:
        super().__init__(detail, HTTP_500_INTERNAL_SERVER_ERROR)


class RecordNotFoundError(StoreError):
    """Exception raised when a record is not found."""

    def __init__(
        self,
        detail: str = POST_NOT_FOUND_MESSAGE,
    ) -> None:
        super().__init__(detail, HTTP_404_NOT_FOUND)


store_exception_handler = create_exception_handler(logger)
