"""Application settings and configuration constants.

This module contains application settings, constants, and configuration
values for the blog posts backend application.
"""

from logging import Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path

from pydantic_settings.main import BaseSettings, SettingsConfigDict
from pythonjsonlogger.json import JsonFormatter

ENV_FILE = Path(__file__).parent.parent.parent / ".env"

# --- Constants ---
API_PREFIX = "/api"

# Pagination constants
DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 12

# Listing constants
FEATURED_POSTS_LIMIT = 3
ALL_CATEGORIES = "all"

# Response constants
DEFAULT_ERROR_MESSAGE = "Internal Server Error"
POST_NOT_FOUND_MESSAGE = "Blog post not found"
POST_DELETED_MESSAGE = "Blog post deleted successfully"

# File logging
LOG_DIR = Path("logs")
LOG_FILE = LOG_DIR / "app.log"
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 3


class Settings(BaseSettings):
    """Application settings with validation and default values."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "Blog Posts Backend"
    DEBUG: bool = False

    # Environment
    ENVIRONMENT: str = "development"
    LOG_TO_FILE: bool = True
    PRODUCTION_FRONTEND_URL: str | None = None

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 5000

    # Store Configuration
    DATABASE_URL: str = "sqlite+aiosqlite:///./blog_posts.db"
    DATABASE_ECHO: bool = False
    POOL_SIZE: int = 5
    MAX_OVERFLOW: int = 10
    POOL_TIMEOUT: int = 30  # seconds
    POOL_RECYCLE: int = 1800  # 30 minutes


settings = Settings()


def file_logger(logger: Logger) -> Logger:
    """
    Attach the rotating JSON file handler to ``logger`` when file logging is on.

    Calling it more than once for the same logger is a no-op.
    """
    if not settings.LOG_TO_FILE:
        return logger

    if any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
        return logger

    LOG_DIR.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        LOG_FILE,
        maxBytes=LOG_MAX_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    logger.addHandler(handler)
    return logger
