from app.configs.settings import (
    ALL_CATEGORIES,
    API_PREFIX,
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    FEATURED_POSTS_LIMIT,
    Settings,
    file_logger,
    settings,
)

__all__ = [
    "ALL_CATEGORIES",
    "API_PREFIX",
    "DEFAULT_PAGE",
    "DEFAULT_PAGE_SIZE",
    "FEATURED_POSTS_LIMIT",
    "Settings",
    "file_logger",
    "settings",
]
