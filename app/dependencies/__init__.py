from app.dependencies.dependencies import (
    PageDep,
    RepoDep,
    get_database,
    get_page_request,
    get_post_repository,
    get_session,
)

__all__ = [
    "PageDep",
    "RepoDep",
    "get_database",
    "get_page_request",
    "get_post_repository",
    "get_session",
]
