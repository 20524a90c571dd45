from app.services.filters import (
    PostFilter,
    build_filter,
    category_filter,
    featured_filter,
    search_filter,
)
from app.services.pagination import (
    Page,
    PageRequest,
    build_summary,
    paginate,
    parse_int,
    parse_page_params,
)

__all__ = [
    "Page",
    "PageRequest",
    "PostFilter",
    "build_filter",
    "build_summary",
    "category_filter",
    "featured_filter",
    "paginate",
    "parse_int",
    "parse_page_params",
    "search_filter",
]
