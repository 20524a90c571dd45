"""
Pagination helpers shared by every list-style endpoint.

Raw ``page``/``limit`` query values are coerced here rather than by FastAPI
so that malformed input falls back to the defaults instead of failing.
"""

from dataclasses import dataclass
from math import ceil
from typing import TYPE_CHECKING

from app.configs import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from app.models.post import PostDB
from app.schemas.pagination import PaginationSummary
from app.services.filters import PostFilter

if TYPE_CHECKING:
    from app.repositories.post import PostRepository

# Largest OFFSET/LIMIT every supported store accepts (signed 64-bit).
MAX_QUERY_INT = 2**63 - 1


@dataclass(frozen=True)
class PageRequest:
    """
    A requested page.

    Attributes:
        page: 1-based page number (always >= 1).
        limit: Page size; zero or negative yields an empty page.
    """

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_PAGE_SIZE

    @property
    def skip(self) -> int:
        if self.limit <= 0:
            return 0
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class Page:
    """One page of posts and its summary."""

    posts: list[PostDB]
    pagination: PaginationSummary


def parse_int(raw: str | int | None, default: int) -> int:
    """Parse an integer query value, falling back to ``default`` when malformed."""
    if raw is None:
        return default
    if isinstance(raw, int):
        return raw
    try:
        return int(raw.strip())
    except ValueError:
        return default


def parse_page_params(page: str | int | None, limit: str | int | None) -> PageRequest:
    """
    Build a ``PageRequest`` from raw query values.

    Non-numeric or missing values use the defaults, and ``page <= 0`` is
    clamped to 1. Oversized values are clamped so that ``skip`` and ``limit``
    stay within ``MAX_QUERY_INT``.
    """
    page_size = min(parse_int(limit, DEFAULT_PAGE_SIZE), MAX_QUERY_INT)
    last_page = MAX_QUERY_INT // page_size + 1 if page_size > 0 else MAX_QUERY_INT
    page_number = min(max(parse_int(page, DEFAULT_PAGE), 1), last_page)
    return PageRequest(page=page_number, limit=page_size)


def build_summary(request: PageRequest, returned: int, total: int) -> PaginationSummary:
    """
    Compute the pagination summary for a page holding ``returned`` records.

    Args:
        request: The page that was fetched.
        returned: Number of records on the page.
        total: Number of records matching the filter.

    Returns:
        PaginationSummary: currentPage, totalPages, totalPosts, hasNext, hasPrev.
    """
    total_pages = ceil(total / request.limit) if request.limit > 0 else 0
    return PaginationSummary(
        current_page=request.page,
        total_pages=total_pages,
        total_posts=total,
        has_next=request.skip + returned < total,
        has_prev=request.page > 1,
    )


async def paginate(
    repo: "PostRepository",
    post_filter: PostFilter,
    request: PageRequest,
) -> Page:
    """Fetch one page of posts matching ``post_filter`` plus the total count."""
    posts = await repo.find_many(post_filter, skip=request.skip, limit=request.limit)
    total = await repo.count(post_filter)
    return Page(posts=posts, pagination=build_summary(request, len(posts), total))
