"""
Filter builder for blog post queries.

A ``PostFilter`` is an immutable conjunction of SQL predicates over
``PostDB``. Filters compose with ``&`` (logical AND) and an empty filter
matches every post.
"""

from dataclasses import dataclass

from sqlalchemy import ColumnElement, false, or_, true

from app.configs import ALL_CATEGORIES
from app.models.post import TAGS_INDEX_SEPARATOR, TEXT_INDEX_SEPARATOR, PostDB, fold


@dataclass(frozen=True)
class PostFilter:
    """Conjunction of predicates selecting a subset of posts."""

    clauses: tuple[ColumnElement[bool], ...] = ()

    def __and__(self, other: "PostFilter") -> "PostFilter":
        return PostFilter(self.clauses + other.clauses)


def category_filter(category: str | None) -> PostFilter:
    """
    Exact match on ``category``.

    ``None``, blank and the ``"all"`` sentinel impose no constraint.
    """
    if category is None or not category.strip() or category == ALL_CATEGORIES:
        return PostFilter()
    return PostFilter((PostDB.category == category,))


def search_filter(query: str | None) -> PostFilter:
    """
    Case-insensitive substring match on title, description, author or any tag.

    Both sides are case-folded in Python, so non-ASCII text matches the same
    way on every backend. LIKE wildcards in ``query`` are matched literally.
    A missing or empty query imposes no constraint; whitespace is searched for.
    """
    if not query:
        return PostFilter()

    folded = fold(query)
    conditions: list[ColumnElement[bool]] = []
    # Neither column can match across its separator.
    if TEXT_INDEX_SEPARATOR not in folded:
        conditions.append(PostDB.text_index.contains(folded, autoescape=True))
    if TAGS_INDEX_SEPARATOR not in folded:
        conditions.append(PostDB.tags_index.contains(folded, autoescape=True))

    if not conditions:
        return PostFilter((false(),))
    return PostFilter((or_(*conditions),))


def featured_filter() -> PostFilter:
    """Only posts flagged as featured."""
    return PostFilter((PostDB.featured == true(),))


def build_filter(category: str | None = None, query: str | None = None) -> PostFilter:
    """
    Combine the category and search filters with logical AND.

    A blank optional ``query`` is treated as absent.
    """
    if query is not None and not query.strip():
        query = None
    return category_filter(category) & search_filter(query)
