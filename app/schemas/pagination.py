"""Pagination summary and paginated list response models."""

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.post import PostResponse


class PaginationSummary(BaseModel):
    """Pagination summary returned alongside every list result."""

    model_config = ConfigDict(populate_by_name=True)

    current_page: int = Field(alias="currentPage", description="1-based page number")
    total_pages: int = Field(alias="totalPages", ge=0, description="Number of pages")
    total_posts: int = Field(alias="totalPosts", ge=0, description="Matching records")
    has_next: bool = Field(alias="hasNext", description="More records after this page")
    has_prev: bool = Field(alias="hasPrev", description="Pages before this one")


class PostListResponse(BaseModel):
    """Page of posts with its pagination summary."""

    model_config = ConfigDict(populate_by_name=True)

    posts: list[PostResponse]
    pagination: PaginationSummary


class CategoryPostsResponse(PostListResponse):
    """Page of posts for a single category."""

    category: str


class SearchPostsResponse(PostListResponse):
    """Page of posts matching a search query."""

    query: str


class BulkReplaceResponse(BaseModel):
    """Result of replacing the whole collection."""

    message: str
    posts: list[PostResponse]


class MessageResponse(BaseModel):
    """Plain confirmation or error message."""

    message: str
