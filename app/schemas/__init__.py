from app.schemas.category import Category
from app.schemas.health import HealthCheckResponse
from app.schemas.pagination import (
    BulkReplaceResponse,
    CategoryPostsResponse,
    MessageResponse,
    PaginationSummary,
    PostListResponse,
    SearchPostsResponse,
)
from app.schemas.post import (
    PostCreate,
    PostResponse,
    PostUpdate,
    PostValidation,
    validate_post,
    validate_post_update,
    validate_posts,
)

__all__ = [
    "BulkReplaceResponse",
    "Category",
    "CategoryPostsResponse",
    "HealthCheckResponse",
    "MessageResponse",
    "PaginationSummary",
    "PostCreate",
    "PostListResponse",
    "PostResponse",
    "PostUpdate",
    "PostValidation",
    "SearchPostsResponse",
    "validate_post",
    "validate_post_update",
    "validate_posts",
]
