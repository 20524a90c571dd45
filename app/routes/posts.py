# app/routes/posts.py

"""
Blog Post Routes.

Provides CRUD endpoints and listing/search for blog posts.

Summary
-------
Endpoints include:
  - List posts (optional category and search filters, paginated)
  - Get featured posts
  - List posts by category
  - Search posts
  - Get post by id
  - Create post
  - Update post
  - Delete post
  - Replace all posts (bulk)
  - Seed sample posts

Dependencies
------------
  - `RepoDep`: Repository bound to the request's store session.
  - `PageDep`: Page request parsed leniently from `page`/`limit`.

Errors
------
Every error body has the shape `{"message": str}`: 400 for validation
errors, 404 for unknown ids, 500 for store failures.
"""

from logging import getLogger
from typing import Annotated, Any

from fastapi import APIRouter, Body, Query
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_201_CREATED

from app.configs import FEATURED_POSTS_LIMIT, file_logger
from app.configs.settings import POST_DELETED_MESSAGE
from app.data import SAMPLE_POSTS
from app.dependencies import PageDep, RepoDep
from app.errors import RecordNotFoundError, ValidationError
from app.models import PostDB
from app.schemas import (
    BulkReplaceResponse,
    CategoryPostsResponse,
    MessageResponse,
    PostListResponse,
    PostResponse,
    SearchPostsResponse,
    validate_post,
    validate_post_update,
    validate_posts,
)
from app.services import (
    build_filter,
    category_filter,
    featured_filter,
    paginate,
    search_filter,
)
from app.utils import response_datetime

router = APIRouter(prefix="/posts", tags=["📝 Posts"])

logger = file_logger(getLogger(__name__))

POST_EXAMPLE = {
    "id": "123e4567-e89b-12d3-a456-426614174000",
    "title": "Quantum Computing Breakthroughs: The Next Frontier in Technology",
    "writeDate": "2025-09-05",
    "category": "quantum",
    "author": "Dr. Robert Chen",
    "authorTitle": "Quantum Research Director",
    "readTime": "10 min read",
    "description": "Discover the latest breakthroughs in quantum computing...",
    "imageUrl": "https://images.unsplash.com/photo-1635070041078-e363dbe005cb",
    "moreInfoLink": "https://www.ibm.com/blog/quantum-computing",
    "tags": ["quantum-computing", "research"],
    "featured": False,
    "createdAt": "2025-09-05T10:00:00.000Z",
    "updatedAt": "2025-09-05T10:00:00.000Z",
}

PAGINATION_EXAMPLE = {
    "currentPage": 2,
    "totalPages": 2,
    "totalPosts": 14,
    "hasNext": False,
    "hasPrev": True,
}

NOT_FOUND_RESPONSE = {
    "description": "Not found",
    "content": {"application/json": {"example": {"message": "Blog post not found"}}},
}

BAD_REQUEST_RESPONSE = {
    "description": "Validation failed",
    "content": {
        "application/json": {
            "example": {
                "message": "Validation failed",
                "errors": [{"field": "title", "message": "Field required", "type": "missing"}],
            },
        },
    },
}


def db_post_to_response(db_post: PostDB) -> PostResponse:
    """
    Convert a `PostDB` instance to `PostResponse` with datetime serialization.

    Parameters
    ----------
    db_post : PostDB
        Stored post.

    Returns
    -------
    PostResponse
        Validated response model.
    """
    return PostResponse.model_validate(response_datetime(db_post))


def to_responses(db_posts: list[PostDB]) -> list[PostResponse]:
    return [db_post_to_response(db_post) for db_post in db_posts]


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=PostListResponse,
    summary="List posts",
    description=(
        "List posts newest first. `category` (`all` means no filter) and `q` "
        "(search text) are combined with AND."
    ),
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {"posts": [POST_EXAMPLE], "pagination": PAGINATION_EXAMPLE},
                },
            },
        },
    },
    operation_id="posts_list",
)
async def list_posts(
    repo: RepoDep,
    page_request: PageDep,
    category: Annotated[str | None, Query(description="Category id or `all`")] = None,
    q: Annotated[str | None, Query(description="Search text")] = None,
) -> PostListResponse:
    """
    List posts with optional category and search filters.

    Parameters
    ----------
    repo : PostRepository
        Repository dependency.
    page_request : PageRequest
        Requested page.
    category : str | None
        Category id; `all` or missing disables the filter.
    q : str | None
        Search text matched against title, description, author and tags.

    Returns
    -------
    PostListResponse
        Page of posts and pagination summary.
    """
    page = await paginate(repo, build_filter(category=category, query=q), page_request)
    return PostListResponse(posts=to_responses(page.posts), pagination=page.pagination)


@router.get(
    "/featured",
    response_class=ORJSONResponse,
    response_model=list[PostResponse],
    summary="Get featured posts",
    description=f"Return up to {FEATURED_POSTS_LIMIT} featured posts, newest first.",
    responses={200: {"content": {"application/json": {"example": [POST_EXAMPLE]}}}},
    operation_id="posts_featured",
)
async def get_featured_posts(repo: RepoDep) -> list[PostResponse]:
    """
    Get the newest featured posts.

    Returns
    -------
    list[PostResponse]
        At most `FEATURED_POSTS_LIMIT` posts.
    """
    db_posts = await repo.find_many(featured_filter(), skip=0, limit=FEATURED_POSTS_LIMIT)
    return to_responses(db_posts)


@router.get(
    "/category/{category}",
    response_class=ORJSONResponse,
    response_model=CategoryPostsResponse,
    summary="List posts by category",
    description="List posts of one category, newest first.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "posts": [POST_EXAMPLE],
                        "category": "quantum",
                        "pagination": PAGINATION_EXAMPLE,
                    },
                },
            },
        },
    },
    operation_id="posts_by_category",
)
async def list_posts_by_category(
    category: str,
    repo: RepoDep,
    page_request: PageDep,
) -> CategoryPostsResponse:
    """
    List posts in a category.

    Parameters
    ----------
    category : str
        Category id; `all` lists every post.
    repo : PostRepository
        Repository dependency.
    page_request : PageRequest
        Requested page.

    Returns
    -------
    CategoryPostsResponse
        Page of posts, the category and pagination summary.
    """
    page = await paginate(repo, category_filter(category), page_request)
    return CategoryPostsResponse(
        posts=to_responses(page.posts),
        category=category,
        pagination=page.pagination,
    )


@router.get(
    "/search/{query}",
    response_class=ORJSONResponse,
    response_model=SearchPostsResponse,
    summary="Search posts",
    description=(
        "Case-insensitive substring search over title, description, author and tags."
    ),
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "posts": [POST_EXAMPLE],
                        "query": "quantum",
                        "pagination": PAGINATION_EXAMPLE,
                    },
                },
            },
        },
    },
    operation_id="posts_search",
)
async def search_posts(
    query: str,
    repo: RepoDep,
    page_request: PageDep,
) -> SearchPostsResponse:
    """
    Search posts.

    Parameters
    ----------
    query : str
        Text to look for.
    repo : PostRepository
        Repository dependency.
    page_request : PageRequest
        Requested page.

    Returns
    -------
    SearchPostsResponse
        Page of matching posts, the query and pagination summary.
    """
    page = await paginate(repo, search_filter(query), page_request)
    return SearchPostsResponse(
        posts=to_responses(page.posts),
        query=query,
        pagination=page.pagination,
    )


@router.get(
    "/{post_id}",
    response_class=ORJSONResponse,
    response_model=PostResponse,
    summary="Get post by ID",
    description="Retrieve a single post by its identifier.",
    responses={
        200: {"content": {"application/json": {"example": POST_EXAMPLE}}},
        404: NOT_FOUND_RESPONSE,
    },
    operation_id="posts_get_by_id",
)
async def get_post(post_id: str, repo: RepoDep) -> PostResponse:
    """
    Get a post by ID.

    Raises
    ------
    RecordNotFoundError
        If no post has this ID.
    """
    return db_post_to_response(await repo.get_or_raise(post_id))


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=PostResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a new post",
    description="Create a post; `id`, `createdAt` and `updatedAt` are assigned by the store.",
    responses={
        201: {"content": {"application/json": {"example": POST_EXAMPLE}}},
        400: BAD_REQUEST_RESPONSE,
    },
    operation_id="posts_create",
)
async def create_post(
    payload: Annotated[Any, Body(description="Post to create")],
    repo: RepoDep,
) -> PostResponse:
    """
    Create a new post.

    Parameters
    ----------
    payload : Any
        Decoded JSON body.
    repo : PostRepository
        Repository dependency.

    Returns
    -------
    PostResponse
        Created post.

    Raises
    ------
    ValidationError
        If a required field is missing or empty.
    """
    result = validate_post(payload)
    if result.value is None:
        raise ValidationError(errors=result.errors)

    db_post = await repo.insert_one(result.value)
    logger.info(f"Created post {db_post.id}")
    return db_post_to_response(db_post)


@router.put(
    "/{post_id}",
    response_class=ORJSONResponse,
    response_model=PostResponse,
    summary="Update post",
    description="Replace the supplied fields of a post.",
    responses={
        200: {"content": {"application/json": {"example": POST_EXAMPLE}}},
        400: BAD_REQUEST_RESPONSE,
        404: NOT_FOUND_RESPONSE,
    },
    operation_id="posts_update",
)
async def update_post(
    post_id: str,
    payload: Annotated[Any, Body(description="Fields to replace")],
    repo: RepoDep,
) -> PostResponse:
    """
    Update a post.

    Raises
    ------
    ValidationError
        If a supplied field is empty or null.
    RecordNotFoundError
        If no post has this ID.
    """
    result = validate_post_update(payload)
    if result.value is None:
        raise ValidationError(errors=result.errors)

    db_post = await repo.update_by_id(post_id, result.value)
    if db_post is None:
        raise RecordNotFoundError
    return db_post_to_response(db_post)


@router.delete(
    "/{post_id}",
    response_class=ORJSONResponse,
    response_model=MessageResponse,
    summary="Delete post",
    description="Delete a post by its identifier.",
    responses={
        200: {"content": {"application/json": {"example": {"message": POST_DELETED_MESSAGE}}}},
        404: NOT_FOUND_RESPONSE,
    },
    operation_id="posts_delete",
)
async def delete_post(post_id: str, repo: RepoDep) -> MessageResponse:
    """
    Delete a post.

    Raises
    ------
    RecordNotFoundError
        If no post has this ID.
    """
    if not await repo.delete_by_id(post_id):
        raise RecordNotFoundError
    logger.info(f"Deleted post {post_id}")
    return MessageResponse(message=POST_DELETED_MESSAGE)


@router.post(
    "/bulk",
    response_class=ORJSONResponse,
    response_model=BulkReplaceResponse,
    status_code=HTTP_201_CREATED,
    summary="Replace all posts",
    description=(
        "Delete every post, then insert the posts in the body. Nothing is deleted "
        "when any element fails validation."
    ),
    responses={
        201: {
            "content": {
                "application/json": {
                    "example": {
                        "message": "1 blog posts inserted successfully",
                        "posts": [POST_EXAMPLE],
                    },
                },
            },
        },
        400: BAD_REQUEST_RESPONSE,
    },
    operation_id="posts_bulk_replace",
)
async def bulk_replace_posts(
    payload: Annotated[Any, Body(description="Array of posts")],
    repo: RepoDep,
) -> BulkReplaceResponse:
    """
    Replace the whole collection with the posts in the body.

    Raises
    ------
    ValidationError
        If the body is not an array or any element is invalid.
    """
    result = validate_posts(payload)
    if result.value is None:
        raise ValidationError(errors=result.errors)

    db_posts = await repo.replace_all(result.value)
    return BulkReplaceResponse(
        message=f"{len(db_posts)} blog posts inserted successfully",
        posts=to_responses(db_posts),
    )


@router.post(
    "/seed",
    response_class=ORJSONResponse,
    response_model=BulkReplaceResponse,
    status_code=HTTP_201_CREATED,
    summary="Seed sample posts",
    description="Replace the whole collection with the built-in sample posts.",
    operation_id="posts_seed",
)
async def seed_posts(repo: RepoDep) -> BulkReplaceResponse:
    """Replace the collection with `SAMPLE_POSTS`."""
    db_posts = await repo.replace_all(SAMPLE_POSTS)
    return BulkReplaceResponse(
        message=f"{len(db_posts)} blog posts inserted successfully",
        posts=to_responses(db_posts),
    )

