"""Post repository for record store operations."""

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from datetime import datetime
from logging import getLogger
from typing import Any
from uuid import UUID

from sqlalchemy import delete, desc, distinct, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.configs import DEFAULT_PAGE_SIZE, file_logger
from app.errors.database import RecordNotFoundError, StoreError
from app.models.post import PostDB, build_tags_index, build_text_index
from app.schemas.post import PostCreate, PostUpdate
from app.services.filters import PostFilter
from app.utils.helpers import utc_now

logger = file_logger(getLogger(__name__))

DISTINCT_FIELDS = frozenset({"category", "author", "write_date", "featured"})

# Newest first; created_at and id keep pages stable between equal dates.
DEFAULT_ORDER = (desc(PostDB.write_date), desc(PostDB.created_at), desc(PostDB.id))


def parse_post_id(post_id: str | UUID) -> UUID | None:
    """
    Parse a post identifier.

    Args:
        post_id: Identifier as received on the wire.

    Returns:
        UUID | None: Parsed id, or None when the value is not a valid id.
    """
    if isinstance(post_id, UUID):
        return post_id
    try:
        return UUID(post_id)
    except ValueError:
        return None


@contextmanager
def store_errors(action: str) -> Iterator[None]:
    """Re-raise driver failures as ``StoreError`` carrying the driver message."""
    try:
        yield
    except SQLAlchemyError as e:
        error_msg = str(e.orig) if getattr(e, "orig", None) else str(e)
        logger.exception(f"Store failure while trying to {action}")
        raise StoreError(detail=error_msg) from e


class PostRepository:
    """
    Repository for blog post records.

    This class implements the repository pattern for posts, providing the
    find/count/insert/update/delete operations the routes are built on.
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize repository with a store session.

        Args:
            session: Async database session
        """
        self.session = session

    async def find_many(
        self,
        post_filter: PostFilter,
        skip: int = 0,
        limit: int = DEFAULT_PAGE_SIZE,
    ) -> list[PostDB]:
        """
        Get posts matching a filter, newest ``write_date`` first.

        Args:
            post_filter: Predicate selecting the posts
            skip: Number of records to skip
            limit: Maximum number of records to return (<= 0 returns nothing)

        Returns:
            list[PostDB]: Matching posts
        """
        if limit <= 0:
            return []

        query = (
            select(PostDB)
            .where(*post_filter.clauses)
            .order_by(*DEFAULT_ORDER)
            .offset(max(skip, 0))
            .limit(limit)
        )
        with store_errors("list posts"):
            result = await self.session.execute(query)
            posts = list(result.scalars().all())

        logger.info(f"Found {len(posts)} posts (skip={skip}, limit={limit})")
        return posts

    async def count(self, post_filter: PostFilter) -> int:
        """
        Count posts matching a filter.

        Returns:
            int: Number of matching posts
        """
        statement = select(func.count()).select_from(PostDB).where(*post_filter.clauses)
        with store_errors("count posts"):
            result = await self.session.execute(statement)
            count = result.scalar()
        return count if count is not None else 0

    async def find_by_id(self, post_id: str | UUID) -> PostDB | None:
        """
        Get post by ID.

        Args:
            post_id: Post identifier (malformed ids are never found)

        Returns:
            PostDB | None: Post if found, None otherwise
        """
        record_id = parse_post_id(post_id)
        if record_id is None:
            return None

        with store_errors("load post"):
            # pyrefly: ignore [bad-argument-type]
            result = await self.session.execute(select(PostDB).where(PostDB.id == record_id))
            return result.scalar_one_or_none()

    async def get_or_raise(self, post_id: str | UUID) -> PostDB:
        """
        Get post by ID or raise.

        Raises:
            RecordNotFoundError: If no post has this ID
        """
        post = await self.find_by_id(post_id)
        if post is None:
            raise RecordNotFoundError
        return post

    async def insert_one(self, post: PostCreate) -> PostDB:
        """
        Create a new post; the store assigns ``id`` and timestamps.

        Returns:
            PostDB: Created post
        """
        created = await self.insert_many([post])
        return created[0]

    async def insert_many(self, posts: Sequence[PostCreate]) -> list[PostDB]:
        """
        Create several posts in one flush, preserving input order.

        Returns:
            list[PostDB]: Created posts
        """
        now = utc_now()
        db_posts = [self._to_record(post, now) for post in posts]
        if not db_posts:
            return []

        with store_errors("save posts"):
            self.session.add_all(db_posts)
            await self.session.flush()
            for db_post in db_posts:
                await self.session.refresh(db_post)

        logger.info(f"Inserted {len(db_posts)} posts")
        return db_posts

    async def update_by_id(self, post_id: str | UUID, changes: PostUpdate) -> PostDB | None:
        """
        Replace the supplied fields of a post and refresh ``updated_at``.

        Args:
            post_id: Post identifier
            changes: Partial update; unset fields are left untouched

        Returns:
            PostDB | None: Updated post if found, None otherwise
        """
        db_post = await self.find_by_id(post_id)
        if db_post is None:
            return None

        update_data: dict[str, Any] = changes.changes()
        if "tags" in update_data:
            update_data["tags_index"] = build_tags_index(update_data["tags"])
        update_data["updated_at"] = utc_now()

        for key, value in update_data.items():
            setattr(db_post, key, value)
        db_post.text_index = build_text_index(db_post.title, db_post.description, db_post.author)

        with store_errors("update post"):
            await self.session.flush()
            await self.session.refresh(db_post)

        return db_post

    async def delete_by_id(self, post_id: str | UUID) -> bool:
        """
        Delete post by ID.

        Returns:
            bool: True if the post was deleted, False if not found
        """
        db_post = await self.find_by_id(post_id)
        if db_post is None:
            return False

        with store_errors("delete post"):
            await self.session.delete(db_post)
            await self.session.flush()

        return True

    async def delete_all(self) -> int:
        """
        Delete every post.

        Returns:
            int: Number of deleted posts
        """
        with store_errors("delete posts"):
            result = await self.session.execute(delete(PostDB))
            await self.session.flush()

        deleted = max(getattr(result, "rowcount", 0) or 0, 0)
        logger.info(f"Deleted {deleted} posts")
        return deleted

    async def replace_all(self, posts: Sequence[PostCreate]) -> list[PostDB]:
        """
        Replace the whole collection: delete every post, then insert ``posts``.

        Concurrent readers using another session may observe the collection
        empty between the two steps.

        Returns:
            list[PostDB]: Inserted posts
        """
        await self.delete_all()
        return await self.insert_many(posts)

    async def distinct_values(self, field_name: str) -> set[Any]:
        """
        Distinct stored values of a scalar post field.

        Args:
            field_name: One of ``DISTINCT_FIELDS``

        Returns:
            set[Any]: Distinct values

        Raises:
            ValueError: If the field is not supported
        """
        if field_name not in DISTINCT_FIELDS:
            mssg = f"Unsupported distinct field: {field_name}"
            raise ValueError(mssg)

        column = getattr(PostDB, field_name)
        with store_errors("read distinct values"):
            result = await self.session.execute(select(distinct(column)))
            return set(result.scalars().all())

    @staticmethod
    def _to_record(post: PostCreate, created_at: datetime) -> PostDB:
        data = post.model_dump()
        return PostDB(
            **data,
            tags_index=build_tags_index(data["tags"]),
            text_index=build_text_index(data["title"], data["description"], data["author"]),
            created_at=created_at,
            updated_at=created_at,
        )
