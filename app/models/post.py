"""Blog post database model using SQLModel."""

from datetime import UTC, datetime
from typing import cast
from uuid import UUID, uuid4

from pydantic import ConfigDict
from sqlalchemy import JSON, Boolean, DateTime, Index, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String

# Separators for the denormalized search columns; a match never spans them.
TAGS_INDEX_SEPARATOR = "\n"
TEXT_INDEX_SEPARATOR = "\x1f"


def fold(text: str) -> str:
    """Case-fold ``text`` so that matching ignores case beyond ASCII."""
    return text.casefold()


def build_tags_index(tags: list[str]) -> str:
    """Case-fold the tags and join them into the searchable tag column value."""
    return TAGS_INDEX_SEPARATOR.join(fold(tag) for tag in tags)


def build_text_index(title: str, description: str, author: str) -> str:
    """Case-fold title, description and author into the searchable text column value."""
    return TEXT_INDEX_SEPARATOR.join(fold(value) for value in (title, description, author))


class PostDB(SQLModel, table=True):
    """
    Blog post database model.

    One row per post; ``tags`` is stored as a JSON array and mirrored into
    ``tags_index``, and the free-text fields are mirrored into ``text_index``,
    both case-folded so that search stays a plain LIKE on every backend.
    """

    __tablename__ = cast("declared_attr[str]", "posts")

    __table_args__ = (
        Index("ix_posts_category_write_date", "category", "write_date"),
        Index("ix_posts_featured_write_date", "featured", "write_date"),
    )

    # Primary key
    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Post ID",
    )

    # Required fields
    title: str = Field(
        sa_column=Column(String(300), nullable=False),
        description="Post title",
    )
    write_date: str = Field(
        sa_column=Column(String(40), nullable=False, index=True),
        description="Publication date string, primary sort key",
    )
    category: str = Field(
        sa_column=Column(String(100), nullable=False),
        description="Category id",
    )
    author: str = Field(
        sa_column=Column(String(200), nullable=False),
        description="Author name",
    )
    author_title: str = Field(
        sa_column=Column(String(200), nullable=False),
        description="Author job title",
    )
    read_time: str = Field(
        sa_column=Column(String(50), nullable=False),
        description="Human readable reading time",
    )
    description: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Post description",
    )
    image_url: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Cover image URL",
    )
    more_info_link: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Link to the full article",
    )

    # Optional fields
    tags: list[str] = Field(
        default_factory=list,
        sa_column=Column(JSON().with_variant(JSONB(), "postgresql"), nullable=False),
        description="Post tags",
    )
    featured: bool = Field(
        default=False,
        sa_column=Column(Boolean, nullable=False, default=False),
        description="Featured flag",
    )
    tags_index: str = Field(
        default="",
        sa_column=Column(Text, nullable=False, default=""),
        description="Case-folded tags joined by newline, used for search",
    )
    text_index: str = Field(
        default="",
        sa_column=Column(Text, nullable=False, default=""),
        description="Case-folded title, description and author, used for search",
    )

    # Timestamps (timezone-aware)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC),
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Creation timestamp",
    )
    updated_at: datetime | None = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True)),
        description="Last update timestamp",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "title": "Quantum Computing Breakthroughs",
                "write_date": "2025-09-05",
                "category": "quantum",
                "author": "Dr. Robert Chen",
                "author_title": "Quantum Research Director",
                "read_time": "10 min read",
                "description": "Discover the latest breakthroughs in quantum computing.",
                "image_url": "https://images.unsplash.com/photo-1635070041078-e363dbe005cb",
                "more_info_link": "https://www.ibm.com/blog/quantum-computing",
                "tags": ["quantum-computing", "research"],
                "featured": False,
            },
        },
    )
