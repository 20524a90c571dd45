"""
Blog post schemas.

This module defines the request and response models for blog posts along
with the non-raising validation functions used by the route layer.
"""

from dataclasses import dataclass, field
from typing import Annotated, Any
from uuid import UUID

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    model_validator,
)
from pydantic import ValidationError as PydanticValidationError

from app.errors.validation import format_errors


def _require_text(value: str) -> str:
    if not value.strip():
        mssg = "Field must not be empty"
        raise ValueError(mssg)
    return value


def _check_tags(tags: list[str]) -> list[str]:
    for tag in tags:
        if "\n" in tag or "\r" in tag:
            mssg = "Tags must not contain line breaks"
            raise ValueError(mssg)
    return tags


RequiredText = Annotated[str, AfterValidator(_require_text)]
Tags = Annotated[list[str], AfterValidator(_check_tags)]


class PostCreate(BaseModel):
    """Post creation model (request body, excludes store-assigned fields)."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: RequiredText = Field(
        ...,
        description="Post title",
        examples=["Quantum Computing Breakthroughs: The Next Frontier in Technology"],
    )
    write_date: RequiredText = Field(
        ...,
        alias="writeDate",
        description="Publication date (sort key)",
        examples=["2025-09-05"],
    )
    category: RequiredText = Field(..., description="Category id", examples=["quantum"])
    author: RequiredText = Field(..., description="Author name", examples=["Dr. Robert Chen"])
    author_title: RequiredText = Field(
        ...,
        alias="authorTitle",
        description="Author job title",
        examples=["Quantum Research Director"],
    )
    read_time: RequiredText = Field(
        ...,
        alias="readTime",
        description="Reading time",
        examples=["10 min read"],
    )
    description: RequiredText = Field(..., description="Post description")
    image_url: RequiredText = Field(..., alias="imageUrl", description="Cover image URL")
    more_info_link: RequiredText = Field(
        ...,
        alias="moreInfoLink",
        description="Link to the full article",
    )
    tags: Tags = Field(
        default_factory=list,
        description="Post tags",
        examples=[["quantum-computing", "research"]],
    )
    featured: bool = Field(default=False, description="Featured flag")


class PostUpdate(BaseModel):
    """Post update model (all fields optional, partial replacement)."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "title": "Updated: Quantum Computing Breakthroughs",
                "featured": True,
            },
        },
    )

    title: RequiredText | None = None
    write_date: RequiredText | None = Field(default=None, alias="writeDate")
    category: RequiredText | None = None
    author: RequiredText | None = None
    author_title: RequiredText | None = Field(default=None, alias="authorTitle")
    read_time: RequiredText | None = Field(default=None, alias="readTime")
    description: RequiredText | None = None
    image_url: RequiredText | None = Field(default=None, alias="imageUrl")
    more_info_link: RequiredText | None = Field(default=None, alias="moreInfoLink")
    tags: Tags | None = None
    featured: bool | None = None

    @model_validator(mode="after")
    def reject_explicit_nulls(self) -> "PostUpdate":
        """Reject ``null`` for fields that were sent, none of them are nullable."""
        nulls = sorted(
            (type(self).model_fields[name].alias or name)
            for name in self.model_fields_set
            if getattr(self, name) is None
        )
        if nulls:
            mssg = f"Fields may not be null: {', '.join(nulls)}"
            raise ValueError(mssg)
        return self

    def changes(self) -> dict[str, Any]:
        """Return only the fields supplied by the client, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)


class PostResponse(BaseModel):
    """Post response model (wire shape of a stored post)."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: UUID
    title: str
    write_date: str = Field(alias="writeDate")
    category: str
    author: str
    author_title: str = Field(alias="authorTitle")
    read_time: str = Field(alias="readTime")
    description: str
    image_url: str = Field(alias="imageUrl")
    more_info_link: str = Field(alias="moreInfoLink")
    tags: list[str]
    featured: bool
    created_at: str = Field(alias="createdAt")
    updated_at: str = Field(alias="updatedAt")


@dataclass(frozen=True)
class PostValidation[T]:
    """Outcome of validating a post payload: either ``value`` or ``errors``."""

    value: T | None = None
    errors: list[dict[str, Any]] = field(default_factory=list)


def validate_post(payload: object) -> PostValidation[PostCreate]:
    """
    Validate a creation payload without raising.

    Args:
        payload: Decoded JSON body.

    Returns:
        PostValidation[PostCreate]: The validated post, or the field errors.
    """
    try:
        return PostValidation(value=PostCreate.model_validate(payload))
    except PydanticValidationError as e:
        return PostValidation(errors=format_errors(e.errors()))


def validate_post_update(payload: object) -> PostValidation[PostUpdate]:
    """
    Validate a partial update payload without raising.

    Args:
        payload: Decoded JSON body.

    Returns:
        PostValidation[PostUpdate]: The validated changes, or the field errors.
    """
    try:
        return PostValidation(value=PostUpdate.model_validate(payload))
    except PydanticValidationError as e:
        return PostValidation(errors=format_errors(e.errors()))


def validate_posts(payload: object) -> PostValidation[list[PostCreate]]:
    """
    Validate a bulk payload (a JSON array of posts) without raising.

    Every element is checked; errors are reported with the element index as
    the first part of the field path.

    Returns:
        PostValidation[list[PostCreate]]: All posts, or every error found.
    """
    if not isinstance(payload, list):
        return PostValidation(
            errors=[{"field": "", "message": "Body must be an array of posts", "type": "list_type"}],
        )

    posts: list[PostCreate] = []
    errors: list[dict[str, Any]] = []
    for index, item in enumerate(payload):
        result = validate_post(item)
        if result.value is not None:
            posts.append(result.value)
            continue
        for error in result.errors:
            field_path = f"{index}.{error['field']}" if error["field"] else str(index)
            errors.append({**error, "field": field_path})

    if errors:
        return PostValidation(errors=errors)
    return PostValidation(value=posts)
