"""Category taxonomy entry model."""

from pydantic import BaseModel, Field


class Category(BaseModel):
    """A category the frontend can filter by."""

    id: str = Field(..., description="Category id stored on posts", examples=["ai"])
    name: str = Field(..., description="Display name", examples=["Artificial Intelligence"])
    color: str = Field(..., description="Display color", examples=["purple"])
