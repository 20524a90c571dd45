"""Static data: category taxonomy and sample posts."""

from app.data.categories import CATEGORY_TAXONOMY, available_categories
from app.data.sample_posts import SAMPLE_POSTS

__all__ = ["CATEGORY_TAXONOMY", "SAMPLE_POSTS", "available_categories"]
