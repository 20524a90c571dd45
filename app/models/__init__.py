"""Database models for the application."""

from app.models.post import PostDB, build_tags_index, build_text_index, fold

__all__ = ["PostDB", "build_tags_index", "build_text_index", "fold"]
