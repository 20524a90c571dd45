"""Repository layer for record store operations."""

from app.repositories.post import PostRepository, parse_post_id

__all__ = ["PostRepository", "parse_post_id"]
