# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os
from collections.abc import AsyncGenerator, Callable
from typing import Any

# Must happen before app settings are imported anywhere
os.environ["LOG_TO_FILE"] = "false"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"

from pytest import fixture  # noqa: E402

from app.configs import Settings  # noqa: E402
from app.db import Database  # noqa: E402
from app.repositories import PostRepository  # noqa: E402

PostFactory = Callable[..., dict[str, Any]]


@fixture
def test_settings() -> Settings:
    """Settings pointing at a private in-memory store."""
    return Settings(DATABASE_URL="sqlite+aiosqlite://", LOG_TO_FILE=False)


@fixture
def make_post() -> PostFactory:
    """Factory for valid post payloads in wire (camelCase) form."""

    def factory(**overrides: Any) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "title": "Cloud Native Patterns",
            "writeDate": "2025-09-01",
            "category": "cloud",
            "author": "Jennifer Park",
            "authorTitle": "Cloud Solutions Architect",
            "readTime": "6 min read",
            "description": "A tour of patterns for running services in the cloud.",
            "imageUrl": "https://images.example.com/cloud.jpg",
            "moreInfoLink": "https://blog.example.com/cloud-native-patterns",
            "tags": ["cloud", "patterns"],
            "featured": False,
        }
        payload.update(overrides)
        return payload

    return factory


@fixture
async def database(test_settings: Settings) -> AsyncGenerator[Database]:
    """Initialized in-memory store, disposed after the test."""
    db = Database(test_settings)
    await db.init()
    yield db
    await db.close()


@fixture
async def repo(database: Database) -> AsyncGenerator[PostRepository]:
    """Repository bound to one session of the in-memory store."""
    async with database.session() as session:
        yield PostRepository(session)
