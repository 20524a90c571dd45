# tests/routes/conftest.py
"""Pytest fixtures for route tests."""

from collections.abc import AsyncGenerator, Callable
from typing import Any

from asgi_lifespan import LifespanManager
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from pytest import fixture

from app.configs import Settings
from app.main import create_app


@fixture
def app(test_settings: Settings) -> FastAPI:
    """Fresh application with its own in-memory store."""
    return create_app(test_settings)


@fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client with the application lifespan running."""
    async with (
        LifespanManager(app),
        AsyncClient(base_url="http://test", transport=ASGITransport(app=app)) as ac,
    ):
        yield ac


@fixture
async def september_posts(
    client: AsyncClient,
    make_post: Callable[..., dict[str, Any]],
) -> list[dict[str, Any]]:
    """Replace the collection with 14 posts dated 2025-09-01 .. 2025-09-14."""
    posts = [
        make_post(
            title=f"Post {day:02d}",
            writeDate=f"2025-09-{day:02d}",
            category="ai" if day % 2 else "cloud",
            featured=day % 3 == 0,
            tags=[f"tag-{day:02d}"],
        )
        for day in range(1, 15)
    ]
    response = await client.post("/api/posts/bulk", json=posts)
    assert response.status_code == 201
    return response.json()["posts"]
