# tests/main/conftest.py
"""Pytest configuration and fixtures for main tests."""

from collections.abc import AsyncGenerator

from asgi_lifespan import LifespanManager
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from pytest import fixture

from app.configs import Settings
from app.main import create_app


@fixture
def main_app(test_settings: Settings) -> FastAPI:
    return create_app(test_settings)


@fixture
async def client(main_app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client with the application lifespan running."""
    async with (
        LifespanManager(main_app),
        AsyncClient(base_url="http://test", transport=ASGITransport(app=main_app)) as ac,
    ):
        yield ac


@fixture
async def client_without_store(main_app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Client for an application whose startup never ran."""
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=main_app),
    ) as ac:
        yield ac
