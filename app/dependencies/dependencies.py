# app/dependencies/dependencies.py

"""Request dependencies resolving the store handle and repositories."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Query, Request
from sqlmodel.ext.asyncio.session import AsyncSession

from app.db import Database
from app.repositories import PostRepository
from app.services.pagination import PageRequest, parse_page_params


def get_database(request: Request) -> Database:
    """Return the store handle created at startup."""
    return request.app.state.database


async def get_session(
    database: Annotated[Database, Depends(get_database)],
) -> AsyncGenerator[AsyncSession]:
    """
    Dependency for getting a transactional session.

    Yields:
        AsyncSession: Session committed after the handler returns
    """
    async with database.session() as session:
        yield session


def get_post_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> PostRepository:
    """Resolve the `PostRepository` dependency bound to the request session."""
    return PostRepository(session)


def get_page_request(
    page: Annotated[str | None, Query(description="1-based page number")] = None,
    limit: Annotated[str | None, Query(description="Posts per page")] = None,
) -> PageRequest:
    """
    Dependency to construct `PageRequest` from query parameters.

    Values are taken as strings so that malformed numbers fall back to the
    defaults instead of being rejected.
    """
    return parse_page_params(page, limit)


RepoDep = Annotated[PostRepository, Depends(get_post_repository)]
PageDep = Annotated[PageRequest, Depends(get_page_request)]
