from collections.abc import MutableMapping
from datetime import UTC, datetime
from typing import Any

from fastapi import FastAPI, Request
from fastapi.routing import APIRoute
from starlette.routing import BaseRoute, Match, Route

from app.models.post import PostDB


def host(request: Request) -> str:
    """Return the host IP address."""
    return request.client.host if request.client else "unknown"


def today_str() -> str:
    """Return today's date as a string."""
    return datetime.now(datetime.now().astimezone().tzinfo).strftime(
        "%Y-%m-%d %H:%M:%S",
    )


def utc_now() -> datetime:
    """Return the current UTC time truncated to milliseconds."""
    now = datetime.now(tz=UTC)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def get_summary(request: Request) -> str | None:
    """Extract route summary from request."""

    scope: MutableMapping[str, Any] = request.scope
    app: FastAPI = scope["app"]
    routes: list[BaseRoute] = app.routes

    summary = None
    for route in routes:
        is_api_route = type(route) is APIRoute
        is_route = type(route) is Route
        if is_api_route and route.matches(scope)[0] == Match.FULL:
            summary = route.summary
            break
        if is_route and route.matches(scope)[0] == Match.FULL:
            summary = route.name
            break

    return summary


def iso_timestamp(value: datetime) -> str:
    """
    Format a stored timestamp as ISO-8601 UTC with a ``Z`` suffix.

    Naive values (SQLite drops tzinfo) are taken to be UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def response_datetime(db: PostDB) -> dict[str, Any]:
    """
    Format datetime for response.

    Args:
        db: Database model

    Returns:
        dict[str, Any]: Dictionary with formatted datetimes
    """
    db_dict = db.model_dump(exclude={"tags_index", "text_index"})

    db_dict["created_at"] = iso_timestamp(db.created_at)
    db_dict["updated_at"] = iso_timestamp(db.updated_at or db.created_at)

    return db_dict
