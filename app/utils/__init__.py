"""Utility helper functions."""

from app.utils.helpers import (
    get_summary,
    host,
    iso_timestamp,
    response_datetime,
    today_str,
    utc_now,
)

__all__ = [
    "get_summary",
    "host",
    "iso_timestamp",
    "response_datetime",
    "today_str",
    "utc_now",
]
