from typing import Literal

from pydantic import BaseModel


class HealthCheckResponse(BaseModel):
    """Service health status."""

    status: Literal["ok", "degraded"]
    version: str
    timestamp: str
    database: Literal["connected", "unavailable"]
