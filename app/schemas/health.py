"""Pydantic schemas for health check responses."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Liveness plus database reachability for the recipe service."""

    status: Literal["ok", "degraded"] = Field(
        default="ok", description="'degraded' when the database cannot be reached"
    )
    service: str = Field(default="flavorshare-api")
    environment: str = Field(description="Current app environment (dev or prod)")
    database: Literal["connected", "disconnected"]
