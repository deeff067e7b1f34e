"""Pydantic schemas for telemetry endpoints."""

from typing import Literal
from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Liveness payload.

    Attributes:
        status: Always "healthy" while the process can answer.
        timestamp: Current UTC time, ISO 8601 with milliseconds.
        uptime: Seconds since the application started.
    """

    status: Literal["healthy"] = Field(default="healthy", description="Service status")
    timestamp: str = Field(..., description="Current UTC time")
    uptime: float = Field(..., ge=0, description="Uptime in seconds")
