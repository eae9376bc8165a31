"""
API Schemas.

This module contains the Pydantic models returned by the Status Service.
These schemas define the interface contract between the service and the
Status Page.
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ConfigurationState(str, Enum):
    """Whether a backing-service connection string is present."""

    configured = "configured"
    not_configured = "not configured"

    @classmethod
    def from_setting(cls, value: str | None) -> "ConfigurationState":
        return cls.configured if value else cls.not_configured


class HealthReport(BaseModel):
    """
    Liveness report.

    Returned by ``GET /health`` on every call; it never fails.
    """
    status: str = Field(default="ok", description="Always 'ok' while the process serves requests.")
    timestamp: str = Field(..., description="Current UTC time in ISO-8601 with millisecond precision.")
    uptime: float = Field(..., ge=0, description="Seconds since the service process started.")
    environment: str = Field(..., description="Deployment environment name.", examples=["development"])


class Greeting(BaseModel):
    """Static greeting returned by ``GET /api/hello``."""
    message: str = Field(..., examples=["Welcome to Seyali API!"])
    version: str = Field(..., examples=["1.0.0"])


class StatusSnapshot(BaseModel):
    """
    Configuration presence summary returned by ``GET /api/status``.

    Recomputed on every request. The database and redis fields report only
    whether a connection string is set; no connection is attempted.
    """
    backend: str = Field(default="running")
    database: ConfigurationState
    redis: ConfigurationState

    model_config = ConfigDict(
        use_enum_values=True,
        json_schema_extra={
            "example": {"backend": "running", "database": "configured", "redis": "not configured"}
        },
    )


class ErrorBody(BaseModel):
    """Generic error payload."""

    error: str = Field(..., description="Human-readable error message", examples=["Not found"])
    error_id: Optional[int] = Field(
        default=None, description="Opaque identifier of a server fault, also written to the log"
    )


# OpenAPI documentation for the error answers every route can give.
ERROR_RESPONSES = {
    404: {"model": ErrorBody, "description": "Unknown path or method"},
    500: {"model": ErrorBody, "description": "Unexpected server fault"},
}
