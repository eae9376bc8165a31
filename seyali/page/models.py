"""Views of the Status Service payloads as the page consumes them.

The page tolerates missing optional fields and ignores unknown ones, so an
older or newer service still renders.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class HealthView(BaseModel):
    status: Optional[str] = None
    timestamp: Optional[str] = None
    uptime: Optional[float] = None
    environment: Optional[str] = None

    model_config = ConfigDict(extra="allow")


class GreetingView(BaseModel):
    message: str
    version: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class StatusView(BaseModel):
    backend: str
    database: str
    redis: str

    model_config = ConfigDict(extra="ignore")
