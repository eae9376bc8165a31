"""
Request Dependencies.

Provides the settings object built at start-up to API endpoints.
"""

from typing import Annotated

from fastapi import Depends, Request

from seyali.server.core.config import Settings


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_started_at(request: Request) -> float:
    return request.app.state.started_at


SettingsDep = Annotated[Settings, Depends(get_settings)]
StartedAtDep = Annotated[float, Depends(get_started_at)]
