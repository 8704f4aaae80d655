"""FastAPI dependency injection — per-app settings."""

from __future__ import annotations

from fastapi import Request

from shs.config import Settings


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was created with."""
    return request.app.state.settings
