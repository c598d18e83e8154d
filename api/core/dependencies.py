"""
FastAPI dependencies for collaborators stored on `app.state` by the app factory.
"""

from __future__ import annotations

from fastapi import Request

from .clock import Clock
from .settings import Settings


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_clock(request: Request) -> Clock:
    return request.app.state.clock
