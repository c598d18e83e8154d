"""
Auth dependencies for protected FastAPI routes.

`get_current_user` is the authentication stage of the request pipeline: it
validates the bearer token, resolves (or lazily creates) the user row and
hands the resulting `Principal` to the handler as an explicit parameter.
"""

from __future__ import annotations

import logging

from fastapi import Depends, Header, HTTPException, Request, status

from core.dependencies import get_settings
from core.settings import Settings

from . import service
from .repository import UserRepository
from .schemas import Principal

logger = logging.getLogger(__name__)


def _unauthorized(detail: str, *, reason: str) -> HTTPException:
    logger.warning("auth_rejected reason=%s", reason)
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


def _extract_bearer_token(authorization: str | None) -> str:
    raw = (authorization or "").strip()
    if not raw:
        raise _unauthorized("Missing Authorization header.", reason="missing_header")

    scheme, _, token = raw.partition(" ")
    token = token.strip()
    if not token:
        raise _unauthorized("Invalid Authorization header format.", reason="malformed_header")
    if scheme.lower() != "bearer":
        raise _unauthorized("Authorization must be: Bearer <token>.", reason="unsupported_scheme")
    return token


async def get_bearer_token(authorization: str | None = Header(default=None)) -> str:
    return _extract_bearer_token(authorization)


def get_user_repository(request: Request) -> UserRepository:
    return request.app.state.users


async def get_current_user(
    access_token: str = Depends(get_bearer_token),
    settings: Settings = Depends(get_settings),
    users: UserRepository = Depends(get_user_repository),
) -> Principal:
    return await service.resolve_principal(access_token, settings=settings, users=users)
