"""
Auth business logic.
"""

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import HTTPException, status

from core.errors import RecordNotFoundError, persistence_errors
from core.settings import Settings

from . import schemas, security
from .repository import UserRepository

logger = logging.getLogger(__name__)


def _to_user(user_row: dict) -> schemas.User:
    return schemas.User(
        id=str(user_row["id"]),
        created_at=user_row["created_at"],
        updated_at=user_row["updated_at"],
    )


async def _find_or_create_user(subject_id: str, *, users: UserRepository) -> dict:
    with persistence_errors("retrieve user", subject_id=subject_id):
        try:
            return await users.find_by_subject_id(subject_id)
        except RecordNotFoundError:
            pass
        return await users.create(subject_id)


async def resolve_principal(
    access_token: str,
    *,
    settings: Settings,
    users: UserRepository,
) -> schemas.Principal:
    try:
        subject_id = security.decode_access_token(
            access_token,
            secret=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )
    except security.AuthSecurityError as exc:
        logger.warning("token_rejected reason=%s", exc)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
        ) from exc

    user_row = await _find_or_create_user(subject_id, users=users)
    return schemas.Principal(user_id=user_row["id"], subject_id=subject_id)


async def get_authenticated_user(
    *,
    user_id: UUID,
    users: UserRepository,
) -> schemas.GetAuthenticatedUserResponse:
    with persistence_errors("retrieve user", user_id=user_id):
        try:
            user_row = await users.find_by_id(user_id)
        except RecordNotFoundError as exc:
            logger.warning("user_not_found user_id=%s", user_id)
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="User not found.",
            ) from exc
    return schemas.GetAuthenticatedUserResponse(user=_to_user(user_row))
