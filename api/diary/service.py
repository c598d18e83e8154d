"""
Diary business logic.

Entries are owner-scoped: every lookup passes the caller's user id down to
SQL, so an id belonging to someone else behaves exactly like an unknown id.
"""

from __future__ import annotations

import logging
from datetime import date
from uuid import UUID

from fastapi import HTTPException, status

from core.clock import Clock
from core.errors import RecordNotFoundError, persistence_errors
from core.pagination import page_response, resolve_page
from core.wire import format_date, parse_date, parse_uuid

from . import schemas
from .repository import DiaryEntryRepository

logger = logging.getLogger(__name__)

MAX_TITLE_CHARS = 200
MAX_CONTENT_CHARS = 10_000


def validate_diary_entry(*, title: str | None, content: str, entry_date: date | None, today: date) -> None:
    """
    `entry_date=None` skips the date rule (updates never change the date).
    """
    problem = None
    if not content.strip():
        problem = "content cannot be empty"
    elif len(content) > MAX_CONTENT_CHARS:
        problem = f"content exceeds maximum allowed length ({MAX_CONTENT_CHARS} characters)"
    elif title is not None and len(title) > MAX_TITLE_CHARS:
        problem = f"title exceeds maximum allowed length ({MAX_TITLE_CHARS} characters)"
    elif entry_date is not None and entry_date > today:
        problem = "entry date cannot be in the future"

    if problem is not None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid diary entry data: {problem}.",
        )


def _to_diary_entry(row: dict) -> schemas.DiaryEntry:
    return schemas.DiaryEntry(
        id=str(row["id"]),
        user_id=str(row["user_id"]),
        title=row.get("title"),
        content=str(row["content"]),
        entry_date=format_date(row["entry_date"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def _not_found(entry_id: UUID, user_id: UUID) -> HTTPException:
    logger.warning("diary_entry_not_found entry_id=%s user_id=%s", entry_id, user_id)
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Diary entry not found.")


async def create_diary_entry(
    payload: schemas.CreateDiaryEntryRequest,
    *,
    user_id: UUID,
    repository: DiaryEntryRepository,
    clock: Clock,
) -> schemas.CreateDiaryEntryResponse:
    entry_date = parse_date(payload.entry_date, "entry date")
    try:
        validate_diary_entry(
            title=payload.title,
            content=payload.content,
            entry_date=entry_date,
            today=clock.now().date(),
        )
    except HTTPException as exc:
        logger.warning("diary_entry_rejected user_id=%s reason=%s", user_id, exc.detail)
        raise

    logger.info("diary_entry_create user_id=%s entry_date=%s", user_id, entry_date)
    with persistence_errors("create diary entry", user_id=user_id):
        row = await repository.create(
            user_id=user_id,
            title=payload.title,
            content=payload.content,
            entry_date=entry_date,
        )
    return schemas.CreateDiaryEntryResponse(diary_entry=_to_diary_entry(row))


async def update_diary_entry(
    payload: schemas.UpdateDiaryEntryRequest,
    *,
    user_id: UUID,
    repository: DiaryEntryRepository,
    clock: Clock,
) -> schemas.UpdateDiaryEntryResponse:
    entry_id = parse_uuid(payload.id, "diary entry ID")
    try:
        validate_diary_entry(
            title=payload.title,
            content=payload.content,
            entry_date=None,
            today=clock.now().date(),
        )
    except HTTPException as exc:
        logger.warning("diary_entry_rejected entry_id=%s user_id=%s reason=%s", entry_id, user_id, exc.detail)
        raise

    logger.info("diary_entry_update entry_id=%s user_id=%s", entry_id, user_id)
    with persistence_errors("update diary entry", entry_id=entry_id, user_id=user_id):
        try:
            row = await repository.update(
                entry_id,
                user_id=user_id,
                title=payload.title,
                content=payload.content,
            )
        except RecordNotFoundError as exc:
            raise _not_found(entry_id, user_id) from exc
    return schemas.UpdateDiaryEntryResponse(diary_entry=_to_diary_entry(row))


async def get_diary_entry(
    payload: schemas.GetDiaryEntryRequest,
    *,
    user_id: UUID,
    repository: DiaryEntryRepository,
) -> schemas.GetDiaryEntryResponse:
    entry_id = parse_uuid(payload.id, "diary entry ID")

    logger.info("diary_entry_get entry_id=%s user_id=%s", entry_id, user_id)
    with persistence_errors("get diary entry", entry_id=entry_id, user_id=user_id):
        try:
            row = await repository.find_by_id(entry_id, user_id=user_id)
        except RecordNotFoundError as exc:
            raise _not_found(entry_id, user_id) from exc
    return schemas.GetDiaryEntryResponse(diary_entry=_to_diary_entry(row))


async def list_diary_entries(
    payload: schemas.ListDiaryEntriesRequest,
    *,
    user_id: UUID,
    repository: DiaryEntryRepository,
) -> schemas.ListDiaryEntriesResponse:
    page = resolve_page(payload.pagination)
    logger.info("diary_entry_list user_id=%s page=%s page_size=%s", user_id, page.number, page.size)
    with persistence_errors("list diary entries", user_id=user_id):
        rows = await repository.find_by_user(user_id, limit=page.size, offset=page.offset)
        total = await repository.count_by_user(user_id)
    return schemas.ListDiaryEntriesResponse(
        diary_entries=[_to_diary_entry(row) for row in rows],
        pagination=page_response(total, page),
    )


async def delete_diary_entry(
    payload: schemas.DeleteDiaryEntryRequest,
    *,
    user_id: UUID,
    repository: DiaryEntryRepository,
) -> schemas.DeleteDiaryEntryResponse:
    entry_id = parse_uuid(payload.id, "diary entry ID")

    logger.info("diary_entry_delete entry_id=%s user_id=%s", entry_id, user_id)
    with persistence_errors("delete diary entry", entry_id=entry_id, user_id=user_id):
        try:
            await repository.delete(entry_id, user_id=user_id)
        except RecordNotFoundError as exc:
            raise _not_found(entry_id, user_id) from exc
    return schemas.DeleteDiaryEntryResponse(success=True)
