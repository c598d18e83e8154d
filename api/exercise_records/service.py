"""
Exercise record business logic.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from uuid import UUID

from fastapi import HTTPException, status

from core.clock import Clock
from core.errors import RecordNotFoundError, persistence_errors
from core.pagination import page_response, resolve_page
from core.wire import parse_uuid

from . import schemas
from .repository import ExerciseRecordRepository

logger = logging.getLogger(__name__)

MAX_EXERCISE_NAME_CHARS = 100
MAX_DURATION_MINUTES = 24 * 60
MAX_CALORIES_BURNED = 10_000


def validate_exercise_record(
    *,
    exercise_name: str,
    duration_minutes: int | None,
    calories_burned: int | None,
    recorded_at: datetime,
    now: datetime,
) -> None:
    problem = None
    if not exercise_name.strip():
        problem = "exercise name cannot be empty"
    elif len(exercise_name) > MAX_EXERCISE_NAME_CHARS:
        problem = f"exercise name exceeds maximum allowed length ({MAX_EXERCISE_NAME_CHARS} characters)"
    elif duration_minutes is not None and duration_minutes <= 0:
        problem = "duration must be positive"
    elif duration_minutes is not None and duration_minutes > MAX_DURATION_MINUTES:
        problem = "duration exceeds maximum allowed value (24 hours)"
    elif calories_burned is not None and calories_burned < 0:
        problem = "calories burned cannot be negative"
    elif calories_burned is not None and calories_burned > MAX_CALORIES_BURNED:
        problem = f"calories burned exceeds maximum allowed value ({MAX_CALORIES_BURNED})"
    elif recorded_at > now:
        problem = "recorded time cannot be in the future"

    if problem is not None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid exercise record data: {problem}.",
        )


def _to_exercise_record(row: dict) -> schemas.ExerciseRecord:
    return schemas.ExerciseRecord(
        id=str(row["id"]),
        user_id=str(row["user_id"]),
        exercise_name=str(row["exercise_name"]),
        duration_minutes=row.get("duration_minutes"),
        calories_burned=row.get("calories_burned"),
        recorded_at=row["recorded_at"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


async def create_exercise_record(
    payload: schemas.CreateExerciseRecordRequest,
    *,
    user_id: UUID,
    repository: ExerciseRecordRepository,
    clock: Clock,
) -> schemas.CreateExerciseRecordResponse:
    now = clock.now()
    recorded_at = payload.recorded_at or now
    if recorded_at.tzinfo is None:
        recorded_at = recorded_at.replace(tzinfo=timezone.utc)

    try:
        validate_exercise_record(
            exercise_name=payload.exercise_name,
            duration_minutes=payload.duration_minutes,
            calories_burned=payload.calories_burned,
            recorded_at=recorded_at,
            now=now,
        )
    except HTTPException as exc:
        logger.warning("exercise_record_rejected user_id=%s reason=%s", user_id, exc.detail)
        raise

    logger.info("exercise_record_create user_id=%s name=%s", user_id, payload.exercise_name)
    with persistence_errors("create exercise record", user_id=user_id):
        row = await repository.create(
            user_id=user_id,
            exercise_name=payload.exercise_name,
            duration_minutes=payload.duration_minutes,
            calories_burned=payload.calories_burned,
            recorded_at=recorded_at,
        )
    return schemas.CreateExerciseRecordResponse(exercise_record=_to_exercise_record(row))


async def list_exercise_records(
    payload: schemas.ListExerciseRecordsRequest,
    *,
    user_id: UUID,
    repository: ExerciseRecordRepository,
) -> schemas.ListExerciseRecordsResponse:
    page = resolve_page(payload.pagination)
    logger.info("exercise_record_list user_id=%s page=%s page_size=%s", user_id, page.number, page.size)
    with persistence_errors("list exercise records", user_id=user_id):
        rows = await repository.find_by_user(user_id, limit=page.size, offset=page.offset)
        total = await repository.count_by_user(user_id)
    return schemas.ListExerciseRecordsResponse(
        exercise_records=[_to_exercise_record(row) for row in rows],
        pagination=page_response(total, page),
    )


async def delete_exercise_record(
    payload: schemas.DeleteExerciseRecordRequest,
    *,
    user_id: UUID,
    repository: ExerciseRecordRepository,
) -> schemas.DeleteExerciseRecordResponse:
    record_id = parse_uuid(payload.id, "exercise record ID")

    logger.info("exercise_record_delete record_id=%s user_id=%s", record_id, user_id)
    with persistence_errors("delete exercise record", record_id=record_id, user_id=user_id):
        try:
            await repository.delete(record_id, user_id=user_id)
        except RecordNotFoundError as exc:
            logger.warning("exercise_record_not_found record_id=%s user_id=%s", record_id, user_id)
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Exercise record not found.",
            ) from exc
    return schemas.DeleteExerciseRecordResponse(success=True)
