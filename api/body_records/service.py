"""
Body record business logic.
"""

from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_UP, Decimal
from uuid import UUID

from fastapi import HTTPException, status

from core.errors import persistence_errors
from core.pagination import page_response, resolve_page
from core.wire import format_date, optional_float, parse_date

from . import schemas
from .repository import BodyRecordRepository

logger = logging.getLogger(__name__)

MAX_WEIGHT_KG = 500.0
MAX_BODY_FAT_PERCENTAGE = 100.0

# Both measurements are stored as NUMERIC(5,2).
MEASUREMENT_STEP = Decimal("0.01")


def round_measurement(value: float | None) -> float | None:
    """
    Round half-up to the stored precision so validation sees the value that
    will actually be persisted. Non-finite and huge values pass through
    unrounded for the range checks to reject.
    """
    if value is None or not math.isfinite(value) or abs(value) >= 1e15:
        return value
    return float(Decimal(str(value)).quantize(MEASUREMENT_STEP, rounding=ROUND_HALF_UP))


def validate_body_record(*, weight_kg: float | None, body_fat_percentage: float | None) -> None:
    problem = None
    if weight_kg is not None:
        if not math.isfinite(weight_kg) or weight_kg <= 0:
            problem = "weight must be positive"
        elif weight_kg > MAX_WEIGHT_KG:
            problem = f"weight exceeds maximum allowed value ({MAX_WEIGHT_KG:g} kg)"
    if problem is None and body_fat_percentage is not None:
        if not math.isfinite(body_fat_percentage) or body_fat_percentage < 0:
            problem = "body fat percentage cannot be negative"
        elif body_fat_percentage > MAX_BODY_FAT_PERCENTAGE:
            problem = "body fat percentage cannot exceed 100"

    if problem is not None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid body record data: {problem}.",
        )


def _to_body_record(row: dict) -> schemas.BodyRecord:
    return schemas.BodyRecord(
        id=str(row["id"]),
        user_id=str(row["user_id"]),
        date=format_date(row["date"]),
        weight_kg=optional_float(row.get("weight_kg")),
        body_fat_percentage=optional_float(row.get("body_fat_percentage")),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


async def create_body_record(
    payload: schemas.CreateBodyRecordRequest,
    *,
    user_id: UUID,
    repository: BodyRecordRepository,
) -> schemas.CreateBodyRecordResponse:
    record_date = parse_date(payload.date, "date")
    weight_kg = round_measurement(payload.weight_kg)
    body_fat_percentage = round_measurement(payload.body_fat_percentage)
    try:
        validate_body_record(weight_kg=weight_kg, body_fat_percentage=body_fat_percentage)
    except HTTPException as exc:
        logger.warning("body_record_rejected user_id=%s reason=%s", user_id, exc.detail)
        raise

    logger.info("body_record_save user_id=%s date=%s", user_id, record_date)
    with persistence_errors("save body record", user_id=user_id, date=record_date):
        row = await repository.save(
            user_id=user_id,
            record_date=record_date,
            weight_kg=weight_kg,
            body_fat_percentage=body_fat_percentage,
        )
    return schemas.CreateBodyRecordResponse(body_record=_to_body_record(row))


async def list_body_records(
    payload: schemas.ListBodyRecordsRequest,
    *,
    user_id: UUID,
    repository: BodyRecordRepository,
) -> schemas.ListBodyRecordsResponse:
    page = resolve_page(payload.pagination)
    logger.info("body_record_list user_id=%s page=%s page_size=%s", user_id, page.number, page.size)
    with persistence_errors("list body records", user_id=user_id):
        rows = await repository.find_by_user(user_id, limit=page.size, offset=page.offset)
        total = await repository.count_by_user(user_id)
    return schemas.ListBodyRecordsResponse(
        body_records=[_to_body_record(row) for row in rows],
        pagination=page_response(total, page),
    )


async def get_body_records_by_date_range(
    payload: schemas.GetBodyRecordsByDateRangeRequest,
    *,
    user_id: UUID,
    repository: BodyRecordRepository,
) -> schemas.GetBodyRecordsByDateRangeResponse:
    start_date = parse_date(payload.start_date, "start date")
    end_date = parse_date(payload.end_date, "end date")
    if start_date > end_date:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Start date must not be after end date.",
        )

    logger.info("body_record_range user_id=%s start=%s end=%s", user_id, start_date, end_date)
    with persistence_errors("list body records by date range", user_id=user_id):
        rows = await repository.find_by_user_and_date_range(
            user_id,
            start_date=start_date,
            end_date=end_date,
        )
    return schemas.GetBodyRecordsByDateRangeResponse(body_records=[_to_body_record(row) for row in rows])
