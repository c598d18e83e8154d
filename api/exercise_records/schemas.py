"""
ExerciseRecordService messages.
"""

from __future__ import annotations

from datetime import datetime

from core.pagination import PageRequest, PageResponse
from core.wire import WireModel


class ExerciseRecord(WireModel):
    id: str
    user_id: str
    exercise_name: str
    duration_minutes: int | None = None
    calories_burned: int | None = None
    recorded_at: datetime
    created_at: datetime
    updated_at: datetime


class CreateExerciseRecordRequest(WireModel):
    exercise_name: str = ""
    duration_minutes: int | None = None
    calories_burned: int | None = None
    # Defaults to the server's current time when omitted.
    recorded_at: datetime | None = None


class CreateExerciseRecordResponse(WireModel):
    exercise_record: ExerciseRecord


class ListExerciseRecordsRequest(WireModel):
    pagination: PageRequest | None = None


class ListExerciseRecordsResponse(WireModel):
    exercise_records: list[ExerciseRecord]
    pagination: PageResponse


class DeleteExerciseRecordRequest(WireModel):
    id: str = ""


class DeleteExerciseRecordResponse(WireModel):
    success: bool
