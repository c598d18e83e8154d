"""
BodyRecordService messages.
"""

from __future__ import annotations

from datetime import datetime

from core.pagination import PageRequest, PageResponse
from core.wire import WireModel


class BodyRecord(WireModel):
    id: str
    user_id: str
    date: str
    weight_kg: float | None = None
    body_fat_percentage: float | None = None
    created_at: datetime
    updated_at: datetime


class CreateBodyRecordRequest(WireModel):
    date: str = ""
    weight_kg: float | None = None
    body_fat_percentage: float | None = None


class CreateBodyRecordResponse(WireModel):
    body_record: BodyRecord


class ListBodyRecordsRequest(WireModel):
    pagination: PageRequest | None = None


class ListBodyRecordsResponse(WireModel):
    body_records: list[BodyRecord]
    pagination: PageResponse


class GetBodyRecordsByDateRangeRequest(WireModel):
    start_date: str = ""
    end_date: str = ""


class GetBodyRecordsByDateRangeResponse(WireModel):
    body_records: list[BodyRecord]
