"""
DiaryService messages.
"""

from __future__ import annotations

from datetime import datetime

from core.pagination import PageRequest, PageResponse
from core.wire import WireModel


class DiaryEntry(WireModel):
    id: str
    user_id: str
    title: str | None = None
    content: str
    entry_date: str
    created_at: datetime
    updated_at: datetime


class CreateDiaryEntryRequest(WireModel):
    title: str | None = None
    content: str = ""
    entry_date: str = ""


class CreateDiaryEntryResponse(WireModel):
    diary_entry: DiaryEntry


class UpdateDiaryEntryRequest(WireModel):
    id: str = ""
    # Omitting the title clears it.
    title: str | None = None
    content: str = ""


class UpdateDiaryEntryResponse(WireModel):
    diary_entry: DiaryEntry


class GetDiaryEntryRequest(WireModel):
    id: str = ""


class GetDiaryEntryResponse(WireModel):
    diary_entry: DiaryEntry


class ListDiaryEntriesRequest(WireModel):
    pagination: PageRequest | None = None


class ListDiaryEntriesResponse(WireModel):
    diary_entries: list[DiaryEntry]
    pagination: PageResponse


class DeleteDiaryEntryRequest(WireModel):
    id: str = ""


class DeleteDiaryEntryResponse(WireModel):
    success: bool
