"""
ColumnService messages.
"""

from __future__ import annotations

from datetime import datetime

from core.pagination import PageRequest, PageResponse
from core.wire import WireModel


class Column(WireModel):
    id: str
    title: str
    content: str
    category: str | None = None
    tags: list[str]
    published_at: datetime | None = None
    created_at: datetime
    updated_at: datetime


class ListPublishedColumnsRequest(WireModel):
    pagination: PageRequest | None = None


class ListPublishedColumnsResponse(WireModel):
    columns: list[Column]
    pagination: PageResponse


class GetColumnRequest(WireModel):
    id: str = ""


class GetColumnResponse(WireModel):
    column: Column


class ListColumnsByCategoryRequest(WireModel):
    category: str = ""
    pagination: PageRequest | None = None


class ListColumnsByCategoryResponse(WireModel):
    columns: list[Column]
    pagination: PageResponse


class ListColumnsByTagRequest(WireModel):
    tag: str = ""
    pagination: PageRequest | None = None


class ListColumnsByTagResponse(WireModel):
    columns: list[Column]
    pagination: PageResponse
