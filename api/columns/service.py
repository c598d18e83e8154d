"""
Column business logic (public, read-only).
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from core.errors import RecordNotFoundError, persistence_errors
from core.pagination import page_response, resolve_page
from core.wire import parse_uuid

from . import schemas
from .repository import ColumnRepository

logger = logging.getLogger(__name__)


def _to_column(row: dict) -> schemas.Column:
    return schemas.Column(
        id=str(row["id"]),
        title=str(row["title"]),
        content=str(row["content"]),
        category=row.get("category"),
        tags=list(row.get("tags") or []),
        published_at=row.get("published_at"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def _required(value: str, field: str) -> str:
    cleaned = (value or "").strip()
    if not cleaned:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{field} is required.",
        )
    return cleaned


async def list_published_columns(
    payload: schemas.ListPublishedColumnsRequest,
    *,
    repository: ColumnRepository,
) -> schemas.ListPublishedColumnsResponse:
    page = resolve_page(payload.pagination)
    logger.info("column_list page=%s page_size=%s", page.number, page.size)
    with persistence_errors("list columns"):
        rows = await repository.find_published(limit=page.size, offset=page.offset)
        total = await repository.count_published()
    return schemas.ListPublishedColumnsResponse(
        columns=[_to_column(row) for row in rows],
        pagination=page_response(total, page),
    )


async def get_column(
    payload: schemas.GetColumnRequest,
    *,
    repository: ColumnRepository,
) -> schemas.GetColumnResponse:
    column_id = parse_uuid(payload.id, "column ID")

    logger.info("column_get column_id=%s", column_id)
    with persistence_errors("get column", column_id=column_id):
        try:
            row = await repository.find_by_id(column_id)
        except RecordNotFoundError as exc:
            # Unpublished columns are indistinguishable from missing ones.
            logger.warning("column_not_found column_id=%s", column_id)
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Column not found.",
            ) from exc
    return schemas.GetColumnResponse(column=_to_column(row))


async def list_columns_by_category(
    payload: schemas.ListColumnsByCategoryRequest,
    *,
    repository: ColumnRepository,
) -> schemas.ListColumnsByCategoryResponse:
    category = _required(payload.category, "category")
    page = resolve_page(payload.pagination)
    logger.info("column_list_by_category category=%s page=%s page_size=%s", category, page.number, page.size)
    with persistence_errors("list columns by category", category=category):
        rows = await repository.find_by_category(category, limit=page.size, offset=page.offset)
        total = await repository.count_by_category(category)
    return schemas.ListColumnsByCategoryResponse(
        columns=[_to_column(row) for row in rows],
        pagination=page_response(total, page),
    )


async def list_columns_by_tag(
    payload: schemas.ListColumnsByTagRequest,
    *,
    repository: ColumnRepository,
) -> schemas.ListColumnsByTagResponse:
    tag = _required(payload.tag, "tag")
    page = resolve_page(payload.pagination)
    logger.info("column_list_by_tag tag=%s page=%s page_size=%s", tag, page.number, page.size)
    with persistence_errors("list columns by tag", tag=tag):
        rows = await repository.find_by_tag(tag, limit=page.size, offset=page.offset)
        total = await repository.count_by_tag(tag)
    return schemas.ListColumnsByTagResponse(
        columns=[_to_column(row) for row in rows],
        pagination=page_response(total, page),
    )
