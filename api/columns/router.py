"""
ColumnService RPC endpoints. Public: no bearer token required.
"""

from __future__ import annotations

from fastapi import Depends, Request

from core import rpc

from . import schemas, service
from .repository import ColumnRepository

router = rpc.service_router("ColumnService")


def get_repository(request: Request) -> ColumnRepository:
    return request.app.state.columns


@router.post("/ListPublishedColumns", response_model_exclude_none=True)
async def list_published_columns(
    request: schemas.ListPublishedColumnsRequest,
    repository: ColumnRepository = Depends(get_repository),
) -> schemas.ListPublishedColumnsResponse:
    return await service.list_published_columns(request, repository=repository)


@router.post("/GetColumn", response_model_exclude_none=True)
async def get_column(
    request: schemas.GetColumnRequest,
    repository: ColumnRepository = Depends(get_repository),
) -> schemas.GetColumnResponse:
    return await service.get_column(request, repository=repository)


@router.post("/ListColumnsByCategory", response_model_exclude_none=True)
async def list_columns_by_category(
    request: schemas.ListColumnsByCategoryRequest,
    repository: ColumnRepository = Depends(get_repository),
) -> schemas.ListColumnsByCategoryResponse:
    return await service.list_columns_by_category(request, repository=repository)


@router.post("/ListColumnsByTag", response_model_exclude_none=True)
async def list_columns_by_tag(
    request: schemas.ListColumnsByTagRequest,
    repository: ColumnRepository = Depends(get_repository),
) -> schemas.ListColumnsByTagResponse:
    return await service.list_columns_by_tag(request, repository=repository)
