"""
BodyRecordService RPC endpoints.
"""

from __future__ import annotations

from fastapi import Depends, Request

from auth import dependencies as auth_dependencies
from auth.schemas import Principal
from core import rpc

from . import schemas, service
from .repository import BodyRecordRepository

router = rpc.service_router("BodyRecordService")


def get_repository(request: Request) -> BodyRecordRepository:
    return request.app.state.body_records


@router.post("/CreateBodyRecord", response_model_exclude_none=True)
async def create_body_record(
    request: schemas.CreateBodyRecordRequest,
    principal: Principal = Depends(auth_dependencies.get_current_user),
    repository: BodyRecordRepository = Depends(get_repository),
) -> schemas.CreateBodyRecordResponse:
    return await service.create_body_record(request, user_id=principal.user_id, repository=repository)


@router.post("/ListBodyRecords", response_model_exclude_none=True)
async def list_body_records(
    request: schemas.ListBodyRecordsRequest,
    principal: Principal = Depends(auth_dependencies.get_current_user),
    repository: BodyRecordRepository = Depends(get_repository),
) -> schemas.ListBodyRecordsResponse:
    return await service.list_body_records(request, user_id=principal.user_id, repository=repository)


@router.post("/GetBodyRecordsByDateRange", response_model_exclude_none=True)
async def get_body_records_by_date_range(
    request: schemas.GetBodyRecordsByDateRangeRequest,
    principal: Principal = Depends(auth_dependencies.get_current_user),
    repository: BodyRecordRepository = Depends(get_repository),
) -> schemas.GetBodyRecordsByDateRangeResponse:
    return await service.get_body_records_by_date_range(
        request,
        user_id=principal.user_id,
        repository=repository,
    )
