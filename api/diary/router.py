"""
DiaryService RPC endpoints.
"""

from __future__ import annotations

from fastapi import Depends, Request

from auth import dependencies as auth_dependencies
from auth.schemas import Principal
from core import rpc
from core.clock import Clock
from core.dependencies import get_clock

from . import schemas, service
from .repository import DiaryEntryRepository

router = rpc.service_router("DiaryService")


def get_repository(request: Request) -> DiaryEntryRepository:
    return request.app.state.diary_entries


@router.post("/CreateDiaryEntry", response_model_exclude_none=True)
async def create_diary_entry(
    request: schemas.CreateDiaryEntryRequest,
    principal: Principal = Depends(auth_dependencies.get_current_user),
    repository: DiaryEntryRepository = Depends(get_repository),
    clock: Clock = Depends(get_clock),
) -> schemas.CreateDiaryEntryResponse:
    return await service.create_diary_entry(
        request,
        user_id=principal.user_id,
        repository=repository,
        clock=clock,
    )


@router.post("/UpdateDiaryEntry", response_model_exclude_none=True)
async def update_diary_entry(
    request: schemas.UpdateDiaryEntryRequest,
    principal: Principal = Depends(auth_dependencies.get_current_user),
    repository: DiaryEntryRepository = Depends(get_repository),
    clock: Clock = Depends(get_clock),
) -> schemas.UpdateDiaryEntryResponse:
    return await service.update_diary_entry(
        request,
        user_id=principal.user_id,
        repository=repository,
        clock=clock,
    )


@router.post("/GetDiaryEntry", response_model_exclude_none=True)
async def get_diary_entry(
    request: schemas.GetDiaryEntryRequest,
    principal: Principal = Depends(auth_dependencies.get_current_user),
    repository: DiaryEntryRepository = Depends(get_repository),
) -> schemas.GetDiaryEntryResponse:
    return await service.get_diary_entry(request, user_id=principal.user_id, repository=repository)


@router.post("/ListDiaryEntries", response_model_exclude_none=True)
async def list_diary_entries(
    request: schemas.ListDiaryEntriesRequest,
    principal: Principal = Depends(auth_dependencies.get_current_user),
    repository: DiaryEntryRepository = Depends(get_repository),
) -> schemas.ListDiaryEntriesResponse:
    return await service.list_diary_entries(request, user_id=principal.user_id, repository=repository)


@router.post("/DeleteDiaryEntry", response_model_exclude_none=True)
async def delete_diary_entry(
    request: schemas.DeleteDiaryEntryRequest,
    principal: Principal = Depends(auth_dependencies.get_current_user),
    repository: DiaryEntryRepository = Depends(get_repository),
) -> schemas.DeleteDiaryEntryResponse:
    return await service.delete_diary_entry(request, user_id=principal.user_id, repository=repository)
