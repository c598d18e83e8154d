"""
ExerciseRecordService RPC endpoints.
"""

from __future__ import annotations

from fastapi import Depends, Request

from auth import dependencies as auth_dependencies
from auth.schemas import Principal
from core import rpc
from core.clock import Clock
from core.dependencies import get_clock

from . import schemas, service
from .repository import ExerciseRecordRepository

router = rpc.service_router("ExerciseRecordService")


def get_repository(request: Request) -> ExerciseRecordRepository:
    return request.app.state.exercise_records


@router.post("/CreateExerciseRecord", response_model_exclude_none=True)
async def create_exercise_record(
    request: schemas.CreateExerciseRecordRequest,
    principal: Principal = Depends(auth_dependencies.get_current_user),
    repository: ExerciseRecordRepository = Depends(get_repository),
    clock: Clock = Depends(get_clock),
) -> schemas.CreateExerciseRecordResponse:
    return await service.create_exercise_record(
        request,
        user_id=principal.user_id,
        repository=repository,
        clock=clock,
    )


@router.post("/ListExerciseRecords", response_model_exclude_none=True)
async def list_exercise_records(
    request: schemas.ListExerciseRecordsRequest,
    principal: Principal = Depends(auth_dependencies.get_current_user),
    repository: ExerciseRecordRepository = Depends(get_repository),
) -> schemas.ListExerciseRecordsResponse:
    return await service.list_exercise_records(request, user_id=principal.user_id, repository=repository)


@router.post("/DeleteExerciseRecord", response_model_exclude_none=True)
async def delete_exercise_record(
    request: schemas.DeleteExerciseRecordRequest,
    principal: Principal = Depends(auth_dependencies.get_current_user),
    repository: ExerciseRecordRepository = Depends(get_repository),
) -> schemas.DeleteExerciseRecordResponse:
    return await service.delete_exercise_record(request, user_id=principal.user_id, repository=repository)
