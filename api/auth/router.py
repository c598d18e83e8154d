"""
UserService RPC endpoints.
"""

from __future__ import annotations

from fastapi import Depends

from core import rpc

from . import dependencies as auth_dependencies
from . import schemas, service
from .repository import UserRepository

router = rpc.service_router("UserService")


@router.post("/GetAuthenticatedUser", response_model_exclude_none=True)
async def get_authenticated_user(
    request: schemas.GetAuthenticatedUserRequest,
    principal: schemas.Principal = Depends(auth_dependencies.get_current_user),
    users: UserRepository = Depends(auth_dependencies.get_user_repository),
) -> schemas.GetAuthenticatedUserResponse:
    return await service.get_authenticated_user(user_id=principal.user_id, users=users)
