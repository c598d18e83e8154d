"""
Auth API schemas (principal + UserService messages).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from core.wire import WireModel


@dataclass(frozen=True)
class Principal:
    """The authenticated caller, handed to every protected handler."""

    user_id: UUID
    subject_id: str


class User(WireModel):
    id: str
    created_at: datetime
    updated_at: datetime


class GetAuthenticatedUserRequest(WireModel):
    pass


class GetAuthenticatedUserResponse(WireModel):
    user: User
