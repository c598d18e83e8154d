"""
User persistence helpers.
"""

from __future__ import annotations

import logging
from uuid import UUID

import asyncpg

from core.clock import Clock
from core.db import Database
from core.errors import RecordNotFoundError

logger = logging.getLogger(__name__)

USER_COLUMNS = "id, subject_id, created_at, updated_at"


class UserRepository:
    def __init__(self, db: Database, clock: Clock) -> None:
        self.db = db
        self.clock = clock

    async def create(self, subject_id: str) -> dict:
        """
        Insert a user for `subject_id`, or return the existing row when a
        concurrent request created it first.
        """
        now = self.clock.now()
        try:
            row = await self.db.fetch_one(
                f"""
                INSERT INTO users (subject_id, created_at, updated_at)
                VALUES ($1, $2, $2)
                RETURNING {USER_COLUMNS}
                """,
                subject_id,
                now,
            )
        except asyncpg.UniqueViolationError:
            logger.info("user_create_conflict subject_id=%s", subject_id)
            return await self.find_by_subject_id(subject_id)
        if row is None:
            raise RuntimeError("Failed to create user.")
        logger.info("user_created subject_id=%s user_id=%s", subject_id, row["id"])
        return row

    async def find_by_id(self, user_id: UUID) -> dict:
        row = await self.db.fetch_one(
            f"""
            SELECT {USER_COLUMNS}
            FROM users
            WHERE id = $1
            """,
            user_id,
        )
        if row is None:
            raise RecordNotFoundError(f"user {user_id} not found")
        return row

    async def find_by_subject_id(self, subject_id: str) -> dict:
        row = await self.db.fetch_one(
            f"""
            SELECT {USER_COLUMNS}
            FROM users
            WHERE subject_id = $1
            """,
            subject_id,
        )
        if row is None:
            raise RecordNotFoundError(f"user with subject {subject_id!r} not found")
        return row
