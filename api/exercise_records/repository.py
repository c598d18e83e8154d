"""
Exercise record persistence (raw SQL).
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from core.clock import Clock
from core.db import Database
from core.errors import RecordNotFoundError

EXERCISE_RECORD_COLUMNS = (
    "id, user_id, exercise_name, duration_minutes, calories_burned, recorded_at, created_at, updated_at"
)


class ExerciseRecordRepository:
    def __init__(self, db: Database, clock: Clock) -> None:
        self.db = db
        self.clock = clock

    async def create(
        self,
        *,
        user_id: UUID,
        exercise_name: str,
        duration_minutes: int | None,
        calories_burned: int | None,
        recorded_at: datetime,
    ) -> dict:
        now = self.clock.now()
        row = await self.db.fetch_one(
            f"""
            INSERT INTO exercise_records
              (user_id, exercise_name, duration_minutes, calories_burned, recorded_at, created_at, updated_at)
            VALUES ($1, $2, $3, $4, $5, $6, $6)
            RETURNING {EXERCISE_RECORD_COLUMNS}
            """,
            user_id,
            exercise_name,
            duration_minutes,
            calories_burned,
            recorded_at,
            now,
        )
        if row is None:
            raise RuntimeError("Failed to create exercise record.")
        return row

    async def find_by_id(self, record_id: UUID, *, user_id: UUID) -> dict:
        row = await self.db.fetch_one(
            f"""
            SELECT {EXERCISE_RECORD_COLUMNS}
            FROM exercise_records
            WHERE id = $1
              AND user_id = $2
            """,
            record_id,
            user_id,
        )
        if row is None:
            raise RecordNotFoundError(f"exercise record {record_id} not found")
        return row

    async def find_by_user(self, user_id: UUID, *, limit: int, offset: int) -> list[dict]:
        return await self.db.fetch_all(
            f"""
            SELECT {EXERCISE_RECORD_COLUMNS}
            FROM exercise_records
            WHERE user_id = $1
            ORDER BY recorded_at DESC, id DESC
            LIMIT $2
            OFFSET $3
            """,
            user_id,
            limit,
            offset,
        )

    async def count_by_user(self, user_id: UUID) -> int:
        row = await self.db.fetch_one(
            """
            SELECT count(*) AS n
            FROM exercise_records
            WHERE user_id = $1
            """,
            user_id,
        )
        return int((row or {}).get("n", 0))

    async def delete(self, record_id: UUID, *, user_id: UUID) -> None:
        row = await self.db.fetch_one(
            """
            DELETE FROM exercise_records
            WHERE id = $1
              AND user_id = $2
            RETURNING id
            """,
            record_id,
            user_id,
        )
        if row is None:
            raise RecordNotFoundError(f"exercise record {record_id} not found")
