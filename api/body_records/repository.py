"""
Body record persistence (raw SQL).

One row per user per calendar day; saving the same day again overwrites it.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from uuid import UUID

from core.clock import Clock
from core.db import Database
from core.errors import RecordNotFoundError

BODY_RECORD_COLUMNS = "id, user_id, date, weight_kg, body_fat_percentage, created_at, updated_at"


def _numeric_arg(value: float | None) -> Decimal | None:
    """
    NUMERIC(5,2) parameters; go through str() so 75.1 stays 75.1.
    """
    if value is None:
        return None
    return Decimal(str(value))


class BodyRecordRepository:
    def __init__(self, db: Database, clock: Clock) -> None:
        self.db = db
        self.clock = clock

    async def save(
        self,
        *,
        user_id: UUID,
        record_date: date,
        weight_kg: float | None,
        body_fat_percentage: float | None,
    ) -> dict:
        now = self.clock.now()
        row = await self.db.fetch_one(
            f"""
            INSERT INTO body_records (user_id, date, weight_kg, body_fat_percentage, created_at, updated_at)
            VALUES ($1, $2, $3, $4, $5, $5)
            ON CONFLICT (user_id, date) DO UPDATE
            SET weight_kg = EXCLUDED.weight_kg,
                body_fat_percentage = EXCLUDED.body_fat_percentage,
                updated_at = EXCLUDED.updated_at
            RETURNING {BODY_RECORD_COLUMNS}
            """,
            user_id,
            record_date,
            _numeric_arg(weight_kg),
            _numeric_arg(body_fat_percentage),
            now,
        )
        if row is None:
            raise RuntimeError("Failed to save body record.")
        return row

    async def find_by_id(self, record_id: UUID, *, user_id: UUID) -> dict:
        row = await self.db.fetch_one(
            f"""
            SELECT {BODY_RECORD_COLUMNS}
            FROM body_records
            WHERE id = $1
              AND user_id = $2
            """,
            record_id,
            user_id,
        )
        if row is None:
            raise RecordNotFoundError(f"body record {record_id} not found")
        return row

    async def find_by_user(self, user_id: UUID, *, limit: int, offset: int) -> list[dict]:
        return await self.db.fetch_all(
            f"""
            SELECT {BODY_RECORD_COLUMNS}
            FROM body_records
            WHERE user_id = $1
            ORDER BY date DESC
            LIMIT $2
            OFFSET $3
            """,
            user_id,
            limit,
            offset,
        )

    async def find_by_user_and_date_range(
        self,
        user_id: UUID,
        *,
        start_date: date,
        end_date: date,
    ) -> list[dict]:
        """
        Both bounds are inclusive; oldest first.
        """
        return await self.db.fetch_all(
            f"""
            SELECT {BODY_RECORD_COLUMNS}
            FROM body_records
            WHERE user_id = $1
              AND date >= $2
              AND date <= $3
            ORDER BY date ASC
            """,
            user_id,
            start_date,
            end_date,
        )

    async def count_by_user(self, user_id: UUID) -> int:
        row = await self.db.fetch_one(
            """
            SELECT count(*) AS n
            FROM body_records
            WHERE user_id = $1
            """,
            user_id,
        )
        return int((row or {}).get("n", 0))
