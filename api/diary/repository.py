"""
Diary entry persistence (raw SQL).
"""

from __future__ import annotations

from datetime import date
from uuid import UUID

from core.clock import Clock
from core.db import Database
from core.errors import RecordNotFoundError

DIARY_ENTRY_COLUMNS = "id, user_id, title, content, entry_date, created_at, updated_at"


class DiaryEntryRepository:
    def __init__(self, db: Database, clock: Clock) -> None:
        self.db = db
        self.clock = clock

    async def create(
        self,
        *,
        user_id: UUID,
        title: str | None,
        content: str,
        entry_date: date,
    ) -> dict:
        now = self.clock.now()
        row = await self.db.fetch_one(
            f"""
            INSERT INTO diary_entries (user_id, title, content, entry_date, created_at, updated_at)
            VALUES ($1, $2, $3, $4, $5, $5)
            RETURNING {DIARY_ENTRY_COLUMNS}
            """,
            user_id,
            title,
            content,
            entry_date,
            now,
        )
        if row is None:
            raise RuntimeError("Failed to create diary entry.")
        return row

    async def update(
        self,
        entry_id: UUID,
        *,
        user_id: UUID,
        title: str | None,
        content: str,
    ) -> dict:
        """
        Replace title and content; `entry_date` and `created_at` are kept.
        """
        row = await self.db.fetch_one(
            f"""
            UPDATE diary_entries
            SET title = $3,
                content = $4,
                updated_at = $5
            WHERE id = $1
              AND user_id = $2
            RETURNING {DIARY_ENTRY_COLUMNS}
            """,
            entry_id,
            user_id,
            title,
            content,
            self.clock.now(),
        )
        if row is None:
            raise RecordNotFoundError(f"diary entry {entry_id} not found")
        return row

    async def find_by_id(self, entry_id: UUID, *, user_id: UUID) -> dict:
        row = await self.db.fetch_one(
            f"""
            SELECT {DIARY_ENTRY_COLUMNS}
            FROM diary_entries
            WHERE id = $1
              AND user_id = $2
            """,
            entry_id,
            user_id,
        )
        if row is None:
            raise RecordNotFoundError(f"diary entry {entry_id} not found")
        return row

    async def find_by_user(self, user_id: UUID, *, limit: int, offset: int) -> list[dict]:
        return await self.db.fetch_all(
            f"""
            SELECT {DIARY_ENTRY_COLUMNS}
            FROM diary_entries
            WHERE user_id = $1
            ORDER BY entry_date DESC, created_at DESC
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
            FROM diary_entries
            WHERE user_id = $1
            """,
            user_id,
        )
        return int((row or {}).get("n", 0))

    async def delete(self, entry_id: UUID, *, user_id: UUID) -> None:
        row = await self.db.fetch_one(
            """
            DELETE FROM diary_entries
            WHERE id = $1
              AND user_id = $2
            RETURNING id
            """,
            entry_id,
            user_id,
        )
        if row is None:
            raise RecordNotFoundError(f"diary entry {entry_id} not found")
