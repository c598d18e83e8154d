"""
Column (article) persistence (raw SQL).

Columns are read-only here. Every query only sees published rows:
`published_at` set and not after `now`, where `now` comes from the clock.
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from core.clock import Clock
from core.db import Database
from core.errors import RecordNotFoundError

COLUMN_COLUMNS = "id, title, content, category, tags, published_at, created_at, updated_at"

PUBLISHED = "published_at IS NOT NULL AND published_at <= $1"


class ColumnRepository:
    def __init__(self, db: Database, clock: Clock) -> None:
        self.db = db
        self.clock = clock

    def _now(self) -> datetime:
        return self.clock.now()

    async def find_published(self, *, limit: int, offset: int) -> list[dict]:
        return await self.db.fetch_all(
            f"""
            SELECT {COLUMN_COLUMNS}
            FROM columns
            WHERE {PUBLISHED}
            ORDER BY published_at DESC, id DESC
            LIMIT $2
            OFFSET $3
            """,
            self._now(),
            limit,
            offset,
        )

    async def find_by_id(self, column_id: UUID) -> dict:
        row = await self.db.fetch_one(
            f"""
            SELECT {COLUMN_COLUMNS}
            FROM columns
            WHERE {PUBLISHED}
              AND id = $2
            """,
            self._now(),
            column_id,
        )
        if row is None:
            raise RecordNotFoundError(f"column {column_id} not found")
        return row

    async def find_by_category(self, category: str, *, limit: int, offset: int) -> list[dict]:
        return await self.db.fetch_all(
            f"""
            SELECT {COLUMN_COLUMNS}
            FROM columns
            WHERE {PUBLISHED}
              AND category = $2
            ORDER BY published_at DESC, id DESC
            LIMIT $3
            OFFSET $4
            """,
            self._now(),
            category,
            limit,
            offset,
        )

    async def find_by_tag(self, tag: str, *, limit: int, offset: int) -> list[dict]:
        return await self.db.fetch_all(
            f"""
            SELECT {COLUMN_COLUMNS}
            FROM columns
            WHERE {PUBLISHED}
              AND $2::text = ANY(tags)
            ORDER BY published_at DESC, id DESC
            LIMIT $3
            OFFSET $4
            """,
            self._now(),
            tag,
            limit,
            offset,
        )

    async def count_published(self) -> int:
        row = await self.db.fetch_one(
            f"""
            SELECT count(*) AS n
            FROM columns
            WHERE {PUBLISHED}
            """,
            self._now(),
        )
        return int((row or {}).get("n", 0))

    async def count_by_category(self, category: str) -> int:
        row = await self.db.fetch_one(
            f"""
            SELECT count(*) AS n
            FROM columns
            WHERE {PUBLISHED}
              AND category = $2
            """,
            self._now(),
            category,
        )
        return int((row or {}).get("n", 0))

    async def count_by_tag(self, tag: str) -> int:
        row = await self.db.fetch_one(
            f"""
            SELECT count(*) AS n
            FROM columns
            WHERE {PUBLISHED}
              AND $2::text = ANY(tags)
            """,
            self._now(),
            tag,
        )
        return int((row or {}).get("n", 0))
