"""
Time source for the API.

Repositories stamp `created_at` / `updated_at` and services check
"not in the future" rules against an injected clock, so tests can freeze time.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Protocol

DEFAULT_FIXED_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


class Clock(Protocol):
    def now(self) -> datetime: ...


class SystemClock:
    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    def __init__(self, at: datetime | None = None) -> None:
        self._at = _as_utc(at or DEFAULT_FIXED_TIME)

    def now(self) -> datetime:
        return self._at

    def set(self, at: datetime) -> None:
        self._at = _as_utc(at)

    def advance(self, delta: timedelta) -> None:
        self._at = self._at + delta


def _as_utc(value: datetime) -> datetime:
    # Naive values are taken as UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
