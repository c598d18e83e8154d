"""
Wire-format helpers shared by the services.

Field names follow the protobuf JSON mapping (lowerCamelCase); requests may use
either the camelCase or the snake_case name. Dates travel as `YYYY-MM-DD`
strings, timestamps as RFC 3339, and optional scalars are left out when absent.
"""

from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from fastapi import HTTPException, status
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

DATE_FORMAT = "%Y-%m-%d"


class WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def parse_date(value: str, field: str) -> date:
    raw = (value or "").strip()
    try:
        parsed = datetime.strptime(raw, DATE_FORMAT).date()
    except ValueError as exc:
        raise _invalid_date(field, raw) from exc
    # strptime also takes "2024-5-1"; only the zero-padded form is accepted.
    if format_date(parsed) != raw:
        raise _invalid_date(field, raw)
    return parsed


def _invalid_date(field: str, raw: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=f"Invalid {field} format: expected YYYY-MM-DD, got {raw!r}.",
    )


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def parse_uuid(value: str, label: str) -> UUID:
    raw = (value or "").strip()
    try:
        return UUID(raw)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid {label}: {raw!r}.",
        ) from exc


def optional_float(value: object) -> float | None:
    # NUMERIC columns come back from asyncpg as Decimal.
    return None if value is None else float(value)
