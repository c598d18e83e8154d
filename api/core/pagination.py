"""
Offset pagination shared by every list endpoint.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import Field

from .wire import WireModel

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100

# Both request fields are int32 on the wire; larger values are invalid_argument
# and the resulting OFFSET always fits in a bigint.
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class PageRequest(WireModel):
    # 0 means "use the default", matching proto3 scalar semantics.
    page_size: int = Field(default=0, ge=INT32_MIN, le=INT32_MAX)
    page_number: int = Field(default=0, ge=INT32_MIN, le=INT32_MAX)


class PageResponse(WireModel):
    total_items: int
    total_pages: int
    current_page: int


@dataclass(frozen=True)
class Page:
    size: int
    number: int

    @property
    def offset(self) -> int:
        return (self.number - 1) * self.size


def resolve_page(request: PageRequest | None) -> Page:
    size = DEFAULT_PAGE_SIZE
    number = 1
    if request is not None:
        if request.page_size > 0:
            size = min(request.page_size, MAX_PAGE_SIZE)
        if request.page_number > 0:
            number = request.page_number
    return Page(size=size, number=number)


def page_response(total: int, page: Page) -> PageResponse:
    total_pages = max(1, -(-total // page.size))
    return PageResponse(total_items=total, total_pages=total_pages, current_page=page.number)
