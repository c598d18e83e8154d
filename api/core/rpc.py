"""
Connect unary transport over FastAPI.

Every procedure is `POST /healthapp.v1.<Service>/<Method>` with a JSON body.
Only the JSON codec is served; clients asking for binary protobuf get 415.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

PACKAGE = "healthapp.v1"
PROTOCOL_VERSION = "1"
BINARY_CONTENT_TYPES = ("application/proto", "application/protobuf", "application/x-protobuf")


async def check_connect_request(
    request: Request,
    connect_protocol_version: str | None = Header(default=None),
) -> None:
    content_type = (request.headers.get("content-type") or "").split(";", 1)[0].strip().lower()
    if content_type in BINARY_CONTENT_TYPES:
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail="Binary protobuf codec is not supported; use application/json.",
            headers={"Accept-Post": "application/json"},
        )

    version = (connect_protocol_version or "").strip()
    if version and version != PROTOCOL_VERSION:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unsupported Connect-Protocol-Version {version!r}; expected {PROTOCOL_VERSION!r}.",
        )


def service_router(service: str) -> APIRouter:
    return APIRouter(
        prefix=f"/{PACKAGE}.{service}",
        dependencies=[Depends(check_connect_request)],
    )
