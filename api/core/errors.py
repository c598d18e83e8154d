"""
Error taxonomy and Connect-style error rendering.

Services raise `HTTPException` with a status code; the handlers installed here
turn it into a Connect error body: `{"code": "not_found", "message": "..."}`.
Repositories raise `RecordNotFoundError` when a targeted row does not exist
(or belongs to another user).
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

# HTTP status -> Connect error code.
STATUS_CODES = {
    status.HTTP_400_BAD_REQUEST: "invalid_argument",
    status.HTTP_401_UNAUTHORIZED: "unauthenticated",
    status.HTTP_404_NOT_FOUND: "not_found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "unimplemented",
    status.HTTP_415_UNSUPPORTED_MEDIA_TYPE: "unimplemented",
}


class RecordNotFoundError(LookupError):
    pass


def connect_code(status_code: int) -> str:
    if status_code in STATUS_CODES:
        return STATUS_CODES[status_code]
    return "internal" if status_code >= 500 else "unknown"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"code": connect_code(status_code), "message": message},
    )


@contextmanager
def persistence_errors(action: str, **context: object) -> Iterator[None]:
    """
    Translate unexpected repository failures into a generic 500.

    `RecordNotFoundError` and `HTTPException` pass through untouched so the
    caller can map them. Anything else is logged with `context` and the caller
    only sees "Failed to <action>."
    """
    try:
        yield
    except (RecordNotFoundError, HTTPException):
        raise
    except Exception as exc:
        details = " ".join(f"{key}={value}" for key, value in context.items())
        logger.exception("%s_failed %s", action.replace(" ", "_"), details)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to {action}.",
        ) from exc


async def _http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def _validation_exception_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        problems.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    message = "; ".join(problems) or "Invalid request."
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error method=%s path=%s", request.method, request.url.path, exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error.")


def install_error_handlers(app: FastAPI) -> None:
    # Starlette's base class also covers routing 404/405s.
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
