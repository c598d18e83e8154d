"""
FastAPI application factory.

`create_app()` wires settings, the clock, the database pool and one repository
per resource onto `app.state`; routers read them back through dependencies.
Serve it with `uvicorn main:create_app --factory` (see `scripts/serve.py`).
"""

from __future__ import annotations

import logging
import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from auth import router as auth_router
from auth.repository import UserRepository
from body_records import router as body_records_router
from body_records.repository import BodyRecordRepository
from columns import router as columns_router
from columns.repository import ColumnRepository
from core.clock import Clock, SystemClock
from core.db import Database
from core.errors import install_error_handlers
from core.log import configure_logging
from core.settings import Settings
from diary import router as diary_router
from diary.repository import DiaryEntryRepository
from exercise_records import router as exercise_records_router
from exercise_records.repository import ExerciseRecordRepository

logger = logging.getLogger(__name__)


@dataclass
class Repositories:
    users: UserRepository
    body_records: BodyRecordRepository
    exercise_records: ExerciseRecordRepository
    diary_entries: DiaryEntryRepository
    columns: ColumnRepository

    @classmethod
    def from_database(cls, db: Database, clock: Clock) -> Repositories:
        return cls(
            users=UserRepository(db, clock),
            body_records=BodyRecordRepository(db, clock),
            exercise_records=ExerciseRecordRepository(db, clock),
            diary_entries=DiaryEntryRepository(db, clock),
            columns=ColumnRepository(db, clock),
        )


def _install_repositories(app: FastAPI, repositories: Repositories) -> None:
    app.state.users = repositories.users
    app.state.body_records = repositories.body_records
    app.state.exercise_records = repositories.exercise_records
    app.state.diary_entries = repositories.diary_entries
    app.state.columns = repositories.columns


def create_app(
    settings: Settings | None = None,
    *,
    repositories: Repositories | None = None,
    clock: Clock | None = None,
) -> FastAPI:
    """
    Build the API.

    With `repositories` given (tests), nothing touches PostgreSQL. Otherwise the
    lifespan opens the pool from `settings.database_url` and closes it on
    shutdown.
    """
    settings = settings or Settings.from_env()
    clock = clock or SystemClock()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if repositories is not None:
            yield
            return

        db = Database(
            settings.database_url,
            min_size=settings.db_pool_min_size,
            max_size=settings.db_pool_max_size,
            command_timeout=settings.db_command_timeout,
        )
        await db.connect()
        logger.info(
            "db_pool_ready min_size=%s max_size=%s",
            settings.db_pool_min_size,
            settings.db_pool_max_size,
        )
        app.state.db = db
        _install_repositories(app, Repositories.from_database(db, clock))
        try:
            yield
        finally:
            await db.close()
            logger.info("db_pool_closed")

    app = FastAPI(title="Health App API", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.clock = clock
    if repositories is not None:
        _install_repositories(app, repositories)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.allowed_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_error_handlers(app)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "request method=%s path=%s status=%s duration_ms=%.1f",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

    app.include_router(auth_router.router, tags=["users"])
    app.include_router(body_records_router.router, tags=["body-records"])
    app.include_router(exercise_records_router.router, tags=["exercise-records"])
    app.include_router(diary_router.router, tags=["diary"])
    app.include_router(columns_router.router, tags=["columns"])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app
