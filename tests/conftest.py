from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from fakes import (
    FakeBodyRecordRepository,
    FakeColumnRepository,
    FakeDiaryEntryRepository,
    FakeExerciseRecordRepository,
    FakeUserRepository,
)

from auth.security import build_access_token
from core.clock import FixedClock
from core.settings import Settings
from main import Repositories, create_app

TEST_SECRET = "test-secret"
TEST_SUBJECT = "test-subject-id"
NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def clock():
    return FixedClock(NOW)


@pytest.fixture
def settings():
    return Settings(jwt_secret=TEST_SECRET, log_level="WARNING")


@pytest.fixture
def repositories(clock):
    return Repositories(
        users=FakeUserRepository(clock),
        body_records=FakeBodyRecordRepository(clock),
        exercise_records=FakeExerciseRecordRepository(clock),
        diary_entries=FakeDiaryEntryRepository(clock),
        columns=FakeColumnRepository(clock),
    )


@pytest.fixture
def app(settings, repositories, clock):
    return create_app(settings, repositories=repositories, clock=clock)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


def make_token(subject: str = TEST_SUBJECT, *, secret: str = TEST_SECRET, **kwargs) -> str:
    return build_access_token(subject=subject, secret=secret, **kwargs)


def auth_headers(subject: str = TEST_SUBJECT) -> dict:
    return {"Authorization": f"Bearer {make_token(subject)}"}


def rpc_path(service: str, method: str) -> str:
    return f"/healthapp.v1.{service}/{method}"


def call(client, service: str, method: str, body: dict | None = None, *, subject: str | None = TEST_SUBJECT, headers=None):
    request_headers = dict(headers or {})
    if subject is not None:
        request_headers.update(auth_headers(subject))
    return client.post(rpc_path(service, method), json={} if body is None else body, headers=request_headers)
