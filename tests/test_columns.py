import uuid
from datetime import timedelta

import pytest
from conftest import NOW, call

SERVICE = "ColumnService"


@pytest.fixture
def columns(repositories):
    store = repositories.columns
    return {
        "tips": store.add(
            title="Health Tips for Daily Life",
            category="health",
            tags=["health", "wellness"],
            published_at=NOW - timedelta(hours=24),
        ),
        "diet": store.add(
            title="Diet Strategies for Weight Loss",
            category="nutrition",
            tags=["diet", "nutrition", "health"],
            published_at=NOW - timedelta(hours=48),
        ),
        "exercise": store.add(
            title="Exercise Routines for Beginners",
            category="fitness",
            tags=["exercise", "fitness"],
            published_at=NOW - timedelta(hours=72),
        ),
        "future": store.add(
            title="Future Health Trends",
            category="trends",
            tags=["future", "health"],
            published_at=NOW + timedelta(hours=24),
        ),
        "draft": store.add(title="Unpublished draft", category="health", tags=None, published_at=None),
    }


def _titles(resp):
    return [column["title"] for column in resp.json()["columns"]]


def test_list_published_columns(client, columns):
    resp = call(client, SERVICE, "ListPublishedColumns", {}, subject=None)
    assert resp.status_code == 200
    assert _titles(resp) == [
        "Health Tips for Daily Life",
        "Diet Strategies for Weight Loss",
        "Exercise Routines for Beginners",
    ]
    assert resp.json()["pagination"] == {"totalItems": 3, "totalPages": 1, "currentPage": 1}


def test_columns_become_visible_once_published(client, clock, columns):
    clock.advance(timedelta(hours=25))
    resp = call(client, SERVICE, "ListPublishedColumns", {}, subject=None)
    assert _titles(resp)[0] == "Future Health Trends"
    assert resp.json()["pagination"]["totalItems"] == 4


def test_get_column(client, columns):
    resp = call(client, SERVICE, "GetColumn", {"id": str(columns["diet"]["id"])}, subject=None)
    assert resp.status_code == 200
    column = resp.json()["column"]
    assert column["title"] == "Diet Strategies for Weight Loss"
    assert column["category"] == "nutrition"
    assert column["tags"] == ["diet", "nutrition", "health"]
    assert column["publishedAt"] == "2024-05-30T12:00:00Z"


@pytest.mark.parametrize("key", ["future", "draft"])
def test_unpublished_column_is_not_found(client, columns, key):
    resp = call(client, SERVICE, "GetColumn", {"id": str(columns[key]["id"])}, subject=None)
    assert resp.status_code == 404
    assert resp.json() == {"code": "not_found", "message": "Column not found."}


def test_get_unknown_column(client, columns):
    resp = call(client, SERVICE, "GetColumn", {"id": str(uuid.uuid4())}, subject=None)
    assert resp.status_code == 404


def test_get_column_with_malformed_id(client):
    resp = call(client, SERVICE, "GetColumn", {"id": "abc"}, subject=None)
    assert resp.status_code == 400


def test_list_by_category(client, columns):
    resp = call(client, SERVICE, "ListColumnsByCategory", {"category": "health"}, subject=None)
    assert _titles(resp) == ["Health Tips for Daily Life"]
    assert resp.json()["pagination"]["totalItems"] == 1


def test_list_by_tag(client, columns):
    resp = call(client, SERVICE, "ListColumnsByTag", {"tag": "health"}, subject=None)
    assert _titles(resp) == ["Health Tips for Daily Life", "Diet Strategies for Weight Loss"]


def test_unknown_tag_is_empty(client, columns):
    resp = call(client, SERVICE, "ListColumnsByTag", {"tag": "sleep"}, subject=None)
    assert resp.status_code == 200
    assert resp.json()["columns"] == []
    assert resp.json()["pagination"]["totalPages"] == 1


@pytest.mark.parametrize(
    "method, body",
    [
        ("ListColumnsByCategory", {}),
        ("ListColumnsByCategory", {"category": "  "}),
        ("ListColumnsByTag", {"tag": ""}),
    ],
)
def test_blank_filters_are_rejected(client, method, body):
    resp = call(client, SERVICE, method, body, subject=None)
    assert resp.status_code == 400
    assert resp.json()["code"] == "invalid_argument"


def test_missing_tags_are_an_empty_list(client, clock, repositories):
    repositories.columns.add(title="Untagged", tags=None, published_at=NOW - timedelta(minutes=1))
    resp = call(client, SERVICE, "ListPublishedColumns", {}, subject=None)
    column = resp.json()["columns"][0]
    assert column["tags"] == []
    assert "category" not in column


def test_pagination_of_columns(client, repositories):
    for i in range(5):
        repositories.columns.add(title=f"Column {i}", published_at=NOW - timedelta(days=i + 1))

    resp = call(
        client,
        SERVICE,
        "ListPublishedColumns",
        {"pagination": {"pageSize": 2, "pageNumber": 3}},
        subject=None,
    )
    assert _titles(resp) == ["Column 4"]
    assert resp.json()["pagination"] == {"totalItems": 5, "totalPages": 3, "currentPage": 3}


@pytest.mark.parametrize(
    "method, body, total",
    [
        ("ListPublishedColumns", {}, 3),
        ("ListColumnsByCategory", {"category": "health"}, 1),
        ("ListColumnsByTag", {"tag": "health"}, 2),
    ],
)
def test_page_past_the_end_is_empty(client, columns, method, body, total):
    page_size = 2
    past_the_end = -(-total // page_size) + 1
    resp = call(
        client,
        SERVICE,
        method,
        {**body, "pagination": {"pageSize": page_size, "pageNumber": past_the_end}},
        subject=None,
    )
    assert resp.status_code == 200
    assert resp.json() == {
        "columns": [],
        "pagination": {"totalItems": total, "totalPages": past_the_end - 1, "currentPage": past_the_end},
    }
