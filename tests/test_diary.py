import uuid
from datetime import timedelta

import pytest
from conftest import call

SERVICE = "DiaryService"


def _create(client, body, **kwargs):
    return call(client, SERVICE, "CreateDiaryEntry", body, **kwargs)


def test_create_get_update_delete(client, clock):
    created = _create(client, {"title": "Day one", "content": "Felt great.", "entryDate": "2024-06-01"})
    assert created.status_code == 200, created.text
    entry = created.json()["diaryEntry"]
    assert entry["title"] == "Day one"
    assert entry["entryDate"] == "2024-06-01"

    fetched = call(client, SERVICE, "GetDiaryEntry", {"id": entry["id"]})
    assert fetched.json()["diaryEntry"] == entry

    clock.advance(timedelta(minutes=5))
    updated = call(client, SERVICE, "UpdateDiaryEntry", {"id": entry["id"], "title": "Day 1", "content": "Felt OK."})
    assert updated.status_code == 200
    after = updated.json()["diaryEntry"]
    assert after["title"] == "Day 1"
    assert after["content"] == "Felt OK."
    assert after["entryDate"] == entry["entryDate"]
    assert after["createdAt"] == entry["createdAt"]
    assert after["updatedAt"] == "2024-06-01T12:05:00Z"

    deleted = call(client, SERVICE, "DeleteDiaryEntry", {"id": entry["id"]})
    assert deleted.json() == {"success": True}

    missing = call(client, SERVICE, "GetDiaryEntry", {"id": entry["id"]})
    assert missing.status_code == 404
    assert missing.json()["code"] == "not_found"


def test_title_is_optional(client):
    resp = _create(client, {"content": "No title today.", "entryDate": "2024-05-30"})
    assert resp.status_code == 200
    assert "title" not in resp.json()["diaryEntry"]


def test_update_without_title_clears_it(client):
    entry = _create(client, {"title": "Draft", "content": "x", "entryDate": "2024-05-30"}).json()["diaryEntry"]
    resp = call(client, SERVICE, "UpdateDiaryEntry", {"id": entry["id"], "content": "y"})
    assert resp.status_code == 200
    assert "title" not in resp.json()["diaryEntry"]


@pytest.mark.parametrize(
    "body",
    [
        {"content": "", "entryDate": "2024-05-30"},
        {"content": "  \n ", "entryDate": "2024-05-30"},
        {"content": "x" * 10001, "entryDate": "2024-05-30"},
        {"title": "t" * 201, "content": "x", "entryDate": "2024-05-30"},
        {"content": "x", "entryDate": "2024-06-02"},
    ],
)
def test_invalid_diary_entries(client, body):
    resp = _create(client, body)
    assert resp.status_code == 400
    assert resp.json()["message"].startswith("Invalid diary entry data")


def test_today_is_not_in_the_future(client):
    resp = _create(client, {"title": "t" * 200, "content": "x" * 10000, "entryDate": "2024-06-01"})
    assert resp.status_code == 200


def test_invalid_entry_date_format(client):
    resp = _create(client, {"content": "x", "entryDate": "June 1st"})
    assert resp.status_code == 400


def test_update_is_validated(client):
    entry = _create(client, {"content": "x", "entryDate": "2024-05-30"}).json()["diaryEntry"]
    resp = call(client, SERVICE, "UpdateDiaryEntry", {"id": entry["id"], "content": " "})
    assert resp.status_code == 400


def test_entries_are_scoped_to_their_owner(client, repositories):
    entry = _create(client, {"content": "private", "entryDate": "2024-05-30"}, subject="alice").json()["diaryEntry"]

    for method, body in [
        ("GetDiaryEntry", {"id": entry["id"]}),
        ("UpdateDiaryEntry", {"id": entry["id"], "content": "hijacked"}),
        ("DeleteDiaryEntry", {"id": entry["id"]}),
    ]:
        resp = call(client, SERVICE, method, body, subject="bob")
        assert resp.status_code == 404, method

    assert call(client, SERVICE, "ListDiaryEntries", {}, subject="bob").json()["diaryEntries"] == []
    row = next(iter(repositories.diary_entries.rows.values()))
    assert row["content"] == "private"


def test_list_orders_by_entry_date_then_creation(client, clock):
    _create(client, {"title": "older", "content": "x", "entryDate": "2024-05-01"})
    _create(client, {"title": "first", "content": "x", "entryDate": "2024-05-20"})
    clock.advance(timedelta(seconds=1))
    _create(client, {"title": "second", "content": "x", "entryDate": "2024-05-20"})

    resp = call(client, SERVICE, "ListDiaryEntries", {})
    assert [e["title"] for e in resp.json()["diaryEntries"]] == ["second", "first", "older"]


def test_delete_unknown_entry(client):
    resp = call(client, SERVICE, "DeleteDiaryEntry", {"id": str(uuid.uuid4())})
    assert resp.status_code == 404


def test_get_with_malformed_id(client):
    resp = call(client, SERVICE, "GetDiaryEntry", {"id": "42"})
    assert resp.status_code == 400


def test_page_past_the_end_is_empty(client):
    for day in ["2024-05-01", "2024-05-02", "2024-05-03"]:
        _create(client, {"content": "x", "entryDate": day})

    resp = call(client, SERVICE, "ListDiaryEntries", {"pagination": {"pageSize": 2, "pageNumber": 3}})
    assert resp.status_code == 200
    assert resp.json() == {
        "diaryEntries": [],
        "pagination": {"totalItems": 3, "totalPages": 2, "currentPage": 3},
    }
