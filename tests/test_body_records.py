from datetime import date, timedelta

import pytest
from conftest import call

SERVICE = "BodyRecordService"


def _create(client, body, **kwargs):
    return call(client, SERVICE, "CreateBodyRecord", body, **kwargs)


def test_create_body_record(client):
    resp = _create(client, {"date": "2024-05-30", "weightKg": 72.5, "bodyFatPercentage": 18.2})
    assert resp.status_code == 200, resp.text
    record = resp.json()["bodyRecord"]
    assert record["date"] == "2024-05-30"
    assert record["weightKg"] == 72.5
    assert record["bodyFatPercentage"] == 18.2
    assert record["createdAt"] == record["updatedAt"]


def test_optional_measurements_are_omitted(client):
    resp = _create(client, {"date": "2024-05-30", "weightKg": 70})
    assert resp.status_code == 200
    record = resp.json()["bodyRecord"]
    assert record["weightKg"] == 70
    assert "bodyFatPercentage" not in record


def test_snake_case_field_names_are_accepted(client):
    resp = _create(client, {"date": "2024-05-30", "weight_kg": 70.1})
    assert resp.status_code == 200
    assert resp.json()["bodyRecord"]["weightKg"] == 70.1


def test_same_day_overwrites_existing_record(client, clock, repositories):
    first = _create(client, {"date": "2024-05-30", "weightKg": 72.5}).json()["bodyRecord"]
    clock.advance(timedelta(hours=1))
    second = _create(client, {"date": "2024-05-30", "weightKg": 71.0, "bodyFatPercentage": 17}).json()["bodyRecord"]

    assert second["id"] == first["id"]
    assert second["weightKg"] == 71.0
    assert second["createdAt"] == first["createdAt"]
    assert second["updatedAt"] != first["updatedAt"]
    assert len(repositories.body_records.rows) == 1


@pytest.mark.parametrize(
    "body",
    [
        {"weightKg": 0},
        {"weightKg": -3},
        {"weightKg": 500.01},
        {"bodyFatPercentage": -0.5},
        {"bodyFatPercentage": 100.5},
    ],
)
def test_out_of_range_measurements_are_rejected(client, body):
    resp = _create(client, {"date": "2024-05-30", **body})
    assert resp.status_code == 400
    payload = resp.json()
    assert payload["code"] == "invalid_argument"
    assert payload["message"].startswith("Invalid body record data")


@pytest.mark.parametrize("body", [{"weightKg": 500}, {"bodyFatPercentage": 0}, {"bodyFatPercentage": 100}])
def test_boundary_measurements_are_accepted(client, body):
    resp = _create(client, {"date": "2024-05-30", **body})
    assert resp.status_code == 200


@pytest.mark.parametrize("value", ["", "2024/05/30", "30-05-2024", "2024-02-30"])
def test_invalid_date(client, value):
    resp = _create(client, {"date": value, "weightKg": 70})
    assert resp.status_code == 400
    assert resp.json()["code"] == "invalid_argument"


def test_list_is_newest_first_and_paginated(client):
    start = date(2024, 1, 1)
    for offset in range(25):
        day = (start + timedelta(days=offset)).isoformat()
        assert _create(client, {"date": day, "weightKg": 70}).status_code == 200

    first = call(client, SERVICE, "ListBodyRecords", {}).json()
    assert len(first["bodyRecords"]) == 20
    assert first["bodyRecords"][0]["date"] == "2024-01-25"
    assert first["pagination"] == {"totalItems": 25, "totalPages": 2, "currentPage": 1}

    second = call(client, SERVICE, "ListBodyRecords", {"pagination": {"pageSize": 20, "pageNumber": 2}}).json()
    assert [r["date"] for r in second["bodyRecords"]] == [
        (start + timedelta(days=offset)).isoformat() for offset in range(4, -1, -1)
    ]
    assert second["pagination"]["currentPage"] == 2


def test_empty_list_reports_one_page(client):
    resp = call(client, SERVICE, "ListBodyRecords", {})
    assert resp.status_code == 200
    assert resp.json() == {
        "bodyRecords": [],
        "pagination": {"totalItems": 0, "totalPages": 1, "currentPage": 1},
    }


def test_records_are_scoped_to_their_owner(client):
    _create(client, {"date": "2024-05-30", "weightKg": 70}, subject="alice")
    resp = call(client, SERVICE, "ListBodyRecords", {}, subject="bob")
    assert resp.json()["bodyRecords"] == []

    ranged = call(
        client,
        SERVICE,
        "GetBodyRecordsByDateRange",
        {"startDate": "2024-05-01", "endDate": "2024-05-31"},
        subject="bob",
    )
    assert ranged.json()["bodyRecords"] == []


def test_date_range_is_inclusive_and_ascending(client):
    for day in ["2024-05-01", "2024-05-10", "2024-05-20", "2024-05-31"]:
        _create(client, {"date": day, "weightKg": 70})

    resp = call(
        client,
        SERVICE,
        "GetBodyRecordsByDateRange",
        {"startDate": "2024-05-10", "endDate": "2024-05-31"},
    )
    assert resp.status_code == 200
    assert [r["date"] for r in resp.json()["bodyRecords"]] == ["2024-05-10", "2024-05-20", "2024-05-31"]


def test_date_range_with_start_after_end(client):
    resp = call(
        client,
        SERVICE,
        "GetBodyRecordsByDateRange",
        {"startDate": "2024-05-31", "endDate": "2024-05-01"},
    )
    assert resp.status_code == 400
    assert resp.json()["code"] == "invalid_argument"


def test_date_range_with_bad_date(client):
    resp = call(client, SERVICE, "GetBodyRecordsByDateRange", {"startDate": "yesterday", "endDate": "2024-05-01"})
    assert resp.status_code == 400


def test_non_numeric_weight_is_invalid_argument(client):
    resp = _create(client, {"date": "2024-05-30", "weightKg": "heavy"})
    assert resp.status_code == 400
    assert resp.json()["code"] == "invalid_argument"


@pytest.mark.parametrize(
    "body, field, stored",
    [
        ({"weightKg": 72.345}, "weightKg", 72.35),
        ({"weightKg": 0.005}, "weightKg", 0.01),
        ({"bodyFatPercentage": 99.996}, "bodyFatPercentage", 100.0),
    ],
)
def test_measurements_are_rounded_to_two_decimals(client, body, field, stored):
    resp = _create(client, {"date": "2024-05-30", **body})
    assert resp.status_code == 200, resp.text
    assert resp.json()["bodyRecord"][field] == stored


@pytest.mark.parametrize("body", [{"weightKg": 0.004}, {"bodyFatPercentage": 100.005}, {"weightKg": 1e300}])
def test_values_outside_range_after_rounding_are_rejected(client, repositories, body):
    resp = _create(client, {"date": "2024-05-30", **body})
    assert resp.status_code == 400
    assert resp.json()["code"] == "invalid_argument"
    assert repositories.body_records.rows == {}


def test_page_past_the_end_is_empty(client):
    for day in ["2024-05-01", "2024-05-02", "2024-05-03"]:
        _create(client, {"date": day, "weightKg": 70})

    resp = call(client, SERVICE, "ListBodyRecords", {"pagination": {"pageSize": 2, "pageNumber": 3}})
    assert resp.status_code == 200
    assert resp.json() == {
        "bodyRecords": [],
        "pagination": {"totalItems": 3, "totalPages": 2, "currentPage": 3},
    }
