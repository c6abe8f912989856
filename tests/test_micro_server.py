"""Tests for the in-memory college service."""

import pytest

from student_info.micro_server import create_app


@pytest.fixture
def http():
    return create_app().test_client()


def test_create_and_get(http):
    r = http.post("/college/", json={
        "id": 42, "collegeName": "City College",
        "address": "1 College Rd", "university": "State University",
    })
    assert r.status_code == 200

    body = http.get("/college/42").get_json()
    assert body["collegeName"] == "City College"


def test_ids_assigned_when_missing(http):
    first = http.post("/college/", json={"collegeName": "A"}).get_json()
    second = http.post("/college/", json={"collegeName": "B"}).get_json()

    assert (first["id"], second["id"]) == (1, 2)
    assert [c["collegeName"] for c in http.get("/college/").get_json()] == ["A", "B"]


@pytest.mark.parametrize("path", ["/college/7", "/college/abc"])
def test_unknown_college(http, path):
    assert http.get(path).status_code == 404


def test_invalid_payload(http):
    assert http.post("/college/", json=[1]).status_code == 400
