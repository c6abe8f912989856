"""Tests for CollegeClient against a mocked requests.Session."""

import json
from unittest.mock import MagicMock

import pytest
import requests

from student_info.college_client import CollegeClient, CollegeServiceError
from student_info.models import College


def make_response(status=200, payload=None, raw=None):
    resp = requests.Response()
    resp.status_code = status
    if raw is not None:
        resp._content = raw
    elif payload is not None:
        resp._content = json.dumps(payload).encode()
    else:
        resp._content = b""
    return resp


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


def test_get_college_maps_payload(session):
    session.get.return_value = make_response(payload={
        "id": 42, "collegeName": "City College",
        "address": "1 College Rd", "university": "State University",
    })
    client = CollegeClient("http://college.test/", session=session, timeout=2.5)

    college = client.get_college("42")

    assert college == College(42, "City College", "1 College Rd", "State University")
    session.get.assert_called_once_with("http://college.test/college/42", timeout=2.5)


def test_missing_fields_are_none(session):
    session.get.return_value = make_response(payload={"collegeName": "Nameless"})

    college = CollegeClient("http://college.test", session=session).get_college("1")

    assert college == College(id=None, college_name="Nameless")


@pytest.mark.parametrize("resp", [
    make_response(status=404, payload={"error": "NOT_FOUND"}),
    make_response(status=500),
    make_response(status=200),
    make_response(status=200, raw=b"null"),
    make_response(status=200, raw=b"<html>oops</html>"),
    make_response(status=200, payload=[1, 2]),
    make_response(status=200, payload={"id": "not-a-number"}),
])
def test_unusable_answers_raise(session, resp):
    session.get.return_value = resp

    with pytest.raises(CollegeServiceError):
        CollegeClient("http://college.test", session=session).get_college("42")


def test_connection_errors_propagate(session):
    session.get.side_effect = requests.ConnectionError("refused")

    with pytest.raises(requests.ConnectionError):
        CollegeClient("http://college.test", session=session).get_college("42")


def test_close_closes_session(session):
    CollegeClient("http://college.test", session=session).close()
    session.close.assert_called_once_with()
