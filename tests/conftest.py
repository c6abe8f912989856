"""Shared fakes for the student service tests."""

import uuid
from dataclasses import replace

import pytest
import requests

from student_info.main_server import create_app
from student_info.models import College
from student_info.student_services import StudentServices

TEST_CONFIG = {
    "COLLEGE_SERVICE_URL": "http://college.test",
    "COLLEGE_TIMEOUT": "1",
    "LOG_LEVEL": "DEBUG",
}


class FakeStudentStore:
    """In-memory stand-in for MySQLStudentStore, insertion ordered."""

    def __init__(self):
        self.rows = {}
        self.fail_with = None

    def _check(self):
        if self.fail_with is not None:
            raise self.fail_with

    def save(self, student):
        self._check()
        if not student.id:
            student = replace(student, id=uuid.uuid4().hex)
        self.rows[student.id] = student
        return student

    def find_all(self):
        self._check()
        return list(self.rows.values())

    def find_by_id(self, student_id):
        self._check()
        return self.rows.get(student_id)

    def find_by_name(self, name):
        self._check()
        return next((s for s in self.rows.values() if s.name == name), None)

    def find_by_college_id(self, college_id):
        self._check()
        return [s for s in self.rows.values() if s.college_id == college_id]

    def delete_by_id(self, student_id):
        self._check()
        self.rows.pop(student_id, None)


class FakeCollegeClient:
    """Answers from ``colleges``; ``outcomes`` queues per-call results.

    A queued exception is raised, a queued College is returned.
    """

    def __init__(self, colleges=None, down=False):
        self.colleges = colleges or {}
        self.down = down
        self.outcomes = []
        self.calls = []
        self.closed = False

    def get_college(self, college_id):
        self.calls.append(college_id)
        if self.outcomes:
            outcome = self.outcomes.pop(0)
            if isinstance(outcome, Exception):
                raise outcome
            return outcome
        if self.down:
            raise requests.ConnectionError("Connection refused")
        return self.colleges[college_id]

    def close(self):
        self.closed = True


@pytest.fixture
def store():
    return FakeStudentStore()


@pytest.fixture
def city_college():
    return College(id=42, college_name="City College", address="1 College Rd",
                   university="State University")


@pytest.fixture
def college_client(city_college):
    return FakeCollegeClient({"42": city_college})


@pytest.fixture
def services(store, college_client):
    return StudentServices(store, college_client)


@pytest.fixture
def app(store, college_client):
    return create_app(dict(TEST_CONFIG), store=store, college_client=college_client)


@pytest.fixture
def client(app):
    return app.test_client()
