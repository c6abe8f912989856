# student_services.py (student CRUD + college enrichment)
import logging
import re

import requests

from .models import College, StudentWithCollege

logger = logging.getLogger(__name__)

PLACEHOLDER_NAME = "College Service Unavailable"
PLACEHOLDER_ADDRESS = "Service not running"
PLACEHOLDER_UNIVERSITY = "Unknown"

_SIGNED_INT = re.compile(r"[+-]?[0-9]+")
_LONG_MIN, _LONG_MAX = -(2 ** 63), 2 ** 63 - 1


# ---------------------------------------------------
# Internal utilities
# ---------------------------------------------------
def parse_college_id(college_id) -> int:
    """Numeric form of a college id, or 0 when it is not a signed 64-bit integer."""
    s = college_id if isinstance(college_id, str) else ""
    if not _SIGNED_INT.fullmatch(s):
        return 0
    value = int(s)
    if value < _LONG_MIN or value > _LONG_MAX:
        return 0
    return value


def create_placeholder_college(college_id) -> College:
    return College(
        id=parse_college_id(college_id),
        college_name=PLACEHOLDER_NAME,
        address=PLACEHOLDER_ADDRESS,
        university=PLACEHOLDER_UNIVERSITY,
    )


class StudentServices:
    def __init__(self, store, college_client):
        self.store = store
        self.college_client = college_client

    # ---------------------------------------------------
    # CRUD passthroughs
    # ---------------------------------------------------
    def save_student(self, student):
        return self.store.save(student)

    def get_all_students(self):
        return self.store.find_all()

    def delete_student(self, student_id):
        self.store.delete_by_id(student_id)

    def get_student_by_name(self, name):
        return self.store.find_by_name(name)

    def update_student_by_name(self, name):
        # lookup only, nothing is mutated here
        return self.store.find_by_name(name)

    # ---------------------------------------------------
    # College enrichment
    # ---------------------------------------------------
    def fetch_college(self, college_id) -> College:
        """Remote college for ``college_id``; a placeholder if the call fails."""
        try:
            return self.college_client.get_college(college_id)
        except (requests.ConnectionError, requests.Timeout) as e:
            logger.warning(
                "College service not available, using placeholder for college ID: %s (%s)",
                college_id, e,
            )
        except Exception as e:
            logger.warning(
                "Error fetching college information for ID: %s, Error: %s",
                college_id, e,
            )
        return create_placeholder_college(college_id)

    def get_students_by_college_id(self, college_id):
        """Pair every student of ``college_id`` with its college.

        Store failures propagate; remote failures never do. Each student
        gets its own remote call, issued one after another, keyed by the
        student's own ``college_id``.
        """
        students = self.store.find_by_college_id(college_id)
        result = []
        for student in students:
            college = self.fetch_college(student.college_id)
            result.append(StudentWithCollege(student=student, college=college))
        return result

    def get_students_by_college_id_only(self, college_id):
        return self.store.find_by_college_id(college_id)
