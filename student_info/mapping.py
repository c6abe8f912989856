# mapping.py (wire/storage <-> value types)
from .models import College, Student, StudentWithCollege


# ---------------------------------------------------
# Student
# ---------------------------------------------------
def _as_text(value):
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return value if isinstance(value, str) else str(value)


def student_from_json(data) -> Student:
    if not isinstance(data, dict):
        raise ValueError("student payload must be a JSON object")
    return Student(
        id=_as_text(data.get("id")) or None,
        name=_as_text(data.get("name")),
        address=_as_text(data.get("address")),
        age=_as_text(data.get("age")),
        college_id=_as_text(data.get("collegeId")),
    )


def student_to_json(student: Student) -> dict:
    return {
        "id": student.id,
        "name": student.name,
        "address": student.address,
        "age": student.age,
        "collegeId": student.college_id,
    }


def student_from_row(row: dict) -> Student:
    return Student(
        id=row["id"],
        name=row.get("name"),
        address=row.get("address"),
        age=row.get("age"),
        college_id=row.get("college_id"),
    )


def student_to_row(student: Student) -> tuple:
    """Column order matches ``student_store.UPSERT_SQL``."""
    return (
        student.id,
        student.name,
        student.address,
        _as_text(student.age),
        student.college_id,
    )


# ---------------------------------------------------
# College
# ---------------------------------------------------
def college_from_json(data) -> College:
    if not isinstance(data, dict):
        raise ValueError("college payload must be a JSON object")
    raw_id = data.get("id")
    if raw_id is not None:
        if isinstance(raw_id, bool):
            raise ValueError(f"invalid college id: {raw_id!r}")
        try:
            raw_id = int(raw_id)
        except (TypeError, ValueError):
            raise ValueError(f"invalid college id: {raw_id!r}")
    return College(
        id=raw_id,
        college_name=data.get("collegeName"),
        address=data.get("address"),
        university=data.get("university"),
    )


def college_to_json(college: College) -> dict:
    return {
        "id": college.id,
        "collegeName": college.college_name,
        "address": college.address,
        "university": college.university,
    }


def pair_to_json(pair: StudentWithCollege) -> dict:
    return {
        "student": student_to_json(pair.student),
        "college": college_to_json(pair.college),
    }
