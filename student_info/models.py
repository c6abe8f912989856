# models.py (value types shared by the store, client and service)
from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass
class Student:
    id: Optional[str] = None
    name: Optional[str] = None
    address: Optional[str] = None
    # kept loosely typed, the service never does arithmetic on it
    age: Optional[Union[str, int]] = None
    college_id: Optional[str] = None


@dataclass
class College:
    id: Optional[int] = None
    college_name: Optional[str] = None
    address: Optional[str] = None
    university: Optional[str] = None


@dataclass
class StudentWithCollege:
    """One student paired with its college, real or placeholder."""
    student: Student
    college: College = field(default_factory=College)
