"""Domain records for courses and semesters.

These are the shapes the record store owns and the calculator reads.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_SEMESTER_ID = 1
PLACEHOLDER_OWNER_ID = 1


@dataclass
class CourseInput:
    """Caller-supplied course fields (everything except identity)."""

    name: str
    credit_hours: float
    grade: str
    grade_value: float
    grade_points: float


@dataclass(frozen=True)
class Course:
    """A stored course record."""

    id: int
    name: str
    credit_hours: float
    grade: str
    grade_value: float
    grade_points: float
    semester_id: int = DEFAULT_SEMESTER_ID
    user_id: int = PLACEHOLDER_OWNER_ID


@dataclass(frozen=True)
class Semester:
    """A named grouping of courses."""

    id: int
    name: str
    user_id: int = PLACEHOLDER_OWNER_ID
