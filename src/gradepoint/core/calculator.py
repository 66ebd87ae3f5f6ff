"""GPA calculator.

Pure, stateless functions over course records:
- grade_points(credit_hours, grade_value): points earned by one course
- aggregate(courses): credit-weighted GPA with totals
- letter_grade_for_gpa(gpa): display letter for an average
- letter_for_grade_value(value): exact reverse lookup into the grade scale

Grade values are compared with an absolute tolerance of GRADE_TOLERANCE so
that float noise (e.g. 3.6999999999999997) never changes a classification,
while values that genuinely differ (3.05, 3.6999) are not fuzzily matched.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from types import MappingProxyType
from typing import Protocol

import structlog

logger = structlog.get_logger(__name__)

UNKNOWN_GRADE = "Unknown"
GRADE_TOLERANCE = 1e-9

# Ordered from highest to lowest; doubles as the threshold table for averages.
GRADE_SCALE = MappingProxyType(
    {
        "A/A+": 4.0,
        "A-": 3.7,
        "B+": 3.3,
        "B": 3.0,
        "B-": 2.7,
        "C+": 2.3,
        "C": 2.0,
        "C-": 1.7,
        "D+": 1.3,
        "D": 1.0,
        "D-": 0.7,
        "F": 0.0,
    }
)


class GradeValidationError(ValueError):
    """Raised when a course cannot take part in a GPA calculation."""


class GradedCourse(Protocol):
    """Anything carrying credit hours and grade points."""

    credit_hours: float
    grade_points: float


@dataclass(frozen=True)
class AggregateResult:
    """Derived totals over a list of courses."""

    gpa: float
    total_credit_hours: float
    total_grade_points: float


@dataclass(frozen=True)
class GpaSummary:
    """Aggregate plus the display letter and course count."""

    gpa: float
    total_credit_hours: float
    total_grade_points: float
    letter_grade: str
    course_count: int


@dataclass(frozen=True)
class GradeOption:
    """One selectable entry of the grade scale."""

    grade: str
    value: float
    label: str


def grade_points(credit_hours: float, grade_value: float) -> float:
    """Return credit_hours * grade_value, with no clamping or validation."""
    return credit_hours * grade_value


def _check_course(course: GradedCourse) -> None:
    hours = course.credit_hours
    if not math.isfinite(hours) or hours <= 0:
        raise GradeValidationError(
            f"Credit hours must be a positive finite number, got {hours!r}"
        )
    if not math.isfinite(course.grade_points):
        raise GradeValidationError(
            f"Grade points must be a finite number, got {course.grade_points!r}"
        )


def aggregate(courses: Iterable[GradedCourse]) -> AggregateResult:
    """Compute the credit-weighted GPA over courses.

    Args:
        courses: Course records (any order)

    Returns:
        AggregateResult; all zeros for an empty input

    Raises:
        GradeValidationError: If a course has non-finite or non-positive
            credit hours, or non-finite grade points
    """
    total_credit_hours = 0.0
    total_grade_points = 0.0
    count = 0

    for course in courses:
        _check_course(course)
        total_credit_hours += course.credit_hours
        total_grade_points += course.grade_points
        count += 1

    if count == 0:
        return AggregateResult(gpa=0.0, total_credit_hours=0.0, total_grade_points=0.0)

    return AggregateResult(
        gpa=total_grade_points / total_credit_hours,
        total_credit_hours=total_credit_hours,
        total_grade_points=total_grade_points,
    )


def letter_grade_for_gpa(gpa_value: float) -> str:
    """Map an average to the highest letter whose cutoff it reaches."""
    for letter, cutoff in GRADE_SCALE.items():
        if gpa_value >= cutoff - GRADE_TOLERANCE:
            return letter
    return "F"


def letter_for_grade_value(grade_value: float) -> str:
    """Reverse lookup of a grade value; "Unknown" when off the scale."""
    for letter, value in GRADE_SCALE.items():
        if math.isclose(grade_value, value, rel_tol=0.0, abs_tol=GRADE_TOLERANCE):
            return letter
    return UNKNOWN_GRADE


def grade_value_for_letter(letter: str) -> float | None:
    """Forward lookup of a letter label. Accepts "A" and "A+" for "A/A+"."""
    key = letter.strip().upper()
    if key in ("A", "A+"):
        key = "A/A+"
    return GRADE_SCALE.get(key)


def grade_options() -> list[GradeOption]:
    """List the scale as picker options, highest first."""
    options = []
    for letter, value in GRADE_SCALE.items():
        display = "A / A+" if letter == "A/A+" else letter
        options.append(GradeOption(grade=letter, value=value, label=f"{display} ({value:.1f})"))
    return options


def summarize(courses: Iterable[GradedCourse]) -> GpaSummary:
    """Aggregate courses and attach the display letter."""
    course_list = list(courses)
    result = aggregate(course_list)
    summary = GpaSummary(
        gpa=result.gpa,
        total_credit_hours=result.total_credit_hours,
        total_grade_points=result.total_grade_points,
        letter_grade=letter_grade_for_gpa(result.gpa),
        course_count=len(course_list),
    )
    logger.debug(
        "gpa_summarized",
        courses=summary.course_count,
        gpa=round(summary.gpa, 4),
    )
    return summary
