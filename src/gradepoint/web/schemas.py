"""Pydantic schemas for the Web API.

Serialization models for Course, Semester, GPA summaries and the grade scale.
JSON keys are camelCase (creditHours, gradeValue, ...); snake_case field
names are accepted on input as well.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from gradepoint import __version__
from gradepoint.core.calculator import (
    UNKNOWN_GRADE,
    grade_value_for_letter,
    letter_for_grade_value,
)

MIN_CREDIT_HOURS = 0.5
MAX_CREDIT_HOURS = 10.0
MAX_GRADE_POINTS = MAX_CREDIT_HOURS * 4.0


class CamelModel(BaseModel):
    """Base model with camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def _require_text(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("must not be empty")
    return value


# =============================================================================
# COURSE SCHEMAS
# =============================================================================


class CourseCreate(CamelModel):
    """Request body for creating a course.

    A grade must be selected either as a label (grade) or as a scale value
    (gradeValue). gradePoints is computed when omitted.
    """

    name: str = Field(..., min_length=1, max_length=200)
    credit_hours: float = Field(..., ge=MIN_CREDIT_HOURS, le=MAX_CREDIT_HOURS)
    grade: str | None = Field(default=None, max_length=10)
    grade_value: float | None = Field(default=None, ge=0.0, le=4.0)
    grade_points: float | None = Field(
        default=None, ge=0.0, le=MAX_GRADE_POINTS, allow_inf_nan=False
    )
    semester_id: int | None = None

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, v: str) -> str:
        return _require_text(v)

    @model_validator(mode="after")
    def _resolve_grade(self) -> "CourseCreate":
        if self.grade is None and self.grade_value is None:
            raise ValueError("A grade must be selected")

        if self.grade_value is not None:
            letter = letter_for_grade_value(self.grade_value)
            if letter == UNKNOWN_GRADE:
                raise ValueError(f"Grade value {self.grade_value} is not on the grade scale")
            if self.grade is not None and grade_value_for_letter(self.grade) != self.grade_value:
                raise ValueError(
                    f"Grade '{self.grade}' does not match grade value {self.grade_value}"
                )
            self.grade = letter
        else:
            value = grade_value_for_letter(self.grade)
            if value is None:
                raise ValueError(f"Unknown grade '{self.grade}'")
            self.grade = letter_for_grade_value(value)
            self.grade_value = value

        return self


class CourseResponse(CamelModel):
    """Response for a course."""

    id: int
    name: str
    credit_hours: float
    grade: str
    grade_value: float
    grade_points: float
    semester_id: int
    user_id: int


# =============================================================================
# SEMESTER SCHEMAS
# =============================================================================


class SemesterCreate(CamelModel):
    """Request body for creating or renaming a semester."""

    name: str = Field(..., min_length=1, max_length=100)

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, v: str) -> str:
        return _require_text(v)


class SemesterResponse(CamelModel):
    """Response for a semester."""

    id: int
    name: str
    user_id: int


# =============================================================================
# GPA SCHEMAS
# =============================================================================


class GpaSummaryResponse(CamelModel):
    """GPA over a set of courses."""

    gpa: float
    total_credit_hours: float
    total_grade_points: float
    letter_grade: str
    course_count: int


class SemesterGpaResponse(GpaSummaryResponse):
    """GPA for one semester."""

    semester_id: int
    semester_name: str


class GradeOptionResponse(CamelModel):
    """One entry of the grade scale."""

    grade: str
    value: float
    label: str


# =============================================================================
# MISC SCHEMAS
# =============================================================================


class MessageResponse(BaseModel):
    """Confirmation or error message."""

    message: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "ok"
    version: str = __version__
    timestamp: str = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
