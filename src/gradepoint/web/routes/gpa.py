"""GPA and grade scale endpoints."""

from fastapi import APIRouter, Depends

from gradepoint.core.calculator import grade_options, summarize
from gradepoint.db.record_store import RecordStore
from gradepoint.web.dependencies import get_store
from gradepoint.web.schemas import (
    GpaSummaryResponse,
    GradeOptionResponse,
    SemesterGpaResponse,
)

router = APIRouter(prefix="/api", tags=["gpa"])


@router.get("/gpa", response_model=GpaSummaryResponse)
async def get_cumulative_gpa(store: RecordStore = Depends(get_store)) -> GpaSummaryResponse:
    """Cumulative GPA over every stored course."""
    return GpaSummaryResponse.model_validate(summarize(store.get_courses()))


@router.get("/gpa/semesters", response_model=list[SemesterGpaResponse])
async def get_gpa_by_semester(store: RecordStore = Depends(get_store)) -> list[SemesterGpaResponse]:
    """GPA broken down per semester."""
    courses = store.get_courses()
    results = []
    for semester in store.get_semesters():
        summary = summarize(c for c in courses if c.semester_id == semester.id)
        results.append(
            SemesterGpaResponse(
                semester_id=semester.id,
                semester_name=semester.name,
                gpa=summary.gpa,
                total_credit_hours=summary.total_credit_hours,
                total_grade_points=summary.total_grade_points,
                letter_grade=summary.letter_grade,
                course_count=summary.course_count,
            )
        )
    return results


@router.get("/grade-scale", response_model=list[GradeOptionResponse])
async def get_grade_scale() -> list[GradeOptionResponse]:
    """The selectable grade options, highest first."""
    return [GradeOptionResponse.model_validate(o) for o in grade_options()]
