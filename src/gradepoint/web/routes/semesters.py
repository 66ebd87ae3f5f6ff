"""Semester endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from gradepoint.core.calculator import summarize
from gradepoint.core.models import DEFAULT_SEMESTER_ID
from gradepoint.db.record_store import RecordStore
from gradepoint.web.dependencies import get_store, parse_id
from gradepoint.web.schemas import (
    CourseResponse,
    MessageResponse,
    SemesterCreate,
    SemesterGpaResponse,
    SemesterResponse,
)

router = APIRouter(prefix="/api/semesters", tags=["semesters"])


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Semester not found",
    )


@router.get("", response_model=list[SemesterResponse])
async def list_semesters(store: RecordStore = Depends(get_store)) -> list[SemesterResponse]:
    """List all semesters."""
    return [SemesterResponse.model_validate(s) for s in store.get_semesters()]


@router.get("/{semester_id}", response_model=SemesterResponse)
async def get_semester(semester_id: str, store: RecordStore = Depends(get_store)) -> SemesterResponse:
    """Get a specific semester by ID."""
    semester = store.get_semester_by_id(parse_id(semester_id, "semester"))
    if semester is None:
        raise _not_found()
    return SemesterResponse.model_validate(semester)


@router.post("", response_model=SemesterResponse, status_code=status.HTTP_201_CREATED)
async def create_semester(
    semester_data: SemesterCreate,
    store: RecordStore = Depends(get_store),
) -> SemesterResponse:
    """Create a new semester."""
    semester = store.create_semester(semester_data.name)
    return SemesterResponse.model_validate(semester)


@router.patch("/{semester_id}", response_model=SemesterResponse)
async def rename_semester(
    semester_id: str,
    semester_data: SemesterCreate,
    store: RecordStore = Depends(get_store),
) -> SemesterResponse:
    """Rename a semester."""
    semester = store.rename_semester(parse_id(semester_id, "semester"), semester_data.name)
    if semester is None:
        raise _not_found()
    return SemesterResponse.model_validate(semester)


@router.delete("/{semester_id}", response_model=MessageResponse)
async def delete_semester(semester_id: str, store: RecordStore = Depends(get_store)) -> MessageResponse:
    """Delete a semester; its courses move to the default semester."""
    sid = parse_id(semester_id, "semester")

    if sid == DEFAULT_SEMESTER_ID:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Cannot delete the default semester",
        )

    if not store.delete_semester(sid):
        raise _not_found()

    return MessageResponse(message="Semester deleted successfully")


@router.get("/{semester_id}/courses", response_model=list[CourseResponse])
async def list_semester_courses(
    semester_id: str,
    store: RecordStore = Depends(get_store),
) -> list[CourseResponse]:
    """List the courses of one semester."""
    courses = store.get_courses_by_semester_id(parse_id(semester_id, "semester"))
    return [CourseResponse.model_validate(c) for c in courses]


@router.get("/{semester_id}/gpa", response_model=SemesterGpaResponse)
async def get_semester_gpa(
    semester_id: str,
    store: RecordStore = Depends(get_store),
) -> SemesterGpaResponse:
    """GPA over the courses of one semester."""
    semester = store.get_semester_by_id(parse_id(semester_id, "semester"))
    if semester is None:
        raise _not_found()

    summary = summarize(store.get_courses_by_semester_id(semester.id))
    return SemesterGpaResponse(
        semester_id=semester.id,
        semester_name=semester.name,
        gpa=summary.gpa,
        total_credit_hours=summary.total_credit_hours,
        total_grade_points=summary.total_grade_points,
        letter_grade=summary.letter_grade,
        course_count=summary.course_count,
    )
