"""Course endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from gradepoint.core.calculator import grade_points
from gradepoint.core.models import CourseInput
from gradepoint.db.record_store import RecordStore
from gradepoint.web.dependencies import get_store, parse_id
from gradepoint.web.schemas import CourseCreate, CourseResponse, MessageResponse

router = APIRouter(prefix="/api/courses", tags=["courses"])


@router.get("", response_model=list[CourseResponse])
async def list_courses(store: RecordStore = Depends(get_store)) -> list[CourseResponse]:
    """List all courses."""
    return [CourseResponse.model_validate(c) for c in store.get_courses()]


@router.get("/{course_id}", response_model=CourseResponse)
async def get_course(course_id: str, store: RecordStore = Depends(get_store)) -> CourseResponse:
    """Get a specific course by ID."""
    course = store.get_course_by_id(parse_id(course_id, "course"))

    if course is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Course not found",
        )

    return CourseResponse.model_validate(course)


@router.post("", response_model=CourseResponse, status_code=status.HTTP_201_CREATED)
async def create_course(
    course_data: CourseCreate,
    store: RecordStore = Depends(get_store),
) -> CourseResponse:
    """Create a course, computing its grade points when not supplied."""
    points = course_data.grade_points
    if points is None:
        points = grade_points(course_data.credit_hours, course_data.grade_value)

    course = store.create_course(
        CourseInput(
            name=course_data.name,
            credit_hours=course_data.credit_hours,
            grade=course_data.grade,
            grade_value=course_data.grade_value,
            grade_points=points,
        ),
        semester_id=course_data.semester_id,
    )
    return CourseResponse.model_validate(course)


@router.delete("/{course_id}", response_model=MessageResponse)
async def delete_course(course_id: str, store: RecordStore = Depends(get_store)) -> MessageResponse:
    """Delete a course by ID."""
    if not store.delete_course(parse_id(course_id, "course")):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Course not found",
        )

    return MessageResponse(message="Course deleted successfully")


@router.delete("", response_model=MessageResponse)
async def delete_all_courses(store: RecordStore = Depends(get_store)) -> MessageResponse:
    """Delete every course. Semesters are kept."""
    store.delete_all_courses()
    return MessageResponse(message="All courses deleted successfully")
