"""In-memory record store for semesters and courses.

Owns the canonical collections, assigns identities and keeps every course
pointing at an existing semester. Semester 1 is created on construction and
can never be deleted; deleting any other semester moves its courses to it.

Usage:
    store = RecordStore()
    semester = store.create_semester("Fall 2024")
    course = store.create_course(course_input, semester_id=semester.id)
"""

from __future__ import annotations

import threading
from dataclasses import replace

import structlog

from gradepoint.core.models import (
    DEFAULT_SEMESTER_ID,
    PLACEHOLDER_OWNER_ID,
    Course,
    CourseInput,
    Semester,
)

logger = structlog.get_logger(__name__)

DEFAULT_SEMESTER_NAME = "Unsorted"


class RecordStoreError(Exception):
    """Base error for record store operations."""


class DefaultSemesterError(RecordStoreError):
    """Raised when an operation would remove the default semester."""

    def __init__(self, semester_id: int = DEFAULT_SEMESTER_ID):
        self.semester_id = semester_id
        super().__init__("Cannot delete the default semester")


class SemesterNotFoundError(RecordStoreError):
    """Raised when a course references a semester that does not exist."""

    def __init__(self, semester_id: int):
        self.semester_id = semester_id
        super().__init__(f"Semester {semester_id} does not exist")


class RecordStore:
    """Repository of Semester and Course records for one process.

    All operations are synchronous and atomic with respect to each other;
    a single lock guards both collections and both counters.
    """

    def __init__(
        self,
        default_semester_name: str = DEFAULT_SEMESTER_NAME,
        owner_id: int = PLACEHOLDER_OWNER_ID,
    ):
        self._semesters: dict[int, Semester] = {}
        self._courses: dict[int, Course] = {}
        self._next_semester_id = 1
        self._next_course_id = 1
        self._owner_id = owner_id
        self._lock = threading.Lock()

        self.create_semester(default_semester_name)

    # -------------------------------------------------------------------------
    # Semesters
    # -------------------------------------------------------------------------

    def create_semester(self, name: str) -> Semester:
        """Create a semester with the next identity."""
        with self._lock:
            semester = Semester(
                id=self._next_semester_id,
                name=name,
                user_id=self._owner_id,
            )
            self._next_semester_id += 1
            self._semesters[semester.id] = semester

        logger.info("semester_created", semester_id=semester.id, name=name)
        return semester

    def get_semesters(self) -> list[Semester]:
        with self._lock:
            return list(self._semesters.values())

    def get_semester_by_id(self, semester_id: int) -> Semester | None:
        with self._lock:
            return self._semesters.get(semester_id)

    def rename_semester(self, semester_id: int, name: str) -> Semester | None:
        """Rename a semester.

        Returns:
            The updated Semester, or None if it does not exist
        """
        with self._lock:
            semester = self._semesters.get(semester_id)
            if semester is None:
                return None
            updated = replace(semester, name=name)
            self._semesters[semester_id] = updated

        logger.info("semester_renamed", semester_id=semester_id, name=name)
        return updated

    def delete_semester(self, semester_id: int) -> bool:
        """Delete a semester, moving its courses to the default semester.

        Reassignment and removal happen as one unit: the reassigned records
        are built first and only written together with the removal.

        Args:
            semester_id: ID of the semester to delete

        Returns:
            True if the semester existed and was removed, False otherwise

        Raises:
            DefaultSemesterError: If semester_id is the default semester
        """
        if semester_id == DEFAULT_SEMESTER_ID:
            raise DefaultSemesterError(semester_id)

        with self._lock:
            if semester_id not in self._semesters:
                return False

            moved = {
                course.id: replace(course, semester_id=DEFAULT_SEMESTER_ID)
                for course in self._courses.values()
                if course.semester_id == semester_id
            }
            self._courses.update(moved)
            del self._semesters[semester_id]

        if moved:
            logger.info(
                "courses_reassigned",
                from_semester_id=semester_id,
                to_semester_id=DEFAULT_SEMESTER_ID,
                course_ids=sorted(moved),
            )
        logger.info("semester_deleted", semester_id=semester_id)
        return True

    # -------------------------------------------------------------------------
    # Courses
    # -------------------------------------------------------------------------

    def create_course(
        self,
        course_input: CourseInput,
        semester_id: int | None = DEFAULT_SEMESTER_ID,
    ) -> Course:
        """Store a course under the next identity.

        Args:
            course_input: Caller-validated course fields
            semester_id: Owning semester; None or 0 means the default semester

        Returns:
            The stored Course

        Raises:
            SemesterNotFoundError: If semester_id does not exist
        """
        target = semester_id or DEFAULT_SEMESTER_ID

        with self._lock:
            if target not in self._semesters:
                raise SemesterNotFoundError(target)

            course = Course(
                id=self._next_course_id,
                name=course_input.name,
                credit_hours=course_input.credit_hours,
                grade=course_input.grade,
                grade_value=course_input.grade_value,
                grade_points=course_input.grade_points,
                semester_id=target,
                user_id=self._owner_id,
            )
            self._next_course_id += 1
            self._courses[course.id] = course

        logger.info(
            "course_created",
            course_id=course.id,
            semester_id=target,
            credit_hours=course.credit_hours,
            grade=course.grade,
        )
        return course

    def get_courses(self) -> list[Course]:
        with self._lock:
            return list(self._courses.values())

    def get_courses_by_semester_id(self, semester_id: int) -> list[Course]:
        with self._lock:
            return [c for c in self._courses.values() if c.semester_id == semester_id]

    def get_course_by_id(self, course_id: int) -> Course | None:
        with self._lock:
            return self._courses.get(course_id)

    def delete_course(self, course_id: int) -> bool:
        """Delete a course. Returns True if it existed."""
        with self._lock:
            removed = self._courses.pop(course_id, None)

        if removed is None:
            return False

        logger.info("course_deleted", course_id=course_id)
        return True

    def delete_all_courses(self) -> bool:
        """Remove every course; semesters and id counters are untouched."""
        with self._lock:
            count = len(self._courses)
            self._courses.clear()

        logger.info("courses_cleared", deleted=count)
        return True
