"""Shared pytest fixtures."""

import pytest
from fastapi.testclient import TestClient

from gradepoint.config.app_config import AppConfig
from gradepoint.core.models import CourseInput
from gradepoint.db.record_store import RecordStore
from gradepoint.web.api import create_app


def make_course_input(
    name: str = "Calculus",
    credit_hours: float = 3.0,
    grade: str = "A/A+",
    grade_value: float = 4.0,
) -> CourseInput:
    """Build a CourseInput with consistent grade points."""
    return CourseInput(
        name=name,
        credit_hours=credit_hours,
        grade=grade,
        grade_value=grade_value,
        grade_points=credit_hours * grade_value,
    )


@pytest.fixture
def store():
    """Fresh record store."""
    return RecordStore()


@pytest.fixture
def client(store):
    """Test client backed by the isolated store fixture."""
    app = create_app(store=store, config=AppConfig())
    return TestClient(app)


@pytest.fixture
def course_factory():
    """Factory for CourseInput records."""
    return make_course_input
