"""Route handlers for the Web API."""

from gradepoint.web.routes.health import router as health_router
from gradepoint.web.routes.courses import router as courses_router
from gradepoint.web.routes.semesters import router as semesters_router
from gradepoint.web.routes.gpa import router as gpa_router

__all__ = [
    "health_router",
    "courses_router",
    "semesters_router",
    "gpa_router",
]
