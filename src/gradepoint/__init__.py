"""GPA tracking with semesters, courses and a small REST API."""

__version__ = "0.1.0"
