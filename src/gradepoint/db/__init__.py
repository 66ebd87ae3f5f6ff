"""In-memory storage for semesters and courses.

Data lives for the lifetime of the process only.
"""

from gradepoint.db.record_store import (
    DefaultSemesterError,
    RecordStore,
    RecordStoreError,
    SemesterNotFoundError,
)

__all__ = [
    "DefaultSemesterError",
    "RecordStore",
    "RecordStoreError",
    "SemesterNotFoundError",
]
