"""Request dependencies shared by the route modules."""

import re

from fastapi import HTTPException, Request, status

from gradepoint.db.record_store import RecordStore

# Plain ASCII digits only; int() alone would also take "1_0", " 7 ", "+3"
_ID_PATTERN = re.compile(r"[0-9]+")


def get_store(request: Request) -> RecordStore:
    """Return the record store owned by the running app."""
    return request.app.state.store


def parse_id(raw: str, entity: str) -> int:
    """Parse a path id, rejecting anything but plain ASCII digits with 400."""
    if not _ID_PATTERN.fullmatch(raw):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid {entity} ID",
        )
    return int(raw)
