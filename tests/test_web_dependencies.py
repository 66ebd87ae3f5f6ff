"""Tests for path id parsing."""

import pytest
from fastapi import HTTPException

from gradepoint.web.dependencies import parse_id


class TestParseId:
    """Tests for parse_id."""

    @pytest.mark.parametrize("raw,expected", [("1", 1), ("42", 42), ("007", 7)])
    def test_plain_digits(self, raw, expected):
        assert parse_id(raw, "course") == expected

    @pytest.mark.parametrize("raw", ["", "abc", "1_0", " 7 ", "7 ", "+3", "-1", "1.0", "٣", "１"])
    def test_rejects_non_plain_integers(self, raw):
        with pytest.raises(HTTPException) as exc_info:
            parse_id(raw, "semester")
        assert exc_info.value.status_code == 400
        assert exc_info.value.detail == "Invalid semester ID"


class TestIdsOverHttp:
    """Loose integer spellings are rejected by the routes."""

    @pytest.mark.parametrize("raw", ["1_0", "+1", "%201%20", "%D9%A1"])
    def test_get_semester_rejects(self, client, raw):
        response = client.get(f"/api/semesters/{raw}")
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid semester ID"

    def test_underscore_id_does_not_delete(self, client):
        for _ in range(10):
            client.post("/api/courses", json={"name": "C", "creditHours": 3, "gradeValue": 3.0})
        response = client.delete("/api/courses/1_0")
        assert response.status_code == 400
        assert client.get("/api/courses/10").status_code == 200
