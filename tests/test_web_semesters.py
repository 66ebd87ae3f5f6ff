"""Tests for semester endpoints."""


def _create_semester(client, name="Fall 2024"):
    return client.post("/api/semesters", json={"name": name}).json()


def _create_course(client, semester_id=None, name="Course"):
    body = {"name": name, "creditHours": 3, "gradeValue": 3.0}
    if semester_id is not None:
        body["semesterId"] = semester_id
    return client.post("/api/courses", json=body).json()


class TestListSemesters:
    """Tests for GET /api/semesters."""

    def test_default_semester_only(self, client):
        response = client.get("/api/semesters")
        assert response.status_code == 200
        assert response.json() == [{"id": 1, "name": "Unsorted", "userId": 1}]

    def test_list_after_create(self, client):
        _create_semester(client, "Fall")
        names = [s["name"] for s in client.get("/api/semesters").json()]
        assert names == ["Unsorted", "Fall"]


class TestCreateSemester:
    """Tests for POST /api/semesters."""

    def test_create(self, client):
        response = client.post("/api/semesters", json={"name": "Spring 2025"})
        assert response.status_code == 201
        assert response.json() == {"id": 2, "name": "Spring 2025", "userId": 1}

    def test_create_empty_name(self, client):
        response = client.post("/api/semesters", json={"name": ""})
        assert response.status_code == 400
        assert "message" in response.json()

    def test_create_missing_name(self, client):
        response = client.post("/api/semesters", json={})
        assert response.status_code == 400


class TestGetSemester:
    """Tests for GET /api/semesters/{id}."""

    def test_get_default(self, client):
        response = client.get("/api/semesters/1")
        assert response.status_code == 200
        assert response.json()["name"] == "Unsorted"

    def test_get_not_found(self, client):
        response = client.get("/api/semesters/99")
        assert response.status_code == 404
        assert response.json()["message"] == "Semester not found"

    def test_get_invalid_id(self, client):
        response = client.get("/api/semesters/fall")
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid semester ID"


class TestRenameSemester:
    """Tests for PATCH /api/semesters/{id}."""

    def test_rename(self, client):
        semester = _create_semester(client, "Fall")
        response = client.patch(f"/api/semesters/{semester['id']}", json={"name": "Autumn"})
        assert response.status_code == 200
        assert response.json()["name"] == "Autumn"
        assert client.get(f"/api/semesters/{semester['id']}").json()["name"] == "Autumn"

    def test_rename_not_found(self, client):
        response = client.patch("/api/semesters/99", json={"name": "X"})
        assert response.status_code == 404

    def test_rename_blank(self, client):
        response = client.patch("/api/semesters/1", json={"name": " "})
        assert response.status_code == 400


class TestDeleteSemester:
    """Tests for DELETE /api/semesters/{id}."""

    def test_delete_moves_courses_to_default(self, client):
        """Courses of the deleted semester end up in Unsorted."""
        semester = _create_semester(client)
        c1 = _create_course(client, semester["id"], "Physics")
        c2 = _create_course(client, semester["id"], "Chemistry")

        response = client.delete(f"/api/semesters/{semester['id']}")
        assert response.status_code == 200
        assert response.json()["message"] == "Semester deleted successfully"

        assert client.get(f"/api/semesters/{semester['id']}/courses").json() == []
        moved = client.get("/api/semesters/1/courses").json()
        assert {c["id"] for c in moved} == {c1["id"], c2["id"]}
        assert len(client.get("/api/courses").json()) == 2

    def test_delete_default_rejected(self, client):
        response = client.delete("/api/semesters/1")
        assert response.status_code == 400
        assert response.json()["message"] == "Cannot delete the default semester"
        assert client.get("/api/semesters/1").status_code == 200

    def test_delete_not_found(self, client):
        response = client.delete("/api/semesters/99")
        assert response.status_code == 404

    def test_delete_invalid_id(self, client):
        response = client.delete("/api/semesters/abc")
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid semester ID"


class TestSemesterCourses:
    """Tests for GET /api/semesters/{id}/courses."""

    def test_filters_by_semester(self, client):
        semester = _create_semester(client)
        _create_course(client, semester["id"], "In")
        _create_course(client, None, "Out")

        response = client.get(f"/api/semesters/{semester['id']}/courses")
        assert response.status_code == 200
        assert [c["name"] for c in response.json()] == ["In"]

    def test_unknown_semester_is_empty(self, client):
        response = client.get("/api/semesters/99/courses")
        assert response.status_code == 200
        assert response.json() == []

    def test_invalid_id(self, client):
        response = client.get("/api/semesters/x/courses")
        assert response.status_code == 400
