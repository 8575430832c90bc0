# /tests/test_api.py

"""
End-to-end checks of the HTTP surface. The DatabaseService dependency is
overridden with a JSON-file store in a temporary directory.
"""

import pytest
from fastapi.testclient import TestClient

from gradebook.main import app
from gradebook.services.database_service import get_db_service

YEAR = "2568"


@pytest.fixture
def client(db_service):
    app.dependency_overrides[get_db_service] = lambda: db_service
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health_check(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.headers["X-Request-ID"]


def test_report_card_flow(client):
    response = client.post(f"/api/classes/p1/1/grades?academic_year={YEAR}", json={"1001": {"ท11101": 4, "ว11101": "2"}})
    assert response.status_code == 200
    assert response.json()["1001"] == {"ท11101": "4", "ว11101": "2"}

    report = client.get(f"/api/reports/1001?academic_year={YEAR}").json()
    assert report["gradeLevel"] == "p1"
    assert report["body"]["kind"] == "primary"
    assert report["body"]["gpa"] == "3.43"


def test_report_errors(client):
    assert client.get("/api/reports/12").status_code == 400
    assert client.get("/api/reports/9999").status_code == 404


def test_invalid_grade_token_is_rejected(client):
    response = client.post("/api/classes/p1/1/grades", json={"1001": {"ท11101": "A"}})
    assert response.status_code == 422


def test_grade_sheet(client):
    response = client.get(f"/api/classes/m1/1?semester=semester1&academic_year={YEAR}")
    assert response.status_code == 200
    body = response.json()
    assert body["semester"] == "semester1"
    assert "แนะแนว-1" in [s["code"] for s in body["subjects"]]

    assert client.get("/api/classes/m1/1").status_code == 400
    assert client.get("/api/classes/k1/1").status_code == 404


def test_add_and_remove_student(client):
    payload = {"id": "3001", "name": "เด็กชายภูมิ ใจงาม", "number": 3}

    response = client.post("/api/classes/p2/1/students", json=payload)
    assert response.status_code == 201
    assert response.json()["retained"] is False

    assert client.post("/api/classes/p2/1/students", json=payload).status_code == 409
    assert client.post("/api/classes/p2/1/students", json={**payload, "id": "30"}).status_code == 422

    assert client.delete("/api/classes/p2/1/students/3001").status_code == 204
    assert client.delete("/api/classes/p2/1/students/3001").status_code == 404


def test_student_flags(client):
    response = client.patch("/api/students/1011/retention", json={"retained": True})
    assert response.status_code == 200
    assert response.json()["retained"] is True

    response = client.patch("/api/students/1012/transfer", json={"transferringOut": True})
    assert response.json()["transferringOut"] is True

    assert client.patch("/api/students/9999/retention", json={"retained": True}).status_code == 404


def test_year_end_promotion(client):
    client.patch("/api/students/1011/retention", json={"retained": True})
    client.patch("/api/students/1012/transfer", json={"transferringOut": True})

    summary = client.post("/api/admin/promotion").json()

    assert summary["retained"] == 1
    assert summary["transferredOut"] == 1
    assert summary["graduated"] == 2
    assert summary["studentsAfter"] == 15
    # Retained 1011 keeps #1 in p6/1, where 1009 arrives from p5/1 as #1.
    assert sorted(summary["numberConflicts"][0]["studentIds"]) == ["1009", "1011"]


def test_export_csv(client):
    response = client.get("/api/classes/p1/1/export")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert "1001" in response.text

    assert client.get("/api/classes/p1/7/export").status_code == 404


def test_curriculum_admin(client):
    assert len(client.get("/api/curriculum").json()) == 9

    response = client.post(
        "/api/curriculum/m1/subjects?semester=semester1",
        json={"category": "additionalSubjects", "subject": {"code": "ง21201", "name": "งานช่าง", "hours": "1.0 (40)"}},
    )
    assert response.status_code == 201
    added = response.json()["semesters"]["semester1"]["additionalSubjects"][-1]
    assert added["code"] == "ง21201"

    response = client.post(
        "/api/curriculum/m1/subjects",
        json={"category": "additionalSubjects", "subject": {"name": "งานช่าง", "hours": "1.0 (40)"}},
    )
    assert response.status_code == 400

    assert client.delete("/api/curriculum/p1/subjects/coreSubjects/50").status_code == 404
    assert client.get("/api/curriculum/k1").status_code == 404


def test_academic_years(client):
    body = client.get("/api/admin/academic-years").json()
    assert len(body["options"]) == 5
    assert body["options"][0] == body["current"]
