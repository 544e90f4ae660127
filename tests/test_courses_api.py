import pytest
from fastapi.testclient import TestClient

from plato.core.config import Settings
from plato.main import create_app
from plato.services.course_store import CourseStore
from tests.golden_sets.prompt_samples import CATALOGUE_LISTING

CALCULUS = {
    "name": "Calculus I",
    "course_code": "MAT265",
    "instructor": "Dr. James Wilson",
    "term": "Spring 2025",
    "department": "Mathematics",
    "credits": 4,
    "start_date": "2025-01-13",
    "end_date": "2025-05-02",
}


def make_client(**settings_overrides):
    values = {"seed_sample_courses": False, "debug": True}
    values.update(settings_overrides)
    settings = Settings(_env_file=None, **values)
    return TestClient(create_app(settings=settings, store=None))


@pytest.fixture
def client():
    return make_client()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "courses": 0}


def test_generate_and_fetch(client):
    response = client.post("/api/courses/generate", json=CALCULUS)
    assert response.status_code == 201
    payload = response.json()
    assert payload["success"] is True
    course = payload["course"]
    assert course["id"] == 1
    assert course["total_points"] == 1580
    assert len(course["modules"]) == 8

    fetched = client.get("/api/courses/1")
    assert fetched.status_code == 200
    assert fetched.json() == course
    assert len(client.get("/api/courses/").json()) == 1


def test_generate_with_budget_policy(client):
    response = client.post("/api/courses/generate?point_policy=budget", json={**CALCULUS, "total_points": 1000})
    assert response.status_code == 201
    assert response.json()["course"]["total_points"] == 896


def test_generate_rejects_unknown_policy(client):
    response = client.post("/api/courses/generate?point_policy=curve", json=CALCULUS)
    assert response.status_code == 422


def test_generate_requires_dates(client):
    body = {k: v for k, v in CALCULUS.items() if k != "end_date"}
    assert client.post("/api/courses/generate", json=body).status_code == 422


def test_from_prompt(client):
    response = client.post("/api/courses/from-prompt", json={"prompt": CATALOGUE_LISTING})
    assert response.status_code == 201
    course = response.json()["course"]
    assert course["course_code"] == "LDT 593"
    assert course["name"] == "Applied Project"
    assert course["instructor"] == "Courtney Ellsworth, Steven Salik"


def test_from_prompt_rejects_blank(client):
    assert client.post("/api/courses/from-prompt", json={"prompt": "  "}).status_code == 400


def test_get_missing_course(client):
    response = client.get("/api/courses/99")
    assert response.status_code == 404
    assert response.json()["detail"] == "Course not found"


def test_enhance_sample_catalogue():
    client = make_client(seed_sample_courses=True)
    assert len(client.get("/api/courses/").json()) == 5

    response = client.post("/api/courses/enhance", params={"term": "Fall 2025"})
    assert response.status_code == 200
    assert response.json() == {"success": True, "enhanced": 5, "failed": []}

    for course in client.get("/api/courses/").json():
        assert course["term"] == "Fall 2025"
        assert len(course["modules"]) == 8


def test_injected_store_is_used():
    store = CourseStore()
    client = TestClient(create_app(settings=Settings(_env_file=None), store=store))
    client.post("/api/courses/generate", json=CALCULUS)
    assert len(store) == 1


def test_seed_progress(client):
    client.post("/api/courses/generate", json=CALCULUS)
    response = client.post("/api/courses/1/seed-progress", json={"completed_modules": 2, "seed": 3})
    assert response.status_code == 200
    course = response.json()
    assert course["current_grade"] is not None
    assert [m["is_completed"] for m in course["modules"]][:3] == [True, True, False]
    assert client.get("/api/courses/1").json() == course

    assert client.post("/api/courses/1/seed-progress", json={"completed_modules": -1}).status_code == 422
    assert client.post("/api/courses/9/seed-progress", json={}).status_code == 404


def test_syllabus(client):
    client.post("/api/courses/generate", json=CALCULUS)
    response = client.get("/api/courses/1/syllabus")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text.startswith("# MAT265: Calculus I")
    assert client.get("/api/courses/2/syllabus").status_code == 404


def test_delete(client):
    client.post("/api/courses/generate", json=CALCULUS)
    assert client.delete("/api/courses/1").status_code == 204
    assert client.delete("/api/courses/1").status_code == 404
    assert client.get("/api/courses/").json() == []


def test_departments(client):
    math = client.get("/api/departments/Mathematics").json()
    assert math["weekly_pattern"]["readings"] == 1
    assert "Problem Set" in math["assignment_types"]

    fallback = client.get("/api/departments/Underwater Basketry").json()
    assert fallback == client.get("/api/departments/Computer Science").json()
    assert "Music" in client.get("/api/departments/").json()["departments"]


def test_debug_logs_record_steps(client):
    client.delete("/api/debug/logs")
    client.post("/api/courses/generate", json=CALCULUS)
    messages = [entry["message"] for entry in client.get("/api/debug/logs").json()]
    assert "Generated MAT265 with 8 modules" in messages


def test_debug_routes_hidden_without_debug():
    client = make_client(debug=False)
    assert client.get("/api/debug/logs").status_code == 404


def test_from_prompt_with_impossible_date_range(client):
    response = client.post("/api/courses/from-prompt", json={"prompt": "Name: X\nDates: 12/1/2024 - 2/29"})
    assert response.status_code == 201
    assert response.json()["course"]["start_date"] == "2025-05-30"


def test_enhance_uses_configured_module_band():
    client = make_client(seed_sample_courses=True, max_modules=5)
    assert client.post("/api/courses/enhance").json()["enhanced"] == 5
    for course in client.get("/api/courses/").json():
        assert len(course["modules"]) == 5
