"""
Tests for the assessments HTTP API.
"""

import asyncio
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from lms_backend.config import Settings
from lms_backend.domain.assessments.model import Assessment
from lms_backend.domain.catalog.model import Exercise
from lms_backend.main import build_assessment_service, create_app
from lms_backend.common.exceptions import ConfigurationError


ALERT = "X-lmsApp-alert"
PARAMS = "X-lmsApp-params"


@pytest.fixture
def settings():
    return Settings(
        STORAGE_BACKEND="memory",
        API_PREFIX="/api",
        DEFAULT_QUESTION_COUNT=2,
        MAX_QUESTION_COUNT=20,
        SAMPLER_SEED=11,
    )


@pytest.fixture
def client(settings, service):
    app = create_app(settings)
    app.state.assessment_service = service
    with TestClient(app) as test_client:
        yield test_client


class TestAssessmentCrud:

    def test_create(self, client):
        response = client.post("/api/assessments", json={"course_id": 4})

        assert response.status_code == 201
        assert response.json() == {"id": 4, "course_id": 4}
        assert response.headers["Location"] == "/api/assessments/4"
        assert response.headers[ALERT] == "lmsApp.assessment.created"
        assert response.headers[PARAMS] == "4"

    def test_create_for_missing_course(self, client):
        response = client.post("/api/assessments", json={"course_id": 99})

        assert response.status_code == 404
        assert response.json()["details"] == {"resource_type": "Course", "resource_id": 99}
        assert ALERT not in response.headers
        assert client.get("/api/assessments").status_code == 200

    def test_update_to_missing_course(self, client):
        response = client.put("/api/assessments", json={"id": 1, "course_id": 99})

        assert response.status_code == 404
        assert client.get("/api/assessments/1").json() == {"id": 1, "course_id": 1}

    def test_create_with_id_rejected(self, client):
        response = client.post("/api/assessments", json={"id": 5, "course_id": 4})

        assert response.status_code == 400
        assert response.json()["details"] == {"id": "idexists"}

    def test_create_for_course_with_assessment_rejected(self, client):
        response = client.post("/api/assessments", json={"course_id": 1})
        assert response.status_code == 400

    def test_create_without_course_is_validation_error(self, client):
        response = client.post("/api/assessments", json={})

        assert response.status_code == 422
        body = response.json()
        assert body["message"] == "Validation error"
        assert body["details"][0]["location"] == ["body", "course_id"]

    def test_update(self, client):
        response = client.put("/api/assessments", json={"id": 1, "course_id": 1})

        assert response.status_code == 200
        assert response.json() == {"id": 1, "course_id": 1}
        assert response.headers[ALERT] == "lmsApp.assessment.updated"
        assert response.headers[PARAMS] == "1"

    def test_update_without_id_creates(self, client):
        response = client.put("/api/assessments", json={"course_id": 4})

        assert response.status_code == 201
        assert response.json()["id"] == 4
        assert response.headers[ALERT] == "lmsApp.assessment.created"

    def test_list_returns_details(self, client):
        response = client.get("/api/assessments")

        assert response.status_code == 200
        assert response.json() == [
            {"id": 1, "course_id": 1, "complete": True},
            {"id": 2, "course_id": 2, "complete": False},
            {"id": 3, "course_id": 3, "complete": False},
        ]

    def test_get(self, client):
        response = client.get("/api/assessments/2")

        assert response.status_code == 200
        assert response.json() == {"id": 2, "course_id": 2}

    def test_get_missing(self, client):
        response = client.get("/api/assessments/42")

        assert response.status_code == 404
        assert response.json()["code"] == "not_found"

    def test_delete(self, client):
        response = client.delete("/api/assessments/3")

        assert response.status_code == 200
        assert response.headers[ALERT] == "lmsApp.assessment.deleted"
        assert response.headers[PARAMS] == "3"
        assert client.get("/api/assessments/3").status_code == 404

    def test_delete_missing(self, client):
        assert client.delete("/api/assessments/42").status_code == 404


class TestExercisesEndpoint:

    def test_draws_requested_number(self, client):
        response = client.post(
            "/api/assessments/exercises", json={"course_id": 1, "number_of_questions": 2}
        )

        assert response.status_code == 200
        ids = [item["exercise_id"] for item in response.json()]
        assert len(ids) == 2
        assert len(set(ids)) == 2
        assert set(ids) <= {100, 101, 102}

    def test_returns_all_when_fewer_available(self, client):
        response = client.post(
            "/api/assessments/exercises", json={"course_id": 1, "number_of_questions": 10}
        )

        body = response.json()
        assert [item["exercise_id"] for item in body] == [100, 101, 102]
        assert body[0]["template_name"] == "short-answer"
        assert body[0]["assessment_id"] == 1
        assert body[0]["user_answer"] is None

    def test_default_count(self, client):
        response = client.post("/api/assessments/exercises", json={"course_id": 1})

        assert response.status_code == 200
        assert len(response.json()) == 2

    def test_course_without_topics(self, client):
        response = client.post(
            "/api/assessments/exercises", json={"course_id": 2, "number_of_questions": 5}
        )

        assert response.status_code == 200
        assert response.json() == []

    def test_unknown_course(self, client):
        response = client.post(
            "/api/assessments/exercises", json={"course_id": 99, "number_of_questions": 5}
        )
        assert response.status_code == 404

    def test_stored_record_for_missing_course(self, client, assessments):
        asyncio.run(assessments.save(Assessment(course_id=99)))

        response = client.post(
            "/api/assessments/exercises", json={"course_id": 99, "number_of_questions": 3}
        )

        assert response.status_code == 404
        assert response.json()["details"]["resource_type"] == "Course"

    def test_negative_count(self, client):
        response = client.post(
            "/api/assessments/exercises", json={"course_id": 1, "number_of_questions": -1}
        )
        assert response.status_code == 400

    def test_count_above_maximum(self, client):
        response = client.post(
            "/api/assessments/exercises", json={"course_id": 1, "number_of_questions": 21}
        )
        assert response.status_code == 400

    def test_missing_course_id(self, client):
        response = client.post("/api/assessments/exercises", json={"number_of_questions": 2})
        assert response.status_code == 422

    def test_missing_template(self, client, catalog):
        catalog.add_exercise(Exercise(id=103, topic_id=11, template_id=77, question="q", answer="a"))

        response = client.post(
            "/api/assessments/exercises", json={"course_id": 1, "number_of_questions": 2}
        )

        assert response.status_code == 503
        body = response.json()
        assert body["message"] == "No assessment content available"
        assert body["code"] == "composition_failed"
        assert body["details"]["course_id"] == 1

    def test_catalog_failure(self, client, catalog):
        catalog.find_topics_by_course = AsyncMock(side_effect=TimeoutError("catalog timed out"))

        response = client.post(
            "/api/assessments/exercises", json={"course_id": 1, "number_of_questions": 2}
        )

        assert response.status_code == 503


class TestSubmitEndpoint:

    def test_scores_submission(self, client):
        exercises = client.post(
            "/api/assessments/exercises", json={"course_id": 1, "number_of_questions": 10}
        ).json()
        exercises[0]["user_answer"] = "3"
        exercises[1]["user_answer"] = "true"
        exercises[2]["user_answer"] = " 2, -2 "

        response = client.post("/api/assessments/submit", json=exercises)

        assert response.status_code == 200
        assert response.json() == {"total": 3, "correct": 2}

    def test_empty_submission(self, client):
        response = client.post("/api/assessments/submit", json=[])

        assert response.status_code == 200
        assert response.json() == {"total": 0, "correct": 0}

    def test_malformed_submission(self, client):
        response = client.post("/api/assessments/submit", json=[{"answer": "3"}])
        assert response.status_code == 422

    def test_payload_must_be_a_list(self, client):
        response = client.post("/api/assessments/submit", json={"exercise_id": 1})
        assert response.status_code == 422


class TestApplication:

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_memory_backend_starts_empty(self):
        app = create_app(Settings(STORAGE_BACKEND="memory"))

        with TestClient(app) as test_client:
            response = test_client.get("/api/assessments")

        assert response.status_code == 200
        assert response.json() == []

    def test_memory_backend_rejects_courses_outside_catalog(self):
        app = create_app(Settings(STORAGE_BACKEND="memory"))

        with TestClient(app) as test_client:
            created = test_client.post("/api/assessments", json={"course_id": 1})
            listed = test_client.get("/api/assessments")
            composed = test_client.post(
                "/api/assessments/exercises", json={"course_id": 1, "number_of_questions": 3}
            )

        assert created.status_code == 404
        assert listed.status_code == 200
        assert listed.json() == []
        assert composed.status_code == 404

    @pytest.mark.asyncio
    async def test_unknown_backend(self):
        with pytest.raises(ConfigurationError) as exc_info:
            await build_assessment_service(Settings(STORAGE_BACKEND="mongo"))
        assert exc_info.value.config_key == "STORAGE_BACKEND"
