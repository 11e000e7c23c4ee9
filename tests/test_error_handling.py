"""Test error handling functionality.

Verifies that custom exceptions carry the expected status codes and that
the registered handlers turn them into the JSON error envelope.
"""
import pytest
from fastapi.testclient import TestClient

from core.exceptions import (
    AIServiceError,
    ConfigurationError,
    IncompleteProfileError,
    NotFoundError,
)
from main import app


@pytest.fixture(scope="module")
def client():
    with TestClient(app) as c:
        yield c


def test_exception_classes_have_proper_attributes():
    exc = NotFoundError("User", 123)
    assert exc.status_code == 404
    assert "User" in exc.message
    assert "123" in exc.message
    assert exc.details == {"resource": "User", "id": 123}

    exc = IncompleteProfileError(["weight", "height", "age"])
    assert exc.status_code == 400
    assert exc.message == "Missing required data for body metrics calculation"

    assert ConfigurationError("no key").status_code == 503
    assert AIServiceError("down", operation="workout_plan").details == {"operation": "workout_plan"}


def test_missing_user_returns_404_envelope(client):
    res = client.get("/api/users/999999")
    assert res.status_code == 404
    error = res.json()["error"]
    assert error["status_code"] == 404
    assert "User" in error["message"]


def test_invalid_request_body_returns_422(client):
    res = client.post("/api/body-metrics/calculate", json={"weight": 0, "height": 175, "age": 30})
    assert res.status_code == 422
    errors = res.json()["error"]["details"]["validation_errors"]
    assert any(e["field"].endswith("weight") for e in errors)


def test_calculate_over_http(client):
    res = client.post("/api/body-metrics/calculate", json={"weight": 70, "height": 175, "age": 30})
    assert res.status_code == 200
    assert res.json()["calorie_target"] == 2428


def test_unconfigured_ai_returns_503(client):
    user = client.post("/api/auth/register", json={
        "username": "no-ai-user", "password": "pw", "age": 30, "weight": 70, "height": 175,
    })
    assert user.status_code == 201
    res = client.post("/api/progress/analyze", json={"user_id": user.json()["user"]["id"]})
    assert res.status_code == 503
    assert res.json()["error"]["details"] == {"config_key": "OPENAI_API_KEY"}


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"
