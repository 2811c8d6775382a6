"""
Error handling and edge case tests.

- Missing or unresolvable session cookie -> 401 before the handler runs
- Schema violations in bodies and path params -> 422 with details
- Unexpected failures -> 500 with a generic message
- Error payload shape and exception helpers
"""

import logging
import uuid

import pytest
from fastapi.testclient import TestClient

from test_fixtures import register, use_session, meal_payload, user_payload
from services import MealService
from app.exceptions import (
    NotFoundError,
    ServiceValidationError,
    UnauthorizedError,
)


# =============================================================================
# SESSION PRECONDITION
# =============================================================================


@pytest.mark.parametrize(
    "method, path",
    [
        ("get", "/users/meal/"),
        ("post", "/users/meal/"),
        ("get", f"/users/meal/{uuid.uuid4()}"),
        ("patch", f"/users/meal/{uuid.uuid4()}"),
        ("delete", f"/users/meal/{uuid.uuid4()}"),
        ("get", "/users/metrics/"),
    ],
)
def test_routes_require_session_cookie(client, method, path):
    client.cookies.clear()
    kwargs = {"json": meal_payload()} if method in ("post", "patch") else {}

    response = getattr(client, method)(path, **kwargs)

    assert response.status_code == 401
    body = response.json()
    assert body["success"] is False
    assert body["error"]["code"] == "UNAUTHORIZED"
    assert "timestamp" in body


@pytest.mark.parametrize("token", [str(uuid.uuid4()), "not-a-uuid"])
def test_unknown_session_is_rejected(client, token):
    register(client)
    use_session(client, token)

    assert client.get("/users/meal/").status_code == 401


def test_rejected_request_has_no_side_effects(client, monkeypatch):
    calls = []
    monkeypatch.setattr(
        MealService, "create_meal", lambda *args, **kwargs: calls.append(args)
    )
    client.cookies.clear()

    client.post("/users/meal/", json=meal_payload())

    assert calls == []


# =============================================================================
# VALIDATION
# =============================================================================


@pytest.mark.parametrize("missing", ["name", "email", "birthDate"])
def test_register_requires_all_fields(client, missing):
    payload = user_payload()
    payload.pop(missing)

    response = client.post("/users/", json=payload)

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"
    assert "set-cookie" not in response.headers


def test_register_rejects_bad_email(client):
    payload = user_payload()
    payload["email"] = "not-an-email"

    assert client.post("/users/", json=payload).status_code == 422


@pytest.mark.parametrize("missing", ["name", "description", "ate_at", "is_diet"])
def test_create_meal_requires_all_fields(client, missing):
    register(client)
    payload = meal_payload()
    payload.pop(missing)

    response = client.post("/users/meal/", json=payload)

    assert response.status_code == 422
    details = response.json()["error"]["details"]
    assert any(missing in detail["loc"] for detail in details)


def test_create_meal_rejects_bad_timestamp(client):
    register(client)
    payload = meal_payload()
    payload["ate_at"] = "yesterday-ish"

    assert client.post("/users/meal/", json=payload).status_code == 422


@pytest.mark.parametrize("method", ["get", "patch", "delete"])
def test_meal_id_must_be_uuid(client, method):
    register(client)
    kwargs = {"json": {"name": "x"}} if method == "patch" else {}

    response = getattr(client, method)("/users/meal/123", **kwargs)

    assert response.status_code == 422


def test_patch_with_empty_body_changes_nothing(client):
    register(client)
    client.post("/users/meal/", json=meal_payload(name="Fruit bowl"))
    meal = client.get("/users/meal/").json()["meals"][0]

    response = client.patch(f"/users/meal/{meal['id']}", json={})

    assert response.status_code == 200
    assert response.json()["meal"] == meal


# =============================================================================
# UNEXPECTED ERRORS
# =============================================================================


def test_unexpected_error_is_500(app, monkeypatch):
    client = TestClient(app, raise_server_exceptions=False)
    register(client)

    def boom(*args, **kwargs):
        raise RuntimeError("database went away")

    monkeypatch.setattr(MealService, "list_meals", boom)
    response = client.get("/users/meal/")

    assert response.status_code == 500
    body = response.json()
    assert body["error"]["code"] == "INTERNAL_SERVER_ERROR"
    assert "database went away" not in body["error"]["message"]


def test_responses_carry_request_id(client):
    response = client.get("/health-check")

    assert response.headers.get("X-Request-ID")
    assert response.headers.get("X-Process-Time")


def test_completed_request_is_logged_with_its_id(client, caplog):
    with caplog.at_level(logging.INFO, logger="dailydiet.middleware"):
        response = client.get("/health-check")

    request_id = response.headers["X-Request-ID"]
    messages = [record.getMessage() for record in caplog.records]
    assert any(
        f"request_completed request_id={request_id}" in message
        and "path=/health-check" in message
        and "status=200" in message
        for message in messages
    )


# =============================================================================
# EXCEPTION HELPERS
# =============================================================================


@pytest.mark.parametrize(
    "exc_class, status, code",
    [
        (ServiceValidationError, 400, "SERVICE_VALIDATION_ERROR"),
        (UnauthorizedError, 401, "UNAUTHORIZED"),
        (NotFoundError, 404, "NOT_FOUND"),
    ],
)
def test_exception_payloads(exc_class, status, code):
    exc = exc_class("Something off", details={"field": "name"})

    assert exc.http_status == status
    assert str(exc) == "Something off"
    assert exc.to_dict() == {
        "code": code,
        "message": "Something off",
        "details": {"field": "name"},
    }


def test_exception_default_message_and_custom_code():
    exc = NotFoundError(code="MEAL_NOT_FOUND")

    assert exc.message == "Not found"
    assert exc.to_dict() == {"code": "MEAL_NOT_FOUND", "message": "Not found"}
