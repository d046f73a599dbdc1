"""
Error handling and edge case tests.

This test suite covers error conditions and the shared error envelope:
- Validation errors (out-of-range macros and percentages, wrong types)
- Unknown meal slots and unknown foods
- Service validation errors raised during a request
- Unexpected errors mapped to a generic 500 response
"""

import logging

import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

from api.dependencies import get_catalog, get_planner
from app.config import Settings
from app.exceptions import NotFoundError, ServiceValidationError
from main import app
from test_fixtures import client


def _assert_envelope(body, code):
    assert body["success"] is False
    assert body["error"]["code"] == code
    assert body["error"]["message"]
    assert "timestamp" in body


# =============================================================================
# VALIDATION ERRORS
# =============================================================================


@pytest.mark.parametrize(
    "payload",
    [
        {"carbs": 1001},
        {"protein": -1},
        {"fat": 5000},
        {"carbs": "lots"},
        {"carbs_distribution": {"breakfast": 101, "lunch": 0, "dinner": 0}},
        {"protein_distribution": {"breakfast": 0, "lunch": -5, "dinner": 0}},
        {"carbs_distribution": {"breakfast": 50}},
        {"fat_distribution": {"lunch": 40, "dinner": 60}},
    ],
)
def test_generate_plan_rejects_out_of_range_input(payload):
    """
    Test that request bounds are enforced before planning.

    Verifies:
    - 422 status
    - VALIDATION_ERROR envelope with field details
    """
    r = client.post("/plans", json=payload)

    assert r.status_code == 422
    body = r.json()
    _assert_envelope(body, "VALIDATION_ERROR")
    assert isinstance(body["error"]["details"], list)


def test_boundary_values_are_accepted():
    payload = {
        "carbs": 1000,
        "protein": 0,
        "fat": 1000,
        "carbs_distribution": {"breakfast": 100, "lunch": 0, "dinner": 0},
    }
    r = client.post("/plans", json=payload)

    assert r.status_code == 201
    assert r.json()["plan"]["total_nutrition"]["calories"] == 1000 * 4 + 1000 * 9


def test_unknown_meal_slot():
    r = client.get("/foods/snack")

    assert r.status_code == 422
    _assert_envelope(r.json(), "VALIDATION_ERROR")


def test_unknown_food_returns_not_found():
    r = client.get("/foods/lunch/pizza")

    assert r.status_code == 404
    body = r.json()
    _assert_envelope(body, "NOT_FOUND")
    assert body["error"]["details"] == {"slot": "lunch", "name": "pizza"}


def test_unknown_route_returns_http_envelope():
    r = client.get("/does-not-exist")

    assert r.status_code == 404
    _assert_envelope(r.json(), "HTTP_404")


# =============================================================================
# SERVICE AND UNEXPECTED ERRORS
# =============================================================================


def test_service_validation_error_envelope(override_dependency):
    def _broken_catalog():
        raise ServiceValidationError(
            "Catalog is missing meal slots",
            details={"missing_slots": ["dinner"]},
            code="CATALOG_MISSING_SLOT",
        )

    override_dependency(get_catalog, _broken_catalog)

    r = client.get("/foods")

    assert r.status_code == 400
    body = r.json()
    _assert_envelope(body, "CATALOG_MISSING_SLOT")
    assert body["error"]["details"] == {"missing_slots": ["dinner"]}


def test_unexpected_error_returns_500(override_dependency):
    """
    Test that unexpected exceptions are hidden behind a generic message.

    Verifies:
    - 500 status
    - INTERNAL_SERVER_ERROR code without leaking the exception text
    """

    class ExplodingPlanner:
        def generate_plan(self, *args, **kwargs):
            raise RuntimeError("boom")

    override_dependency(get_planner, lambda: ExplodingPlanner())
    safe_client = TestClient(app, raise_server_exceptions=False)

    r = safe_client.post("/plans", json={"carbs": 10})

    assert r.status_code == 500
    body = r.json()
    _assert_envelope(body, "INTERNAL_SERVER_ERROR")
    assert "boom" not in body["error"]["message"]


def test_unexpected_error_keeps_request_headers(override_dependency):
    """
    Test that a 500 still carries the request tracing headers.

    Verifies:
    - X-Request-ID and X-Process-Time are set on the error response
    """

    class ExplodingPlanner:
        def generate_plan(self, *args, **kwargs):
            raise RuntimeError("boom")

    override_dependency(get_planner, lambda: ExplodingPlanner())
    safe_client = TestClient(app, raise_server_exceptions=False)

    r = safe_client.post("/plans", json={"carbs": 10})

    assert r.status_code == 500
    assert r.headers.get("X-Request-ID")
    assert r.headers.get("X-Process-Time")


def test_partial_distribution_does_not_default_missing_meals():
    """A distribution missing lunch and dinner is rejected, not zero-filled."""
    r = client.post("/plans", json={"carbs": 100, "carbs_distribution": {"breakfast": 50}})

    assert r.status_code == 422
    fields = [err["loc"][-1] for err in r.json()["error"]["details"]]
    assert "lunch" in fields
    assert "dinner" in fields


def test_food_lookup_is_logged(caplog):
    with caplog.at_level(logging.INFO, logger="macromeal.api.foods"):
        r = client.get("/foods/dinner/tofu")

    assert r.status_code == 200
    assert any("Tofu" in rec.getMessage() for rec in caplog.records)


# =============================================================================
# EXCEPTION TYPES AND SETTINGS
# =============================================================================


def test_not_found_error_shares_service_error_payload():
    err = NotFoundError("Food 'pizza' not found", details={"name": "pizza"}, code="NOT_FOUND")

    assert isinstance(err, ServiceValidationError)
    assert err.http_status == 404
    assert str(err) == "Food 'pizza' not found"
    assert err.to_dict() == {
        "message": "Food 'pizza' not found",
        "code": "NOT_FOUND",
        "details": {"name": "pizza"},
    }


def test_not_found_error_default_message():
    assert NotFoundError().message == "Not found"
    assert ServiceValidationError().http_status == 400


def test_settings_read_prefixed_environment(monkeypatch):
    monkeypatch.setenv("MACROMEAL_RANDOM_SEED", "42")
    monkeypatch.setenv("MACROMEAL_ENVIRONMENT", "Production")
    monkeypatch.setenv("MACROMEAL_LOG_LEVEL", "debug")

    s = Settings(_env_file=None)

    assert s.random_seed == 42
    assert s.is_production()
    assert not s.is_development()
    assert s.log_level == "DEBUG"


def test_settings_reject_unknown_log_level(monkeypatch):
    monkeypatch.setenv("MACROMEAL_LOG_LEVEL", "loud")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
