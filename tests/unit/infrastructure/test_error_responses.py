"""Tests for domain error → HTTP response mapping."""

import json

import pytest

from store_locator.domain.errors import (
    DataAccessError,
    GeospatialError,
    ResourceNotFound,
    UnexpectedError,
    ValidationError,
)
from store_locator.infrastructure.api.errors import (
    GENERIC_DATA_ACCESS_MESSAGE,
    GENERIC_UNEXPECTED_MESSAGE,
    error_response,
)


def _body(response) -> dict:
    return json.loads(response.body)


@pytest.mark.parametrize(
    "error, status, label",
    [
        (ResourceNotFound(message="Store with ID 7 not found", resource_type="Store", identifier="7"), 404, "Not Found"),
        (ValidationError(message="Store ID must be positive", field="storeId", invalid_value=0), 400, "Validation Error"),
        (GeospatialError(message="Point outside service area", latitude=10.0, longitude=10.0), 400, "Geospatial Error"),
        (DataAccessError(message="Failed to count stores in database"), 500, "Data Access Error"),
        (UnexpectedError(), 500, "Internal Server Error"),
    ],
)
def test_status_and_label(error, status, label):
    response = error_response(error, "/api/v1/stores/7")
    body = _body(response)

    assert response.status_code == status
    assert body["status"] == status
    assert body["error"] == label
    assert body["path"] == "/api/v1/stores/7"
    assert body["timestamp"]


def test_validation_message_names_field():
    error = ValidationError(message="Limit must be between 1 and 20", field="limit", invalid_value=0)
    assert _body(error_response(error, "/"))["message"] == "Limit must be between 1 and 20 (field: limit)"


def test_validation_message_without_field():
    error = ValidationError(message="Bad request")
    assert _body(error_response(error, "/"))["message"] == "Bad request"


def test_data_access_cause_is_not_leaked():
    error = DataAccessError(message="password authentication failed", cause=RuntimeError("secret"))
    assert _body(error_response(error, "/"))["message"] == GENERIC_DATA_ACCESS_MESSAGE


def test_unexpected_message_is_generic():
    error = UnexpectedError(message="Failed to load stores from JSON: boom")
    assert _body(error_response(error, "/"))["message"] == GENERIC_UNEXPECTED_MESSAGE


def test_unexpected_error_default_message():
    assert UnexpectedError().message == "An unexpected error occurred"


def test_error_equality_ignores_cause():
    assert DataAccessError(message="x", cause=RuntimeError("a")) == DataAccessError(message="x")
