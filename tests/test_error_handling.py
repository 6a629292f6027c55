"""Test error handling functionality.

Verifies that custom exceptions carry the expected attributes and that the
error response body has a consistent shape.
"""
import json
from core.exceptions import (
    AppException,
    CatalogLoadError,
    DatabaseError,
    InsufficientDataError,
    ProfileValidationError,
    ValidationError,
)
from core.error_handlers import create_error_response


def test_exception_classes_have_proper_attributes():
    exc = ValidationError("Invalid input", field="age")
    assert exc.status_code == 400
    assert exc.message == "Invalid input"
    assert exc.details == {"field": "age"}

    exc = InsufficientDataError("No foods available")
    assert exc.status_code == 400
    assert exc.details == {}

    exc = DatabaseError("boom", operation="health_check")
    assert exc.status_code == 500
    assert exc.details == {"operation": "health_check"}


def test_profile_validation_error_lists_fields():
    exc = ProfileValidationError({"age": "Age is required"})
    assert isinstance(exc, ValidationError)
    assert isinstance(exc, AppException)
    assert exc.status_code == 400
    assert exc.details == {"fields": {"age": "Age is required"}}


def test_catalog_load_error_mentions_path():
    exc = CatalogLoadError("/tmp/foods.csv", "No such file")
    assert "/tmp/foods.csv" in exc.message
    assert exc.details == {"path": "/tmp/foods.csv"}


def test_error_response_shape():
    res = create_error_response("Validation error", 422, {"validation_errors": []})
    assert res.status_code == 422
    body = json.loads(res.body)
    assert body["error"]["message"] == "Validation error"
    assert body["error"]["details"] == {"validation_errors": []}


def test_error_response_omits_empty_details():
    body = json.loads(create_error_response("Not here", 404).body)
    assert body == {"error": {"message": "Not here", "status_code": 404}}
