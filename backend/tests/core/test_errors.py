"""Error Hierarchy — verifies codes, categories and HTTP statuses."""

from cruise_response.core.errors import (
    ErrorCategory,
    ErrorSeverity,
    ResourceNotFoundError,
    ResponseCoreError,
    SchemaInferenceError,
    UserRequestError,
)


def test_user_request_error_defaults_to_400():
    err = UserRequestError("Broker id must be an integer.")
    assert isinstance(err, ResponseCoreError)
    assert err.http_status == 400
    assert err.code == "USER_REQUEST_ERROR"
    assert err.category == ErrorCategory.USER_REQUEST
    assert err.error_message() == "Broker id must be an integer."


def test_user_request_error_custom_status():
    assert UserRequestError("Too many requests.", http_status=429).http_status == 429


def test_resource_not_found():
    err = ResourceNotFoundError("User task", "abc-123")
    assert err.http_status == 404
    assert err.message == "User task 'abc-123' not found"
    assert err.resource_id == "abc-123"


def test_schema_inference_error_is_critical_500():
    err = SchemaInferenceError("Expecting value", position=0)
    assert err.http_status == 500
    assert err.severity == ErrorSeverity.CRITICAL
    assert err.category == ErrorCategory.SCHEMA_INFERENCE
    assert err.message == "Cannot infer JSON schema: Expecting value"
    assert err.position == 0
