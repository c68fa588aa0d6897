"""Error Hierarchy — status codes, codes and the REST envelope.

Invariants:
    - UserNotFoundError is a ResourceNotFoundError → 404 RESOURCE_NOT_FOUND
    - StoreUnavailableError → 503 STORE_UNAVAILABLE, severity critical
    - to_response() always carries code, message, category, severity, timestamp, context
"""

from app.core.errors import (
    ErrorCategory, ErrorSeverity, ResourceNotFoundError,
    StoreUnavailableError, UserNotFoundError, UsersApiError,
)


def test_user_not_found_is_404():
    err = UserNotFoundError("abc", operation="update")

    assert isinstance(err, ResourceNotFoundError)
    assert isinstance(err, UsersApiError)
    assert err.http_status == 404
    assert err.code == "RESOURCE_NOT_FOUND"
    assert err.category is ErrorCategory.RESOURCE_NOT_FOUND
    assert err.message == "User 'abc' not found"


def test_store_unavailable_is_503_and_critical():
    err = StoreUnavailableError("Endpoint unreachable", "scan")

    assert err.http_status == 503
    assert err.code == "STORE_UNAVAILABLE"
    assert err.severity is ErrorSeverity.CRITICAL
    assert err.message == "Store scan failed: Endpoint unreachable"
    assert err.context.operation == "scan"


def test_store_unavailable_is_not_a_not_found():
    assert not issubclass(StoreUnavailableError, ResourceNotFoundError)


def test_to_response_envelope():
    body = UserNotFoundError("abc", operation="find_by_id").to_response()

    error = body["error"]
    assert set(error) == {
        "code", "message", "category", "severity", "timestamp", "context",
    }
    assert error["severity"] == "error"
    assert error["context"] == {"user_id": "abc", "operation": "find_by_id"}
