"""Tests for the error hierarchy - codes, statuses and REST envelope."""

from car_api.core.errors import (
    CarApiError, DatabaseError, ErrorCategory, ErrorContext, ErrorSeverity,
)


def test_database_error_is_503_critical():
    err = DatabaseError("Connection or operational error", "execute")
    assert isinstance(err, CarApiError)
    assert err.http_status == 503
    assert err.code == "DATABASE_ERROR"
    assert err.category is ErrorCategory.DATABASE
    assert err.severity is ErrorSeverity.CRITICAL
    assert err.message == "Database execute failed: Connection or operational error"


def test_database_error_records_operation_in_context():
    err = DatabaseError("boom", "commit", ErrorContext(car_id="abc"))
    assert err.context.operation == "commit"
    assert err.context.car_id == "abc"


def test_to_response_envelope():
    err = CarApiError(
        "Something broke", "INTERNAL_ERROR", ErrorCategory.INTERNAL,
        context=ErrorContext(car_id="abc"),
    )
    body = err.to_response()["error"]
    assert body["code"] == "INTERNAL_ERROR"
    assert body["message"] == "Something broke"
    assert body["category"] == "internal"
    assert body["severity"] == "error"
    assert body["context"] == {"car_id": "abc", "operation": None}
    assert "T" in body["timestamp"]


def test_default_http_status_is_500():
    err = CarApiError("x", "X", ErrorCategory.INTERNAL)
    assert err.http_status == 500
    assert str(err) == "x"
