"""Error Hierarchy — status codes, envelope shape, and log fields."""

from exercise_tracker.core.errors import (
    DatabaseError,
    ErrorCategory,
    FieldValidationError,
    InternalError,
    UserNotFoundError,
    UsernameConflictError,
)


def test_http_status_per_error_type():
    assert FieldValidationError("bad", "field").http_status == 400
    assert UserNotFoundError("abc").http_status == 404
    assert UsernameConflictError("alice").http_status == 409
    assert InternalError("boom", "op").http_status == 500
    assert DatabaseError("boom", "commit").http_status == 500


def test_response_envelope_is_message_only():
    assert UserNotFoundError("abc").to_response() == {"error": "User not found"}
    assert UsernameConflictError("alice").to_response() == {
        "error": "Username already exists",
    }


def test_internal_error_hides_cause_but_logs_operation():
    err = InternalError("Could not retrieve logs", "fetch_log")
    assert err.to_response() == {"error": "Could not retrieve logs"}
    assert err.log_extra()["operation"] == "fetch_log"
    assert err.category == ErrorCategory.INTERNAL


def test_not_found_records_user_id_in_context():
    err = UserNotFoundError("abc")
    assert err.context.user_id == "abc"
    assert err.log_extra()["user_id"] == "abc"
