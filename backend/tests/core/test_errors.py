"""Error Hierarchy — every error renders the {"error", "message"} envelope.

Tests:
    - Categories are the literal client-facing strings
    - Status codes: validation 400, not found 404, database 500
"""

from focustools.core.errors import (
    DatabaseError, ErrorCategory, ErrorSeverity, FocusToolsError,
    InputValidationError, TaskNotFoundError,
)


def test_categories_are_client_strings():
    assert ErrorCategory.VALIDATION.value == "Validation error"
    assert ErrorCategory.TASK_NOT_FOUND.value == "Task not found"
    assert ErrorCategory.SERVER.value == "Server error"


def test_input_validation_error_is_400():
    err = InputValidationError("Title is required", "title")

    assert err.http_status == 400
    assert err.field == "title"
    assert err.to_response() == {
        "error": "Validation error", "message": "Title is required",
    }


def test_task_not_found_for_id():
    err = TaskNotFoundError.for_id("abc")

    assert err.http_status == 404
    assert err.task_id == "abc"
    assert err.to_response() == {
        "error": "Task not found", "message": "Task with ID abc not found",
    }


def test_task_not_found_malformed():
    err = TaskNotFoundError.malformed("xyz")
    assert err.to_response()["message"] == "Invalid task ID format"


def test_database_error_is_500_and_critical():
    err = DatabaseError("Connection or operational error", "insert")

    assert err.http_status == 500
    assert err.severity is ErrorSeverity.CRITICAL
    assert err.operation == "insert"
    assert err.to_response() == {
        "error": "Server error",
        "message": "Database insert failed: Connection or operational error",
    }


def test_all_errors_share_base_class():
    for err in (
        InputValidationError("x"),
        TaskNotFoundError.for_id("x"),
        DatabaseError("x", "query"),
    ):
        assert isinstance(err, FocusToolsError)
        assert str(err) == err.message
