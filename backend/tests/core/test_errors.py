from task_manager.core.errors import (
    AccessDeniedError, DatabaseError, ErrorCategory, TaskNotFoundError,
)


def test_access_denied_has_fixed_message_and_403():
    err = AccessDeniedError("token expired")
    assert err.http_status == 403
    assert err.to_response() == {"message": "Access Denied!"}
    assert err.reason == "token expired"


def test_task_not_found_hides_reason():
    err = TaskNotFoundError("abc")
    assert err.http_status == 404
    assert err.to_response() == {"message": "Task not found or user unauthorized"}
    assert err.context.document_id == "abc"
    assert err.category == ErrorCategory.RESOURCE_NOT_FOUND


def test_database_error_is_503():
    err = DatabaseError("Connection or operational error", "execute")
    assert err.http_status == 503
    assert err.message.startswith("Database execute failed")


def test_log_extra_carries_code():
    extra = TaskNotFoundError("abc").log_extra()
    assert extra["error_code"] == "TASK_NOT_FOUND"
    assert extra["document_id"] == "abc"
