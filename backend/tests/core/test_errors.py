"""Error Hierarchy - verifies codes, statuses and response envelopes."""

from signup.core.errors import (
    DatabaseError, ErrorCategory, ErrorSeverity, InvalidStateError,
    SignupError, StepContractError, UnhandledOutcomeError, UnprocessableEntityError,
)


def test_all_errors_share_the_base_class():
    for error in (
        UnprocessableEntityError({}),
        InvalidStateError("x"),
        UnhandledOutcomeError("invalid"),
        StepContractError("validate", None),
        DatabaseError("boom", "commit"),
    ):
        assert isinstance(error, SignupError)


def test_unprocessable_entity_response_carries_field_details():
    error = UnprocessableEntityError({"email": ["is missing"]})
    body = error.to_response()["error"]

    assert error.http_status == 422
    assert body["code"] == "UNPROCESSABLE_ENTITY"
    assert body["category"] == ErrorCategory.VALIDATION.value
    assert body["severity"] == ErrorSeverity.ERROR.value
    assert body["details"] == {"email": ["is missing"]}
    assert "timestamp" in body


def test_programmer_errors_are_critical_500s():
    for error in (InvalidStateError("x"), UnhandledOutcomeError("t"), StepContractError("s", 1)):
        assert error.http_status == 500
        assert error.severity == ErrorSeverity.CRITICAL
        assert error.category == ErrorCategory.INTERNAL


def test_step_contract_error_names_step_and_type():
    error = StepContractError("persist", 42)
    assert "persist" in error.message
    assert "int" in error.message
    assert error.context.step_name == "persist"


def test_database_error_is_service_unavailable():
    error = DatabaseError("Integrity constraint violated", "commit")
    assert error.http_status == 503
    assert error.operation == "commit"
    assert error.to_response()["error"]["code"] == "DATABASE_ERROR"
