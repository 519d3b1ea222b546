"""Tests for domain exceptions (error_code, message, details)."""

from ranked_search.domain.exceptions import (
    InvalidInputException,
    RankedSearchException,
    SqlNotConfiguredException,
    StoreError,
    UnknownEntityKindException,
)


def test_base_exception_default_error_code() -> None:
    """Base RankedSearchException uses class name as error_code when not provided."""
    exc = RankedSearchException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "RankedSearchException"
    assert exc.details == {}


def test_base_exception_to_dict() -> None:
    exc = RankedSearchException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {
        "error": "CUSTOM",
        "message": "Oops",
        "details": {"key": "value"},
    }


def test_invalid_input_exception() -> None:
    exc = InvalidInputException()
    assert exc.error_code == "INVALID_INPUT"
    assert exc.message == "Invalid search input"


def test_unknown_entity_kind_exception() -> None:
    exc = UnknownEntityKindException("widgets")
    assert exc.error_code == "UNKNOWN_ENTITY_KIND"
    assert "widgets" in exc.message
    assert exc.details == {"entity_kind": "widgets"}


def test_store_error_details() -> None:
    exc = StoreError("OperationalError", operation="refetch")
    assert exc.error_code == "STORE_ERROR"
    assert exc.message == "Search store unavailable"
    assert exc.details == {"reason": "OperationalError", "operation": "refetch"}


def test_store_error_without_operation() -> None:
    assert StoreError("TimeoutError").details == {"reason": "TimeoutError"}


def test_sql_not_configured_exception() -> None:
    exc = SqlNotConfiguredException()
    assert exc.error_code == "SERVICE_UNAVAILABLE"
    assert isinstance(exc, RankedSearchException)
