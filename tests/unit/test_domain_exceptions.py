"""Tests for domain exceptions (error_code, message, details)."""

from goldworks.domain.exceptions import (
    GoldworksException,
    IllegalTransitionException,
    PersistenceFailureException,
    ResourceNotFoundException,
    SchemaNotFoundException,
    SqlNotConfiguredException,
    ValidationException,
)


def test_base_exception_default_error_code() -> None:
    """Base GoldworksException uses class name as error_code when not provided."""
    exc = GoldworksException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "GoldworksException"
    assert exc.details == {}
    assert exc.to_dict() == {
        "error": "GoldworksException",
        "message": "Something failed",
        "details": {},
    }


def test_validation_exception() -> None:
    exc = ValidationException("Invalid category", field="category")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "category"}


def test_validation_exception_without_field() -> None:
    assert ValidationException("Bad").details == {}


def test_resource_not_found_exception() -> None:
    exc = ResourceNotFoundException("order", "o-1")
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert exc.message == "order not found: o-1"
    assert exc.details == {"resource_type": "order", "resource_id": "o-1"}


def test_schema_not_found_exception() -> None:
    exc = SchemaNotFoundException("LASER")
    assert exc.error_code == "SCHEMA_NOT_FOUND"
    assert exc.details == {"department": "LASER"}


def test_illegal_transition_exception_collects_context() -> None:
    exc = IllegalTransitionException(
        "Cannot start", current_status="IN_PROGRESS", attempted="start", department="CAD"
    )
    assert exc.error_code == "ILLEGAL_TRANSITION"
    assert exc.details == {
        "department": "CAD",
        "current_status": "IN_PROGRESS",
        "attempted": "start",
    }


def test_persistence_failure_exception() -> None:
    exc = PersistenceFailureException("save", "o-1", "CASTING", reason="timeout")
    assert exc.error_code == "PERSISTENCE_FAILURE"
    assert "retry" in exc.message
    assert exc.details["reason"] == "timeout"


def test_sql_not_configured_exception() -> None:
    exc = SqlNotConfiguredException()
    assert exc.error_code == "SERVICE_UNAVAILABLE"
    assert "SQL" in exc.message
