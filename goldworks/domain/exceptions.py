"""Domain exceptions for the goldworks application.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class GoldworksException(Exception):
    """Base exception for all goldworks application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body used by the HTTP exception handler."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(GoldworksException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ResourceNotFoundException(GoldworksException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'order', 'tracking').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class SchemaNotFoundException(GoldworksException):
    """Raised when a department has no requirement schema (no work instructions)."""

    def __init__(self, department: str) -> None:
        super().__init__(
            f"Work instructions unavailable for department {department}",
            "SCHEMA_NOT_FOUND",
            {"department": department},
        )


class IllegalTransitionException(GoldworksException):
    """Raised when a tracking/submission transition is not allowed in its current state.

    Indicates a caller bug or stale client state; never fatal.
    """

    def __init__(
        self,
        message: str,
        current_status: str | None = None,
        attempted: str | None = None,
        **details_extra: Any,
    ) -> None:
        """Initialize with message and transition context.

        Args:
            message: Human-readable description.
            current_status: Status the record was in when the call was rejected.
            attempted: Operation that was attempted (e.g. 'start', 'edit').
            **details_extra: Optional keys merged into details (e.g. department).
        """
        details: dict[str, Any] = {**details_extra}
        if current_status is not None:
            details["current_status"] = current_status
        if attempted is not None:
            details["attempted"] = attempted
        super().__init__(message, "ILLEGAL_TRANSITION", details)


class PersistenceFailureException(GoldworksException):
    """Raised when the persistence collaborator fails to apply a save or completion."""

    def __init__(
        self,
        operation: str,
        order_id: str,
        department: str,
        reason: str | None = None,
    ) -> None:
        """Initialize with the failed operation and its target.

        Args:
            operation: 'save' or 'complete'.
            order_id: Order whose work data was being written.
            department: Department key of the tracking.
            reason: Optional underlying error description.
        """
        details: dict[str, Any] = {
            "operation": operation,
            "order_id": order_id,
            "department": department,
        }
        if reason:
            details["reason"] = reason
        super().__init__(
            f"Could not {operation} work for order {order_id} ({department}); retry later",
            "PERSISTENCE_FAILURE",
            details,
        )


class SqlNotConfiguredException(GoldworksException):
    """Raised when an operation requires Postgres but the backend is not configured."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
