"""Domain exceptions for the store-opening process engine.

Defines domain-level exceptions that represent configuration errors and
business rule violations. These exceptions are independent of the HTTP
layer; app.core.exception_handlers maps them to responses.

A blocked task completion is NOT an exception: the completion gate reports
it as a normal result value (see app.application.dtos.completion).
"""

from typing import Any


class StoreOpeningException(Exception):
    """Base exception for all store-opening engine errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. The API layer maps these to
    HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. code, field).
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
        """Return the JSON body used by the API error handler."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(StoreOpeningException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ResourceNotFoundException(StoreOpeningException):
    """Raised when a requested resource (e.g. a task definition) is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'task_definition').
            resource_id: The identifier that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class ProcessGraphException(StoreOpeningException):
    """Raised when the process definition list is not a valid DAG.

    This is a fatal configuration error: it is raised while the graph is
    loaded at startup, never per request.
    """

    def __init__(self, message: str, reason: str, codes: list[str]) -> None:
        """Initialize with reason and offending codes.

        Args:
            message: Human-readable description.
            reason: One of 'duplicate_code', 'dangling_reference',
                'self_reference', 'cycle', 'invalid_duration'.
            codes: Definition codes involved in the violation.
        """
        super().__init__(
            message,
            "PROCESS_GRAPH_INVALID",
            {"reason": reason, "codes": codes},
        )


class InvalidTransitionException(StoreOpeningException):
    """Raised when a task status transition is not allowed by the lifecycle."""

    def __init__(self, task_ref: str, from_status: str, to_status: str) -> None:
        """Initialize with the task reference and attempted transition.

        Args:
            task_ref: Task id or code used in messages.
            from_status: Current status value.
            to_status: Requested status value.
        """
        super().__init__(
            f"Task {task_ref} cannot move from '{from_status}' to '{to_status}'",
            "INVALID_TRANSITION",
            {"task": task_ref, "from_status": from_status, "to_status": to_status},
        )
