"""Application layer exceptions."""

from typing import Any, Optional


class ApplicationError(Exception):
    """Base exception for all application layer errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        """
        Initialize application error.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
            details: Additional error details
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        """Return string representation of error."""
        if self.details:
            return f"{self.message} (code: {self.error_code}, details: {self.details})"
        return f"{self.message} (code: {self.error_code})"


class NotFoundError(ApplicationError):
    """Raised when a partner or fusion record does not exist."""

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
    ):
        """
        Initialize not found error.

        Args:
            message: Human-readable error message
            resource_type: Type of resource (e.g., 'Site', 'FusionRecord')
            resource_id: ID of the resource that was not found
        """
        details = {}
        if resource_type:
            details["resource_type"] = resource_type
        if resource_id:
            details["resource_id"] = resource_id

        super().__init__(message, "NOT_FOUND", details)


class ValidationError(ApplicationError):
    """Raised when application-level validation fails."""

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        value: Optional[Any] = None,
        constraint: Optional[str] = None,
        error_code: str = "VALIDATION_ERROR",
    ):
        """
        Initialize validation error.

        Args:
            message: Human-readable error message
            field: Field that failed validation
            value: Invalid value
            constraint: Constraint that was violated
            error_code: Machine-readable error code
        """
        details = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)
        if constraint:
            details["constraint"] = constraint

        super().__init__(message, error_code, details)


class ConflictError(ApplicationError):
    """Raised when an operation conflicts with the current state."""

    def __init__(
        self,
        message: str = "Operation conflicts with current state",
        operation: Optional[str] = None,
        current_state: Optional[str] = None,
        error_code: str = "CONFLICT",
    ):
        """
        Initialize conflict error.

        Args:
            message: Human-readable error message
            operation: Operation that was attempted
            current_state: Current state that conflicts
            error_code: Machine-readable error code
        """
        details = {}
        if operation:
            details["operation"] = operation
        if current_state:
            details["current_state"] = current_state

        super().__init__(message, error_code, details)


class InvalidMergeError(ValidationError):
    """Raised when a merge request is structurally invalid (e.g. self-merge)."""

    def __init__(self, message: str = "Invalid merge", origin_id: Optional[int] = None):
        super().__init__(
            message,
            field="destination_id",
            value=origin_id,
            constraint="origin_id != destination_id",
            error_code="INVALID_MERGE",
        )


class ConflictingStateError(ConflictError):
    """Raised when a concurrent mutation invalidated the operation."""

    def __init__(
        self,
        message: str = "Concurrent modification detected",
        operation: Optional[str] = None,
        current_state: Optional[str] = None,
    ):
        super().__init__(message, operation, current_state, error_code="CONFLICTING_STATE")


class AlreadyRevertedError(ConflictError):
    """Raised when reverting a fusion that was already reverted."""

    def __init__(self, fusion_id: int):
        super().__init__(
            f"Fusion {fusion_id} has already been reverted",
            operation="revert",
            current_state="reverted",
            error_code="ALREADY_REVERTED",
        )
        self.details["fusion_id"] = fusion_id
