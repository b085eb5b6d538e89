"""Domain exceptions for the entity relationship resolver.

Defines domain-level exceptions independent of infrastructure concerns.
Only configuration errors (unknown entity type) and parameter validation
errors reach callers; storage faults are carried as values at the rule
execution boundary and logged.
"""

from typing import Any


class EntityRelationsException(Exception):
    """Base exception for all entity relationship resolver errors.

    All custom exceptions inherit from this class so callers can handle
    them consistently. A surrounding REST layer maps them to responses
    using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, entity_type).
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
        """Return a JSON-serializable representation (error, message, details)."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(EntityRelationsException):
    """Raised when input validation fails (e.g. negative limit or offset)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class UnknownEntityTypeException(EntityRelationsException):
    """Raised when a type tag is absent from the entity registry or rule table.

    Signals a configuration defect, never a runtime data condition.
    """

    def __init__(self, entity_type: str) -> None:
        """Initialize with the unregistered type tag.

        Args:
            entity_type: The tag that was requested.
        """
        super().__init__(
            f"Unknown entity type: {entity_type}",
            "UNKNOWN_ENTITY_TYPE",
            {"entity_type": entity_type},
        )


class StorageFaultException(EntityRelationsException):
    """A backing-store call failed (transiently or structurally).

    Never raised to callers of the resolver: the repository wraps it in a
    FetchErr and the resolver logs and skips the failing fetch.
    """

    def __init__(self, entity_type: str, operation: str, reason: str) -> None:
        """Initialize with fetch context.

        Args:
            entity_type: Entity type (table) the fetch targeted.
            operation: Fetch operation (e.g. 'get_row', 'rule_rows', 'search').
            reason: Underlying error description.
        """
        super().__init__(
            f"Storage fault during {operation} on {entity_type}",
            "STORAGE_FAULT",
            {"entity_type": entity_type, "operation": operation, "reason": reason},
        )


class SqlNotConfiguredException(EntityRelationsException):
    """Raised when a database session is requested but DATABASE_URL is not set."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
