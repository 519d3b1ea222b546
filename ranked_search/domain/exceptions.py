"""Domain exceptions for the ranked search service.

Sanitization and statement building never fail; only store execution and
caller-supplied configuration lookups raise. Presentation layer maps these
to HTTP responses in exception handlers.
"""

from typing import Any


class RankedSearchException(Exception):
    """Base exception for all ranked search errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. entity_kind).
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
        """Serialize for JSON error responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class InvalidInputException(RankedSearchException):
    """Raised by strict-mode callers that reject a search term outright.

    The sanitizer itself never raises this: every input reduces to a
    (possibly empty) token set.
    """

    def __init__(self, message: str = "Invalid search input") -> None:
        super().__init__(message, "INVALID_INPUT")


class UnknownEntityKindException(RankedSearchException):
    """Raised when a search names an entity kind with no configured target."""

    def __init__(self, entity_kind: str) -> None:
        """Initialize with the unknown kind.

        Args:
            entity_kind: The entity kind that has no TargetConfig.
        """
        super().__init__(
            f"Unknown entity kind: {entity_kind}",
            "UNKNOWN_ENTITY_KIND",
            {"entity_kind": entity_kind},
        )


class StoreError(RankedSearchException):
    """Transient store failure (connectivity, timeout, malformed statement).

    Propagated to the caller without retry; the original driver error is
    kept as __cause__.
    """

    def __init__(self, reason: str, operation: str | None = None) -> None:
        """Initialize with reason and optional operation name.

        Args:
            reason: Short description of the underlying failure.
            operation: Optional statement kind (e.g. 'ranked_search', 'refetch').
        """
        details: dict[str, Any] = {"reason": reason}
        if operation:
            details["operation"] = operation
        super().__init__("Search store unavailable", "STORE_ERROR", details)


class SqlNotConfiguredException(RankedSearchException):
    """Raised when a search needs the SQL store but DATABASE_URL is unset."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
