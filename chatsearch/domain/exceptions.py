"""Domain exceptions for chat search.

Defines domain-level exceptions that represent rule violations and
failed operations. Presentation layer maps them to HTTP responses in
exception handlers.
"""

from typing import Any


class ChatSearchException(Exception):
    """Base exception for all chatsearch application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, operation).
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


class ValidationException(ChatSearchException):
    """Raised when input validation fails (e.g. missing owner id)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or argument that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "INVALID_INPUT", details)


class AuthenticationException(ChatSearchException):
    """Raised when the caller has no authenticated owner identifier."""

    def __init__(self, message: str = "Not authenticated") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class StoreUnavailableException(ChatSearchException):
    """Raised when a query against the chat store fails.

    Wraps connection, timeout and malformed-query failures. The original
    error is chained as __cause__; its class name is kept in details so
    it survives serialization. Not retried.
    """

    def __init__(
        self,
        operation: str,
        cause: BaseException | None = None,
        message: str | None = None,
        error_code: str = "STORE_UNAVAILABLE",
    ) -> None:
        """Initialize with the failing operation and its cause.

        Args:
            operation: Store operation that failed (e.g. a repository method name).
            cause: Underlying exception, if any.
            message: Optional message; defaults to one naming the operation.
            error_code: Machine-readable code (subclasses override).
        """
        details: dict[str, Any] = {"operation": operation}
        if cause is not None:
            details["cause"] = type(cause).__name__
        super().__init__(
            message or f"Chat store unavailable during {operation}",
            error_code,
            details,
        )
        self.operation = operation
        self.cause = cause


class SearchFailedException(StoreUnavailableException):
    """Raised by the search resolver when any pass fails. No partial result."""

    def __init__(
        self,
        operation: str,
        cause: BaseException | None = None,
        message: str = "Search failed",
    ) -> None:
        super().__init__(
            operation,
            cause,
            message=message,
            error_code="SEARCH_FAILED",
        )

