"""Domain exceptions for the schoolpay application.

Defines the error taxonomy shared by services and the record store adapters.
These exceptions are independent of HTTP. The presentation layer maps them to
responses in app exception handlers (see schoolpay.core.exception_handlers).
"""

from typing import Any


class SchoolPayException(Exception):
    """Base exception for all schoolpay application errors.

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
        """Return the JSON body sent to clients."""
        body: dict[str, Any] = {"error": self.error_code, "message": self.message}
        if self.details:
            body["details"] = self.details
        return body


class ValidationException(SchoolPayException):
    """Raised when input validation fails outside of request-model parsing."""

    def __init__(self, message: str, field: str | None = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(SchoolPayException):
    """Raised when a bearer token is missing or fails verification."""

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class RateLimitException(SchoolPayException):
    """Raised when a client has used up its request window."""

    def __init__(self, message: str) -> None:
        super().__init__(message, "RATE_LIMITED")


class RecordNotFoundException(SchoolPayException):
    """Raised when a referenced document does not exist in its collection."""

    def __init__(self, collection: str, record_id: str) -> None:
        """Initialize with collection name and document id.

        Args:
            collection: Collection name (e.g. 'users', 'payments').
            record_id: The document id that was not found.
        """
        super().__init__(
            f"Record not found in {collection}: {record_id}",
            "RECORD_NOT_FOUND",
            {"collection": collection, "record_id": record_id},
        )


class RecordStoreException(SchoolPayException):
    """Raised when the backing document store is unreachable or rejects an operation.

    The message is safe to show to clients; the underlying cause is chained
    (``raise ... from exc``) and only logged server-side.
    """

    def __init__(self, operation: str, collection: str) -> None:
        super().__init__(
            f"Record store {operation} failed",
            "RECORD_STORE_ERROR",
            {"operation": operation, "collection": collection},
        )
        self.operation = operation
        self.collection = collection
