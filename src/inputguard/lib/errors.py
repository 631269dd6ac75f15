"""Custom exception hierarchy for InputGuard configuration and operations."""

from typing import Any


class InputGuardError(Exception):
    """Base exception for all InputGuard errors.

    All InputGuard-specific exceptions inherit from this class, enabling
    centralized exception handling at the caller's boundary.
    """

    pass


class ConfigError(InputGuardError):
    """Exception raised for configuration errors.

    Raised when validation settings cannot be loaded or contain values that
    make no sense (for example a minimum length above the maximum).

    Attributes:
        field: The configuration field that caused the error
        message: Human-readable error message describing the issue
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize ConfigError with field and message.

        Args:
            field: Configuration field name where error occurred
            message: Descriptive error message
        """
        self.field = field
        self.message = message
        super().__init__(f"Configuration error in '{field}': {message}")


class PayloadError(InputGuardError):
    """Exception raised when a payload cannot be read or has the wrong shape.

    This covers malformed JSON/YAML and non-string field values. It is not a
    field validation failure; those are returned as values.
    """

    def __init__(self, message: str) -> None:
        """Create a payload error."""
        self.message = message
        super().__init__(message)


class BadRequestError(InputGuardError):
    """Client-request error built from a validation failure.

    Maps to HTTP 400 Bad Request in whatever transport the caller uses.

    Attributes:
        message: Human-readable error message
        code: Machine-readable error code (e.g. ``EMAIL_INVALID``)
        status_code: Always 400
    """

    status_code = 400

    def __init__(self, message: str, code: str) -> None:
        """Initialize BadRequestError.

        Args:
            message: Human-readable description of the rejected input
            code: Stable machine-readable code a client can branch on
        """
        self.message = message
        self.code = code
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Return an RFC 7807 style problem body for this error."""
        return {
            "type": "about:blank",
            "title": "Bad Request",
            "status": self.status_code,
            "detail": self.message,
            "code": self.code,
        }
