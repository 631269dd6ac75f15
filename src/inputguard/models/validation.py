"""Validation result models.

A field validator returns either ``None`` (the input passed) or a
``ValidationError`` value describing the first rule that failed. The value is
never raised; callers convert it to a transport error with ``to_exception``.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from inputguard.lib.errors import BadRequestError


class ErrorCode(str, Enum):
    """Machine-readable validation error codes.

    The string values are a contract with any client that branches on them.
    """

    EMAIL_INVALID = "EMAIL_INVALID"
    PASSWORD_INVALID = "PASSWORD_INVALID"  # noqa: S105  # nosec B105
    USERNAME_INVALID = "USERNAME_INVALID"
    MESSAGE_CONTENT_TOO_LONG = "MESSAGE_CONTENT_TOO_LONG"


class ValidationError(BaseModel):
    """A single rejected field, carrying a message and a stable code."""

    model_config = ConfigDict(frozen=True)

    field: str = Field(..., description="Payload field that failed validation")
    code: ErrorCode = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")

    def to_exception(self) -> BadRequestError:
        """Convert this value into a client-request (HTTP 400) error."""
        return BadRequestError(self.message, self.code.value)


def raise_for_error(error: ValidationError | None) -> None:
    """Raise ``BadRequestError`` if ``error`` is set, otherwise do nothing.

    Convenience for callers that prefer exceptions at their own boundary:

        raise_for_error(validate_user_payload(body))

    Raises:
        BadRequestError: If a validation error was returned
    """
    if error is not None:
        raise error.to_exception()
