"""Pydantic models for payloads, validation results and settings."""

from inputguard.models.config import ValidationSettings
from inputguard.models.payloads import (
    CreateMessagePayload,
    CreateUserPayload,
    MessagePayload,
    UpdateMessagePayload,
    UpdateUserPayload,
    UserPayload,
)
from inputguard.models.validation import ErrorCode, ValidationError, raise_for_error

__all__ = [
    "CreateMessagePayload",
    "CreateUserPayload",
    "ErrorCode",
    "MessagePayload",
    "UpdateMessagePayload",
    "UpdateUserPayload",
    "UserPayload",
    "ValidationError",
    "ValidationSettings",
    "raise_for_error",
]
