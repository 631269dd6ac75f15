"""InputGuard - field validation for user and message payloads.

InputGuard checks user-facing input (email, password, username, message
content) before it is persisted. Validators return a structured
``ValidationError`` value instead of raising, and payload validators stop at
the first failing field.

Main features:
- Field validators for email, password, username and message content
- Payload validators for user and message create/update requests
- Stable machine-readable error codes
- Conversion of a returned error into an HTTP 400 style ``BadRequestError``
- Length limits configurable through YAML or environment variables
"""

from inputguard.lib.errors import (
    BadRequestError,
    ConfigError,
    InputGuardError,
    PayloadError,
)
from inputguard.lib.validation import (
    validate_email,
    validate_message_content,
    validate_message_payload,
    validate_password,
    validate_user_payload,
    validate_username,
)
from inputguard.models import (
    CreateMessagePayload,
    CreateUserPayload,
    ErrorCode,
    MessagePayload,
    UpdateMessagePayload,
    UpdateUserPayload,
    UserPayload,
    ValidationError,
    ValidationSettings,
    raise_for_error,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "BadRequestError",
    "ConfigError",
    "CreateMessagePayload",
    "CreateUserPayload",
    "ErrorCode",
    "InputGuardError",
    "MessagePayload",
    "PayloadError",
    "UpdateMessagePayload",
    "UpdateUserPayload",
    "UserPayload",
    "ValidationError",
    "ValidationSettings",
    "raise_for_error",
    "validate_email",
    "validate_message_content",
    "validate_message_payload",
    "validate_password",
    "validate_user_payload",
    "validate_username",
]
