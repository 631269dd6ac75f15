"""Validation utilities for InputGuard.

This module provides the field validators (email, password, username,
message content) and the payload validators that compose them.

Every validator returns ``None`` when the input passes, or a
``ValidationError`` value for the first rule that failed. Validators never
raise for a rejected field.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

from email_validator import SPECIAL_USE_DOMAIN_NAMES, EmailNotValidError
from email_validator import validate_email as check_email_syntax
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from inputguard.config.loader import get_settings
from inputguard.config.validator import flatten_pydantic_errors
from inputguard.lib.errors import PayloadError
from inputguard.lib.logging_config import get_logger
from inputguard.models.config import ValidationSettings
from inputguard.models.payloads import MessagePayload, UserPayload
from inputguard.models.validation import ErrorCode, ValidationError

logger = get_logger(__name__)

EMAIL_INVALID_MESSAGE = "The email format isn't valid"
USERNAME_CHARSET_MESSAGE = "Username only can contains A-Z a-z 0-9 _."

USERNAME_CHARSET_RE = re.compile(r"[A-Za-z0-9]+")
# Text/emoji presentation selectors do not count towards a string's length
PRESENTATION_SELECTOR_RE = re.compile("[\ufe0e\ufe0f]")

# A check returns an error message, or None when the value passes
Check = Callable[[str, ValidationSettings], str | None]
PayloadT = TypeVar("PayloadT", bound=BaseModel)


def char_length(value: str) -> int:
    """Count the characters of ``value`` as a user would see them.

    Code points are counted, except variation selectors U+FE0E/U+FE0F.
    """
    return len(value) - len(PRESENTATION_SELECTOR_RE.findall(value))


def _length_check(prefix: str, label: str) -> Check:
    """Build an inclusive length check reading ``<prefix>_min/max_length``."""

    def check(value: str, settings: ValidationSettings) -> str | None:
        low = getattr(settings, f"{prefix}_min_length")
        high = getattr(settings, f"{prefix}_max_length")
        if low <= char_length(value) <= high:
            return None
        return f"{label} length must be between {low} and {high} characters."

    return check


def _is_email_syntax(address: str) -> bool:
    try:
        check_email_syntax(address, check_deliverability=False, test_environment=True)
    except EmailNotValidError:
        return False
    return True


def _email_syntax_check(value: str, settings: ValidationSettings) -> str | None:
    if _is_email_syntax(value):
        return None

    # Reserved top-level domains (.local, .localhost, ...) are still valid
    # syntax: re-check with the neutral "test" TLD in their place.
    local_part, at, domain = value.rpartition("@")
    head, dot, tld = domain.rpartition(".")
    if at and dot and tld.lower() in SPECIAL_USE_DOMAIN_NAMES:
        if _is_email_syntax(f"{local_part}@{head}.test"):
            return None
    return EMAIL_INVALID_MESSAGE


def _username_charset_check(value: str, settings: ValidationSettings) -> str | None:
    if USERNAME_CHARSET_RE.fullmatch(value.replace("_", "")):
        return None
    return USERNAME_CHARSET_MESSAGE


@dataclass(frozen=True)
class FieldRule:
    """Ordered checks for one payload field.

    Attributes:
        field: Payload field name reported in the error
        code: Error code reported for any failing check
        required_when_empty: When False, an absent or empty value is skipped.
            When True, it is checked like any other value.
        checks: Checks run in order; the first failure stops evaluation
    """

    field: str
    code: ErrorCode
    required_when_empty: bool
    checks: tuple[Check, ...]

    def apply(
        self, value: str | None, settings: ValidationSettings
    ) -> ValidationError | None:
        """Run the checks against ``value`` and return the first error."""
        if not value:
            if not self.required_when_empty:
                return None
            value = ""

        for check in self.checks:
            message = check(value, settings)
            if message is not None:
                # Never log the value itself, it may be a password
                logger.debug(f"Field '{self.field}' rejected: {self.code.value}")
                return ValidationError(
                    field=self.field, code=self.code, message=message
                )
        return None


EMAIL_RULE = FieldRule(
    field="email",
    code=ErrorCode.EMAIL_INVALID,
    required_when_empty=False,
    checks=(_email_syntax_check,),
)

PASSWORD_RULE = FieldRule(
    field="password",
    code=ErrorCode.PASSWORD_INVALID,
    required_when_empty=False,
    checks=(_length_check("password", "Password"),),
)

USERNAME_RULE = FieldRule(
    field="username",
    code=ErrorCode.USERNAME_INVALID,
    required_when_empty=False,
    checks=(_length_check("username", "Username"), _username_charset_check),
)

MESSAGE_CONTENT_RULE = FieldRule(
    field="content",
    code=ErrorCode.MESSAGE_CONTENT_TOO_LONG,
    required_when_empty=True,
    checks=(_length_check("message", "Message"),),
)

# Order matters: the first failing field is the one reported
USER_RULES: tuple[FieldRule, ...] = (EMAIL_RULE, PASSWORD_RULE, USERNAME_RULE)


def validate_email(
    email: str | None, settings: ValidationSettings | None = None
) -> ValidationError | None:
    """Check that the email, when given, has a valid address format."""
    return EMAIL_RULE.apply(email, settings or get_settings())


def validate_password(
    password: str | None, settings: ValidationSettings | None = None
) -> ValidationError | None:
    """Check that the password, when given, is within the allowed length."""
    return PASSWORD_RULE.apply(password, settings or get_settings())


def validate_username(
    username: str | None, settings: ValidationSettings | None = None
) -> ValidationError | None:
    """Check username length, then its characters.

    Usernames may only contain ASCII letters, digits and underscores, and
    must contain at least one letter or digit.
    """
    return USERNAME_RULE.apply(username, settings or get_settings())


def validate_message_content(
    content: str | None, settings: ValidationSettings | None = None
) -> ValidationError | None:
    """Check message content length. Empty content is rejected."""
    return MESSAGE_CONTENT_RULE.apply(content, settings or get_settings())


def _coerce_payload(
    payload: BaseModel | Mapping[str, Any], model: type[PayloadT]
) -> PayloadT:
    """Return ``payload`` as a model instance, parsing plain mappings.

    Raises:
        PayloadError: If a mapping does not fit the payload shape
    """
    if isinstance(payload, model):
        return payload
    if isinstance(payload, BaseModel):
        payload = payload.model_dump()
    try:
        return model.model_validate(payload)
    except PydanticValidationError as e:
        error_text = "\n".join(flatten_pydantic_errors(e))
        raise PayloadError(f"Malformed {model.__name__}:\n{error_text}") from e


def validate_user_payload(
    payload: UserPayload | Mapping[str, Any],
    settings: ValidationSettings | None = None,
) -> ValidationError | None:
    """Validate a user create/update payload.

    Email, password and username are checked in that order and the first
    error is returned. Absent fields are skipped, so partial update payloads
    are accepted.

    Args:
        payload: A ``UserPayload`` (or subclass) or a deserialized mapping
        settings: Length limits (defaults to the process-wide settings)

    Returns:
        The first ``ValidationError`` found, or None if the payload is valid

    Raises:
        PayloadError: If a mapping holds non-string field values
    """
    user = _coerce_payload(payload, UserPayload)
    active = settings or get_settings()
    for rule in USER_RULES:
        error = rule.apply(getattr(user, rule.field), active)
        if error is not None:
            return error
    return None


def validate_message_payload(
    payload: MessagePayload | Mapping[str, Any],
    settings: ValidationSettings | None = None,
) -> ValidationError | None:
    """Validate a message create/update payload.

    A mapping without ``content`` is treated as empty content and rejected
    with ``MESSAGE_CONTENT_TOO_LONG``.

    Raises:
        PayloadError: If ``content`` is present but not a string
    """
    if isinstance(payload, Mapping) and payload.get("content") is None:
        return validate_message_content(None, settings)
    message = _coerce_payload(payload, MessagePayload)
    return validate_message_content(message.content, settings)
