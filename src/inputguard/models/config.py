"""Validation settings model.

Holds the inclusive length limits applied by the field validators. The
defaults match the limits the error messages have always advertised.
"""

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from inputguard.config.defaults import DEFAULT_LIMITS


class ValidationSettings(BaseModel):
    """Inclusive length limits for each validated field."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    password_min_length: int = Field(
        default=DEFAULT_LIMITS["password_min_length"], ge=0
    )
    password_max_length: int = Field(
        default=DEFAULT_LIMITS["password_max_length"], ge=0
    )
    username_min_length: int = Field(
        default=DEFAULT_LIMITS["username_min_length"], ge=0
    )
    username_max_length: int = Field(
        default=DEFAULT_LIMITS["username_max_length"], ge=0
    )
    message_min_length: int = Field(default=DEFAULT_LIMITS["message_min_length"], ge=0)
    message_max_length: int = Field(default=DEFAULT_LIMITS["message_max_length"], ge=0)

    @model_validator(mode="after")
    def check_ranges(self) -> Self:
        """Ensure every minimum is not greater than its maximum."""
        for prefix in ("password", "username", "message"):
            low = getattr(self, f"{prefix}_min_length")
            high = getattr(self, f"{prefix}_max_length")
            if low > high:
                raise ValueError(
                    f"{prefix}_min_length ({low}) must not exceed "
                    f"{prefix}_max_length ({high})"
                )
        return self
