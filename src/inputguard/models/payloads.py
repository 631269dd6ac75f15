"""Payload models for user and message create/update requests.

These models only describe the shape of a deserialized request body. Format
and length rules live in ``inputguard.lib.validation`` so that a rejected
field yields a coded ``ValidationError`` rather than a pydantic error.
"""

from pydantic import BaseModel, Field


class UserPayload(BaseModel):
    """User fields shared by create and update requests.

    Every field is optional; an absent or empty field is not validated.
    """

    email: str | None = Field(None, description="User email address")
    password: str | None = Field(None, description="Plain-text password", repr=False)
    username: str | None = Field(None, description="Public username")


class CreateUserPayload(UserPayload):
    """Payload for creating a user. All fields must be present."""

    email: str = Field(..., description="User email address")
    password: str = Field(..., description="Plain-text password", repr=False)
    username: str = Field(..., description="Public username")


class UpdateUserPayload(UserPayload):
    """Payload for a partial user update. Any field may be omitted."""

    pass


class MessagePayload(BaseModel):
    """Message fields shared by create and update requests."""

    content: str = Field(..., description="Message body")


class CreateMessagePayload(MessagePayload):
    """Payload for posting a new message."""

    pass


class UpdateMessagePayload(MessagePayload):
    """Payload for editing an existing message."""

    pass
