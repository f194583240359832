"""Pydantic models for user endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class UserResponse(BaseModel):
    """Public representation of a stored user."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str


class CreateUserRequest(BaseModel):
    """Payload for creating a new user.

    Missing and ``null`` fields decode to empty strings; both fields are
    whitespace-trimmed so emptiness checks see the stored value.
    """

    model_config = ConfigDict(strict=True, extra="ignore")

    name: str | None = None
    email: str | None = None

    @field_validator("name", "email")
    @classmethod
    def strip_whitespace(cls, value: str | None) -> str:
        return (value or "").strip()


class UpdateUserRequest(BaseModel):
    """Payload for a partial update.

    A field counts as provided when it is present and not ``null``. Provided
    values are kept verbatim.
    """

    model_config = ConfigDict(strict=True, extra="ignore")

    name: str | None = None
    email: str | None = None

    def has_changes(self) -> bool:
        return self.name is not None or self.email is not None
