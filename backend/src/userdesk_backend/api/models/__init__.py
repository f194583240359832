"""Models used for API request and response payloads."""

from userdesk_backend.api.models.user import (
    CreateUserRequest,
    UpdateUserRequest,
    UserResponse,
)

__all__ = [
    "CreateUserRequest",
    "UpdateUserRequest",
    "UserResponse",
]
