"""Map storage outcomes onto HTTP responses."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

from fastapi import Response, status

from userdesk_backend.api.errors import ApiError, ApiErrorKind
from userdesk_backend.api.models import UserResponse
from userdesk_backend.database import Found, NotFound, StorageOutcome, UserSchema

T = TypeVar("T")


def unwrap(
    outcome: StorageOutcome[T],
    *,
    failure: ApiErrorKind,
    not_found: ApiErrorKind | None = ApiErrorKind.USER_NOT_FOUND,
) -> T:
    """Return the value of a successful outcome or raise the mapped error.

    ``not_found=None`` is used by operations that never address a single
    row; a stray ``NotFound`` there is reported like any other failure.
    """
    match outcome:
        case Found(value):
            return value
        case NotFound() if not_found is not None:
            raise ApiError(not_found)
        case _:
            raise ApiError(failure)


def to_user_response(user: UserSchema) -> UserResponse:
    return UserResponse.model_validate(user, from_attributes=True)


def to_user_list(users: Iterable[UserSchema]) -> list[UserResponse]:
    return [to_user_response(user) for user in users]


def no_content() -> Response:
    """Empty 204 response for successful deletions."""
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["no_content", "to_user_list", "to_user_response", "unwrap"]
