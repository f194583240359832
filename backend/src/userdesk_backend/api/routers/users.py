"""User collection endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from userdesk_backend.api.dependencies import RequestBody, UserStoreDep
from userdesk_backend.api.errors import ApiErrorKind
from userdesk_backend.api.models import UserResponse
from userdesk_backend.api.normalizer import (
    decode_create_payload,
    decode_update_payload,
    parse_list_query,
    parse_user_id,
)
from userdesk_backend.api.responses import (
    no_content,
    to_user_list,
    to_user_response,
    unwrap,
)

router = APIRouter(prefix="/users", tags=["users"])

# The ``path`` converter also matches an empty segment, so ``/users/`` reaches
# the handlers and is rejected as a missing id instead of a routing 404.
ITEM_PATH = "/{user_id:path}"


@router.get("", response_model=list[UserResponse])
def list_users(
    store: UserStoreDep,
    limit: str | None = None,
    offset: str | None = None,
) -> list[UserResponse]:
    """Return one page of users."""

    query = parse_list_query(limit, offset)
    users = unwrap(
        store.list_users(query.limit, query.offset),
        failure=ApiErrorKind.LIST_FAILED,
        not_found=None,
    )
    return to_user_list(users)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(body: RequestBody, store: UserStoreDep) -> UserResponse:
    """Create a user from a trimmed name and email."""

    command = decode_create_payload(body)
    user = unwrap(
        store.create(command.name, command.email),
        failure=ApiErrorKind.CREATE_FAILED,
        not_found=None,
    )
    return to_user_response(user)


@router.get(ITEM_PATH, response_model=UserResponse)
def get_user(user_id: str, store: UserStoreDep) -> UserResponse:
    """Fetch a single user by id."""

    user = unwrap(
        store.get_by_id(parse_user_id(user_id)), failure=ApiErrorKind.FETCH_FAILED
    )
    return to_user_response(user)


@router.patch(ITEM_PATH, response_model=UserResponse)
def update_user(user_id: str, body: RequestBody, store: UserStoreDep) -> UserResponse:
    """Apply a partial update to an existing user."""

    parsed_id = parse_user_id(user_id)
    command = decode_update_payload(body)
    user = unwrap(
        store.update(parsed_id, name=command.name, email=command.email),
        failure=ApiErrorKind.UPDATE_FAILED,
    )
    return to_user_response(user)


@router.delete(
    ITEM_PATH, status_code=status.HTTP_204_NO_CONTENT, response_class=Response
)
def delete_user(user_id: str, store: UserStoreDep) -> Response:
    """Delete a user; success carries no body."""

    unwrap(store.delete(parse_user_id(user_id)), failure=ApiErrorKind.DELETE_FAILED)
    return no_content()
