"""Turn raw HTTP input into validated user commands.

Pagination parameters are repaired silently: anything unparsable or out of
range falls back to its default. Path identifiers and JSON bodies are
validated strictly and rejected with an :class:`ApiError` before storage is
touched. Only the first failing check of a request is reported.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from pydantic import ValidationError

from userdesk_backend.api.errors import ApiError, ApiErrorKind
from userdesk_backend.api.models import CreateUserRequest, UpdateUserRequest

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10
DEFAULT_OFFSET = 0

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


@dataclass(frozen=True, slots=True)
class ListQuery:
    """Effective pagination window for a list request."""

    limit: int
    offset: int


@dataclass(frozen=True, slots=True)
class CreateCommand:
    """Trimmed, non-empty fields for a new user."""

    name: str
    email: str


@dataclass(frozen=True, slots=True)
class UpdateCommand:
    """Fields to change on an existing user; ``None`` leaves a field untouched."""

    name: str | None = None
    email: str | None = None


def parse_integer(raw: str | None) -> int | None:
    """Parse a signed 64-bit decimal integer, returning ``None`` when invalid."""
    if raw is None or not _INTEGER_PATTERN.fullmatch(raw):
        return None
    value = int(raw)
    if not _INT64_MIN <= value <= _INT64_MAX:
        return None
    return value


def parse_list_query(limit: str | None, offset: str | None) -> ListQuery:
    """Normalize pagination parameters, substituting defaults for bad values."""
    parsed_limit = parse_integer(limit)
    if parsed_limit is None or parsed_limit <= 0:
        parsed_limit = DEFAULT_LIMIT

    parsed_offset = parse_integer(offset)
    if parsed_offset is None or parsed_offset < 0:
        parsed_offset = DEFAULT_OFFSET

    return ListQuery(limit=parsed_limit, offset=parsed_offset)


def parse_user_id(raw: str | None) -> int:
    """Extract the user id from the path segment following ``/users/``."""
    if not raw:
        raise ApiError(ApiErrorKind.MISSING_IDENTIFIER)
    user_id = parse_integer(raw)
    if user_id is None:
        raise ApiError(ApiErrorKind.INVALID_IDENTIFIER)
    return user_id


def decode_create_payload(body: bytes) -> CreateCommand:
    """Decode and validate the body of a create request."""
    try:
        payload = CreateUserRequest.model_validate_json(body)
    except ValidationError as exc:
        logger.debug("Rejected create payload: %s", exc.errors(include_input=False))
        raise ApiError(ApiErrorKind.MALFORMED_BODY) from exc

    if not payload.name:
        raise ApiError(ApiErrorKind.MISSING_NAME)
    if not payload.email:
        raise ApiError(ApiErrorKind.MISSING_EMAIL)
    return CreateCommand(name=payload.name, email=payload.email)


def decode_update_payload(body: bytes) -> UpdateCommand:
    """Decode the body of a partial update.

    Provided fields are forwarded as sent: they are neither trimmed nor
    checked for emptiness, unlike on create.
    """
    try:
        payload = UpdateUserRequest.model_validate_json(body)
    except ValidationError as exc:
        logger.debug("Rejected update payload: %s", exc.errors(include_input=False))
        raise ApiError(ApiErrorKind.MALFORMED_BODY) from exc

    if not payload.has_changes():
        raise ApiError(ApiErrorKind.NO_FIELDS_TO_UPDATE)
    return UpdateCommand(name=payload.name, email=payload.email)


__all__ = [
    "DEFAULT_LIMIT",
    "DEFAULT_OFFSET",
    "CreateCommand",
    "ListQuery",
    "UpdateCommand",
    "decode_create_payload",
    "decode_update_payload",
    "parse_integer",
    "parse_list_query",
    "parse_user_id",
]
