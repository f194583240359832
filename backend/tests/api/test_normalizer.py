"""Tests for request normalization."""

from __future__ import annotations

import pytest

from userdesk_backend.api.errors import ApiError, ApiErrorKind
from userdesk_backend.api.normalizer import (
    CreateCommand,
    ListQuery,
    UpdateCommand,
    decode_create_payload,
    decode_update_payload,
    parse_integer,
    parse_list_query,
    parse_user_id,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("7", 7),
        ("+7", 7),
        ("-7", -7),
        ("007", 7),
        (None, None),
        ("", None),
        (" 7", None),
        ("1_000", None),
        ("7.0", None),
        ("٣", None),
        ("9223372036854775807", 9223372036854775807),
        ("9223372036854775808", None),
    ],
)
def test_parse_integer(raw: str | None, expected: int | None) -> None:
    assert parse_integer(raw) == expected


@pytest.mark.parametrize("limit", [None, "", "ten", "0", "-1", "2.5"])
def test_parse_list_query_defaults_invalid_limit(limit: str | None) -> None:
    assert parse_list_query(limit, "4").limit == 10


@pytest.mark.parametrize("offset", [None, "", "zero", "-1", "1e3"])
def test_parse_list_query_defaults_invalid_offset(offset: str | None) -> None:
    assert parse_list_query("4", offset).offset == 0


def test_parse_list_query_keeps_valid_values() -> None:
    assert parse_list_query("25", "0") == ListQuery(limit=25, offset=0)
    assert parse_list_query("1", "300") == ListQuery(limit=1, offset=300)


def test_parse_user_id() -> None:
    assert parse_user_id("42") == 42


@pytest.mark.parametrize(
    ("raw", "kind"),
    [
        ("", ApiErrorKind.MISSING_IDENTIFIER),
        (None, ApiErrorKind.MISSING_IDENTIFIER),
        ("forty-two", ApiErrorKind.INVALID_IDENTIFIER),
        ("4/2", ApiErrorKind.INVALID_IDENTIFIER),
    ],
)
def test_parse_user_id_rejects(raw: str | None, kind: ApiErrorKind) -> None:
    with pytest.raises(ApiError) as exc_info:
        parse_user_id(raw)
    assert exc_info.value.kind is kind
    assert exc_info.value.status_code == 400


def test_decode_create_payload_trims() -> None:
    command = decode_create_payload(b'{"name": " Alice ", "email": "\\ta@b.com\\n"}')

    assert command == CreateCommand(name="Alice", email="a@b.com")


def test_decode_create_payload_reports_name_before_email() -> None:
    with pytest.raises(ApiError) as exc_info:
        decode_create_payload(b'{"name": " ", "email": " "}')
    assert exc_info.value.kind is ApiErrorKind.MISSING_NAME


def test_decode_create_payload_ignores_unknown_keys() -> None:
    command = decode_create_payload(
        b'{"name": "Alice", "email": "a@b.com", "role": "admin"}'
    )

    assert command == CreateCommand(name="Alice", email="a@b.com")


@pytest.mark.parametrize(
    "body", [b"", b"null", b'"Alice"', b'{"name": ["Alice"], "email": "a@b.com"}']
)
def test_decode_create_payload_rejects_malformed(body: bytes) -> None:
    with pytest.raises(ApiError) as exc_info:
        decode_create_payload(body)
    assert exc_info.value.kind is ApiErrorKind.MALFORMED_BODY


def test_decode_update_payload_keeps_values_verbatim() -> None:
    command = decode_update_payload(b'{"name": "  "}')

    assert command == UpdateCommand(name="  ", email=None)


def test_decode_update_payload_requires_a_field() -> None:
    with pytest.raises(ApiError) as exc_info:
        decode_update_payload(b'{"name": null, "email": null}')
    assert exc_info.value.kind is ApiErrorKind.NO_FIELDS_TO_UPDATE


def test_decode_update_payload_rejects_wrong_types() -> None:
    with pytest.raises(ApiError) as exc_info:
        decode_update_payload(b'{"email": 5}')
    assert exc_info.value.kind is ApiErrorKind.MALFORMED_BODY
