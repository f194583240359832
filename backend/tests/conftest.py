"""Test configuration and fixtures for the backend test suite."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from fastapi.testclient import TestClient

from userdesk_backend.api import create_api
from userdesk_backend.database import (
    Found,
    NotFound,
    StorageError,
    StorageOutcome,
    UserSchema,
    get_user_store,
)
from userdesk_backend.settings import get_settings

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def _mock_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ensure settings are loaded with predictable values during tests."""
    monkeypatch.setenv("DATABASE_URL", "sqlite://")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class FakeUserStore:
    """In-memory user store recording every call it receives."""

    def __init__(self) -> None:
        self.users: dict[int, UserSchema] = {}
        self.calls: list[tuple[str, tuple[object, ...]]] = []
        self.failure: str | None = None
        self._next_id = 1

    def seed(self, name: str, email: str) -> UserSchema:
        user = UserSchema(id=self._next_id, name=name, email=email)
        self.users[user.id] = user
        self._next_id += 1
        return user

    def list_users(self, limit: int, offset: int) -> StorageOutcome[list[UserSchema]]:
        self.calls.append(("list_users", (limit, offset)))
        if self.failure:
            return StorageError(self.failure)
        ordered = sorted(self.users.values(), key=lambda user: user.id)
        return Found(ordered[offset : offset + limit])

    def create(self, name: str, email: str) -> StorageOutcome[UserSchema]:
        self.calls.append(("create", (name, email)))
        if self.failure:
            return StorageError(self.failure)
        return Found(self.seed(name, email))

    def get_by_id(self, user_id: int) -> StorageOutcome[UserSchema]:
        self.calls.append(("get_by_id", (user_id,)))
        if self.failure:
            return StorageError(self.failure)
        user = self.users.get(user_id)
        return NotFound() if user is None else Found(user)

    def update(
        self, user_id: int, *, name: str | None = None, email: str | None = None
    ) -> StorageOutcome[UserSchema]:
        self.calls.append(("update", (user_id, name, email)))
        if self.failure:
            return StorageError(self.failure)
        user = self.users.get(user_id)
        if user is None:
            return NotFound()
        if name is not None:
            user.name = name
        if email is not None:
            user.email = email
        return Found(user)

    def delete(self, user_id: int) -> StorageOutcome[int]:
        self.calls.append(("delete", (user_id,)))
        if self.failure:
            return StorageError(self.failure)
        if self.users.pop(user_id, None) is None:
            return NotFound()
        return Found(user_id)


@pytest.fixture
def store() -> FakeUserStore:
    return FakeUserStore()


@pytest.fixture
def client(store: FakeUserStore) -> Iterator[TestClient]:
    app = create_api()
    app.dependency_overrides[get_user_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
