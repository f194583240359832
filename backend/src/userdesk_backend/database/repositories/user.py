"""Repository helpers for working with users."""

from __future__ import annotations

import logging
from typing import Protocol

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from userdesk_backend.database.outcomes import (
    Found,
    NotFound,
    StorageError,
    StorageOutcome,
)
from userdesk_backend.database.schemas import UserSchema

logger = logging.getLogger(__name__)


class UserStore(Protocol):
    """Storage operations the HTTP layer forwards validated commands to."""

    def list_users(self, limit: int, offset: int) -> StorageOutcome[list[UserSchema]]: ...

    def create(self, name: str, email: str) -> StorageOutcome[UserSchema]: ...

    def get_by_id(self, user_id: int) -> StorageOutcome[UserSchema]: ...

    def update(
        self, user_id: int, *, name: str | None = None, email: str | None = None
    ) -> StorageOutcome[UserSchema]: ...

    def delete(self, user_id: int) -> StorageOutcome[int]: ...


class UserRepository:
    """Encapsulates persistence operations for :class:`UserSchema`."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_users(self, limit: int, offset: int) -> StorageOutcome[list[UserSchema]]:
        """Return one page of users ordered by id."""
        stmt = select(UserSchema).order_by(UserSchema.id).limit(limit).offset(offset)
        try:
            users = list(self._session.scalars(stmt))
        except SQLAlchemyError as exc:
            return self._failure("list", exc)
        return Found(users)

    def create(self, name: str, email: str) -> StorageOutcome[UserSchema]:
        """Insert a new user and return it with its assigned id."""
        user = UserSchema(name=name, email=email)
        try:
            self._session.add(user)
            self._session.flush()
            self._session.refresh(user)
            self._session.commit()
        except SQLAlchemyError as exc:
            return self._failure("create", exc)
        return Found(user)

    def get_by_id(self, user_id: int) -> StorageOutcome[UserSchema]:
        """Return user entity by user's ID."""
        try:
            user = self._session.get(UserSchema, user_id)
        except SQLAlchemyError as exc:
            return self._failure("get", exc, user_id=user_id)
        if user is None:
            return NotFound()
        return Found(user)

    def update(
        self, user_id: int, *, name: str | None = None, email: str | None = None
    ) -> StorageOutcome[UserSchema]:
        """Apply the provided fields to an existing user."""
        try:
            user = self._session.get(UserSchema, user_id)
            if user is None:
                return NotFound()
            if name is not None:
                user.name = name
            if email is not None:
                user.email = email
            self._session.flush()
            self._session.refresh(user)
            self._session.commit()
        except SQLAlchemyError as exc:
            return self._failure("update", exc, user_id=user_id)
        return Found(user)

    def delete(self, user_id: int) -> StorageOutcome[int]:
        """Remove a user, returning the deleted id."""
        try:
            user = self._session.get(UserSchema, user_id)
            if user is None:
                return NotFound()
            self._session.delete(user)
            self._session.flush()
            self._session.commit()
        except SQLAlchemyError as exc:
            return self._failure("delete", exc, user_id=user_id)
        return Found(user_id)

    def _failure(
        self, operation: str, exc: SQLAlchemyError, *, user_id: int | None = None
    ) -> StorageError:
        self._session.rollback()
        logger.error(
            "User %s failed",
            operation,
            exc_info=exc,
            extra={"operation": operation, "user_id": user_id},
        )
        return StorageError(str(exc))
