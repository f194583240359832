"""SQLAlchemy schemas persisted by the backend."""

from userdesk_backend.database.schemas.user import UserSchema

__all__ = ["UserSchema"]
