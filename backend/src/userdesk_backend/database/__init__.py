"""Database connectivity helpers and storage collaborators."""

from userdesk_backend.database.base import BaseSchema
from userdesk_backend.database.dependencies import (
    get_database,
    get_session,
    get_user_store,
)
from userdesk_backend.database.outcomes import (
    Found,
    NotFound,
    StorageError,
    StorageOutcome,
)
from userdesk_backend.database.repositories import UserRepository, UserStore
from userdesk_backend.database.schemas import UserSchema
from userdesk_backend.database.service import DatabaseService

__all__ = [
    "BaseSchema",
    "DatabaseService",
    "Found",
    "NotFound",
    "StorageError",
    "StorageOutcome",
    "UserRepository",
    "UserSchema",
    "UserStore",
    "get_database",
    "get_session",
    "get_user_store",
]
