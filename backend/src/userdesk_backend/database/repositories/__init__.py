"""Repositories implementing storage operations."""

from userdesk_backend.database.repositories.user import UserRepository, UserStore

__all__ = ["UserRepository", "UserStore"]
