"""Dependency providers for FastAPI routers."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from userdesk_backend.database import UserStore, get_user_store


async def read_body(request: Request) -> bytes:
    """Consume the whole request body before any validation runs."""

    return await request.body()


RequestBody = Annotated[bytes, Depends(read_body)]
UserStoreDep = Annotated[UserStore, Depends(get_user_store)]

__all__ = ["RequestBody", "UserStoreDep", "read_body"]
