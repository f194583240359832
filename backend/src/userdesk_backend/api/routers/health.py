"""Liveness and readiness probes."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from userdesk_backend.api.errors import error_response
from userdesk_backend.database import DatabaseService, get_database

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
def health_check() -> dict[str, str]:
    """Liveness probe. Returns 200 while the process is up."""

    return {"status": "ok"}


@router.get("/ready", response_model=None)
def readiness_check(
    db: Annotated[DatabaseService, Depends(get_database)],
) -> dict[str, str] | JSONResponse:
    """Readiness probe including database connectivity."""

    if not db.ping():
        return error_response(
            status.HTTP_503_SERVICE_UNAVAILABLE, "database unavailable"
        )
    return {"status": "ready"}
