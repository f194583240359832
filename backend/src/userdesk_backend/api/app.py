"""Factory for constructing the FastAPI application."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from userdesk_backend.api.errors import register_error_handlers
from userdesk_backend.api.routers import health_router, users_router
from userdesk_backend.observability import setup_logging
from userdesk_backend.settings import get_settings


def create_api() -> FastAPI:
    """Instantiate and configure the FastAPI application."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    app = FastAPI(title="Userdesk API")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(health_router)
    app.include_router(users_router)
    register_error_handlers(app)
    return app
