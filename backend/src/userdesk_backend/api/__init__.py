"""API layer: request normalization, routing and response mapping."""

from userdesk_backend.api.app import create_api

__all__ = ["create_api"]
