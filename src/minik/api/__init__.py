"""REST API for Minik."""

from minik.api.app import app, create_app
from minik.api.models import APIResponse, BoardDataResponse, MoveItemRequest

__all__ = [
    "APIResponse",
    "BoardDataResponse",
    "MoveItemRequest",
    "app",
    "create_app",
]
