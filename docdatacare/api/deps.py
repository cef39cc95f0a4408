"""Shared dependencies for API routes."""
from fastapi import Request

from ..storage.base import Storage


def get_storage(request: Request) -> Storage:
    """Dependency: the storage instance created once at application startup."""
    return request.app.state.storage
