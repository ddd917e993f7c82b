"""API routes."""

from .recordings import create_recordings_router
from .stream import create_stream_router

__all__ = ["create_recordings_router", "create_stream_router"]
