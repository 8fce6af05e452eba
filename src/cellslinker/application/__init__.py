"""Application layer - configuration loading and orchestration."""

from .services import RoomLibrary

__all__ = [
    "RoomLibrary",
]
