"""Database models module."""

from .storage import Base, FileMeta

__all__ = [
    "Base",
    "FileMeta",
]
