"""Database module.

Provides async SQLAlchemy session management and the file metadata model.
"""

from .models import Base, FileMeta
from .repository import FileMetaRepository
from .session import (
    DatabaseManager,
    close_db,
    get_db_manager,
    init_db,
)

__all__ = [
    # Models
    "Base",
    "FileMeta",
    # Repository
    "FileMetaRepository",
    # Session management
    "DatabaseManager",
    "close_db",
    "get_db_manager",
    "init_db",
]
