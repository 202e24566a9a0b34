"""
Repository layer.

``Repository`` defines the storage contract; ``InMemoryRepository``
and ``SqliteUserRepository`` implement it.  ``build_repository``
selects a backend from the application settings.
"""

from ..core.config import Settings
from ..core.db import get_database_path
from ..entities.user import UserEntity
from .base import Predicate, Repository, select_page
from .memory import InMemoryRepository
from .user_repository import SqliteUserRepository

__all__ = [
    "Predicate",
    "Repository",
    "InMemoryRepository",
    "SqliteUserRepository",
    "build_repository",
    "select_page",
]


def build_repository(config: Settings) -> Repository[UserEntity, int]:
    """Create the user repository configured by ``STORAGE_BACKEND``."""
    if config.storage_backend == "memory":
        return InMemoryRepository()
    if config.storage_backend == "sqlite":
        return SqliteUserRepository(get_database_path(config.database_url))
    raise ValueError(f"Unknown storage backend: {config.storage_backend!r}")
