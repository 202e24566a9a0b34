"""
SQLite backed user repository.

All queries use parameterised statements.  Each operation opens its
own connection through ``core.db.get_cursor`` and closes it before
returning; driver errors surface as ``StorageUnavailableError``.

Predicates are arbitrary Python callables and cannot be translated to
SQL, so ``find_all`` reads the whole table in id order with a single
statement and filters in memory.  ``AUTOINCREMENT`` guarantees ids
grow with insertion order and are never reused.
"""

import logging
import sqlite3
from dataclasses import replace
from typing import Callable, List, Optional

from ..core.db import get_cursor
from ..core.exceptions import InvalidArgumentError
from ..entities.user import UserEntity
from .base import Repository, select_page

logger = logging.getLogger(__name__)

# Range of SQLite's signed 64-bit INTEGER.
SQLITE_MIN_INTEGER = -(2**63)
SQLITE_MAX_INTEGER = 2**63 - 1


class SqliteUserRepository(Repository[UserEntity, int]):
    """Repository storing users in the ``users`` table of a SQLite file."""

    def __init__(self, db_path: str) -> None:
        self.db_path = db_path

    def save(self, entity: UserEntity) -> UserEntity:
        """Insert a new user row.

        The quote column is always written as ``NULL``: quotes are
        fetched at read time and never persisted.
        """
        if entity.id:
            raise InvalidArgumentError(f"User already has id {entity.id}; records cannot be re-saved")
        with get_cursor(self.db_path) as cursor:
            cursor.execute(
                "INSERT INTO users (name, username, email, quote) VALUES (?, ?, ?, NULL)",
                (entity.name, entity.username, entity.email),
            )
            user_id = cursor.lastrowid
        logger.info("Created user %s", user_id)
        return replace(entity, id=user_id, quote=None)

    def find_by_id(self, entity_id: int) -> Optional[UserEntity]:
        if not SQLITE_MIN_INTEGER <= entity_id <= SQLITE_MAX_INTEGER:
            return None
        with get_cursor(self.db_path) as cursor:
            row = cursor.execute(
                "SELECT id, name, username, email, quote FROM users WHERE id = ?",
                (entity_id,),
            ).fetchone()
        if not row:
            return None
        return self._row_to_entity(row)

    def count(self) -> int:
        with get_cursor(self.db_path) as cursor:
            row = cursor.execute("SELECT COUNT(*) AS count FROM users").fetchone()
        return row["count"]

    def find_all(self, predicate: Callable[[UserEntity], bool], page: int, size: int) -> List[UserEntity]:
        if page < 0 or size <= 0:
            return []
        with get_cursor(self.db_path) as cursor:
            rows = cursor.execute(
                "SELECT id, name, username, email, quote FROM users ORDER BY id ASC"
            ).fetchall()
        return select_page((self._row_to_entity(row) for row in rows), predicate, page, size)

    @staticmethod
    def _row_to_entity(row: sqlite3.Row) -> UserEntity:
        """Convert a database row to a ``UserEntity``."""
        return UserEntity(
            id=row["id"],
            name=row["name"],
            username=row["username"],
            email=row["email"],
            quote=row["quote"],
        )
