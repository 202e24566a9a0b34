"""
SQLite database integration.

This module provides helpers for resolving the database path
(``get_database_path``), opening a connection (``get_connection``),
running statements inside a short transaction (``get_cursor``) and
creating the schema on application start (``init_db``).  SQLite is
used as a lightweight embedded database; to switch to another DBMS
you would replace the connection logic and adapt the SQL.

Any ``sqlite3.Error`` raised while a cursor is open is re‑raised as
``StorageUnavailableError`` so that callers never depend on the
driver's exception hierarchy.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from .config import settings
from .exceptions import StorageUnavailableError

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS users (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    username TEXT NOT NULL,
    email TEXT NOT NULL,
    quote TEXT
);
"""


def get_database_path(database_url: Optional[str] = None) -> str:
    """Compute the path to the SQLite database file.

    If the configured URL is an absolute path it is used directly.
    Otherwise it is resolved relative to the project root.  Use the
    ``memory`` storage backend rather than SQLite's ``:memory:`` name:
    every operation opens its own connection.
    """
    db_url = database_url or settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # user_quotes_api/
    return str((base_dir / db_url).resolve())


def get_connection(db_path: str) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be accessed by
    name.  A busy timeout lets concurrent writers wait for the database
    lock instead of failing immediately.
    """
    try:
        conn = sqlite3.connect(db_path, timeout=10)
    except sqlite3.Error as exc:
        logger.error("Cannot open database %s: %s", db_path, exc)
        raise StorageUnavailableError(f"Cannot open database: {exc}") from exc
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor(db_path: str) -> Iterator[sqlite3.Cursor]:
    """Yield a cursor, commit on success and close the connection on exit."""
    conn = get_connection(db_path)
    try:
        yield conn.cursor()
        conn.commit()
    except sqlite3.Error as exc:
        conn.rollback()
        logger.error("Database operation failed on %s: %s", db_path, exc)
        raise StorageUnavailableError(f"Database operation failed: {exc}") from exc
    finally:
        conn.close()


def init_db(db_path: str) -> None:
    """Create the ``users`` table if it does not exist yet."""
    with get_cursor(db_path) as cursor:
        cursor.executescript(SCHEMA)
    logger.info("Database schema ready at %s", db_path)
