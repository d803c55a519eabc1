"""
Shared SQLite handle for the catalog repositories.

Owns the database path and the schema, and hands out short-lived
connections. Every repository operation runs on its own connection, so
the handle itself can be shared by all request threads.
"""

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from app.domain.errors import ConflictError, StoreError

logger = logging.getLogger(__name__)

SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS categories (
        id TEXT PRIMARY KEY,
        name TEXT NOT NULL UNIQUE,
        created_at TEXT NOT NULL,
        updated_at TEXT NOT NULL
    )
    """,
    # category_id is not a FOREIGN KEY: categories deleted out of band
    # leave their books in place.
    """
    CREATE TABLE IF NOT EXISTS books (
        id TEXT PRIMARY KEY,
        title TEXT NOT NULL,
        author TEXT NOT NULL,
        description TEXT,
        price REAL NOT NULL,
        published_date TEXT NOT NULL,
        category_id TEXT NOT NULL,
        created_at TEXT NOT NULL,
        updated_at TEXT NOT NULL
    )
    """,
    "CREATE INDEX IF NOT EXISTS idx_books_category_price ON books(category_id, price)",
)


class SqliteDatabase:
    """
    Process-wide access point to the catalog database file.

    `connect()` commits on success, rolls back on any exception and always
    closes the connection. SQLite errors are translated to domain errors:
    constraint violations become ConflictError, everything else StoreError.
    """

    def __init__(self, db_path: Path, timeout: float = 5.0) -> None:
        self._db_path = Path(db_path)
        self._timeout = timeout
        self._closed = False
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_schema()

    @property
    def path(self) -> Path:
        return self._db_path

    @property
    def closed(self) -> bool:
        return self._closed

    @contextmanager
    def connect(self) -> Iterator[sqlite3.Connection]:
        """Open a connection with row factory for a single unit of work."""
        if self._closed:
            raise StoreError("Database handle is closed")

        try:
            conn = sqlite3.connect(str(self._db_path), timeout=self._timeout)
        except sqlite3.Error as e:
            raise StoreError(f"Could not open database: {e}") from e

        conn.row_factory = sqlite3.Row  # access columns by name
        try:
            yield conn
            conn.commit()
        except sqlite3.IntegrityError as e:
            conn.rollback()
            raise ConflictError(f"Catalog constraint violated: {e}") from e
        except sqlite3.Error as e:
            conn.rollback()
            raise StoreError(f"Database error: {e}") from e
        except BaseException:
            conn.rollback()
            raise
        finally:
            conn.close()

    def close(self) -> None:
        """Release the handle. Later calls to connect() raise StoreError."""
        if not self._closed:
            self._closed = True
            logger.info("Closed catalog database at %s", self._db_path)

    def _init_schema(self) -> None:
        """Create the tables and indexes if they don't exist."""
        with self.connect() as conn:
            for statement in SCHEMA:
                conn.execute(statement)
        logger.debug("Catalog schema ready at %s", self._db_path)
