"""
SQLite implementation of the CategoryRepository port.
"""

import sqlite3
from datetime import datetime
from typing import Iterable, List, Optional
from uuid import UUID

from app.domain.entities import Category
from app.domain.ports import CategoryRepository
from .sqlite_database import SqliteDatabase


def row_to_category(row: sqlite3.Row) -> Category:
    """Convert a categories row to a Category entity."""
    return Category(
        id=UUID(row["id"]),
        name=row["name"],
        created_at=datetime.fromisoformat(row["created_at"]),
        updated_at=datetime.fromisoformat(row["updated_at"]),
    )


class SqliteCategoryRepository(CategoryRepository):
    """
    The UNIQUE constraint on `name` is what ultimately rejects duplicate
    categories, including ones created concurrently.
    """

    def __init__(self, database: SqliteDatabase) -> None:
        self._db = database

    def save(self, category: Category) -> None:
        """Insert a new category."""
        with self._db.connect() as conn:
            conn.execute(
                """
                INSERT INTO categories (id, name, created_at, updated_at)
                VALUES (?, ?, ?, ?)
                """,
                (
                    str(category.id),
                    category.name,
                    category.created_at.isoformat(),
                    category.updated_at.isoformat(),
                ),
            )

    def get_by_name(self, name: str) -> Optional[Category]:
        """Retrieve a category by exact name."""
        with self._db.connect() as conn:
            row = conn.execute(
                "SELECT * FROM categories WHERE name = ?",
                (name,),
            ).fetchone()

        if row is None:
            return None
        return row_to_category(row)

    def get_by_names(self, names: Iterable[str]) -> List[Category]:
        """Retrieve every category whose name is in `names`."""
        names = list(names)
        if not names:
            return []

        placeholders = ", ".join("?" * len(names))
        with self._db.connect() as conn:
            rows = conn.execute(
                f"SELECT * FROM categories WHERE name IN ({placeholders}) ORDER BY rowid",
                names,
            ).fetchall()

        return [row_to_category(row) for row in rows]

    def get_by_id(self, category_id: UUID) -> Optional[Category]:
        """Retrieve a category by its identifier."""
        with self._db.connect() as conn:
            row = conn.execute(
                "SELECT * FROM categories WHERE id = ?",
                (str(category_id),),
            ).fetchone()

        if row is None:
            return None
        return row_to_category(row)

    def get_all(self) -> List[Category]:
        """Retrieve all categories in insertion order."""
        with self._db.connect() as conn:
            rows = conn.execute("SELECT * FROM categories ORDER BY rowid").fetchall()
        return [row_to_category(row) for row in rows]

    def count(self) -> int:
        with self._db.connect() as conn:
            result = conn.execute("SELECT COUNT(*) AS cnt FROM categories").fetchone()
        return result["cnt"]

    def delete(self, category_id: UUID) -> bool:
        """Delete a category. Returns True if deleted."""
        with self._db.connect() as conn:
            cursor = conn.execute(
                "DELETE FROM categories WHERE id = ?",
                (str(category_id),),
            )
            return cursor.rowcount > 0

    def delete_all(self) -> int:
        with self._db.connect() as conn:
            cursor = conn.execute("DELETE FROM categories")
            return cursor.rowcount
