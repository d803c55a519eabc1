"""
SQLite implementation of the BookCatalogRepository port.

This adapter persists Book entities to a SQLite database, handling
serialization/deserialization and the category join used by the query
operations.
"""

import sqlite3
from datetime import date, datetime
from typing import Iterable, List, Optional
from uuid import UUID

from app.domain.entities import Book, Category
from app.domain.errors import NotFoundError
from app.domain.ports import BookCatalogRepository
from app.domain.value_objects import NewBook
from .sqlite_database import SqliteDatabase

CATEGORY_NOT_FOUND = "Category not found"

# Books joined with their category. LEFT JOIN keeps books whose category
# was deleted out of band; they come back with category=None.
_SELECT_WITH_CATEGORY = """
    SELECT
        b.id, b.title, b.author, b.description, b.price, b.published_date,
        b.category_id, b.created_at, b.updated_at,
        c.name AS category_name,
        c.created_at AS category_created_at,
        c.updated_at AS category_updated_at
    FROM books b
    LEFT JOIN categories c ON c.id = b.category_id
"""


class SqliteBookCatalogRepository(BookCatalogRepository):
    """
    Books are returned in insertion (rowid) order; no other ordering is applied.
    """

    def __init__(self, database: SqliteDatabase) -> None:
        """
        Initialize the repository with a shared database handle
        """
        self._db = database

    def _book_to_row(self, book: Book) -> dict:
        """Convert a Book entity to a database row dict."""
        return {
            "id": str(book.id),
            "title": book.title,
            "author": book.author,
            "description": book.description,
            "price": book.price,
            "published_date": book.published_date.isoformat(),
            "category_id": str(book.category_id),
            "created_at": book.created_at.isoformat(),
            "updated_at": book.updated_at.isoformat(),
        }

    def _row_to_book(self, row: sqlite3.Row) -> Book:
        """Convert a database row (optionally joined with categories) to a Book."""
        category = None
        if "category_name" in row.keys() and row["category_name"] is not None:
            category = Category(
                id=UUID(row["category_id"]),
                name=row["category_name"],
                created_at=datetime.fromisoformat(row["category_created_at"]),
                updated_at=datetime.fromisoformat(row["category_updated_at"]),
            )

        return Book(
            id=UUID(row["id"]),
            title=row["title"],
            author=row["author"],
            description=row["description"],
            price=row["price"],
            published_date=date.fromisoformat(row["published_date"]),
            category_id=UUID(row["category_id"]),
            category=category,
            created_at=datetime.fromisoformat(row["created_at"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
        )

    def add_to_category(self, new_book: NewBook) -> Book:
        """Resolve the category name and insert the book in one transaction."""
        with self._db.connect() as conn:
            # Lock the database before the lookup so the category cannot
            # disappear between the SELECT and the INSERT.
            conn.execute("BEGIN IMMEDIATE")
            found = conn.execute(
                "SELECT id FROM categories WHERE name = ?",
                (new_book.category_name,),
            ).fetchone()

            if found is None:
                raise NotFoundError(CATEGORY_NOT_FOUND)

            book = Book.create_new(
                title=new_book.title,
                author=new_book.author,
                price=new_book.price,
                published_date=new_book.published_date,
                category_id=UUID(found["id"]),
                description=new_book.description,
            )
            conn.execute("""
                INSERT INTO books
                (id, title, author, description, price, published_date,
                 category_id, created_at, updated_at)
                VALUES
                (:id, :title, :author, :description, :price, :published_date,
                 :category_id, :created_at, :updated_at)
            """, self._book_to_row(book))

        return book

    def find_by_category(self, category_id: UUID) -> List[Book]:
        """Retrieve every book in a category, category expanded."""
        with self._db.connect() as conn:
            rows = conn.execute(
                _SELECT_WITH_CATEGORY + " WHERE b.category_id = ? ORDER BY b.rowid",
                (str(category_id),),
            ).fetchall()

        return [self._row_to_book(row) for row in rows]

    def find_within_budget(
        self,
        category_ids: Iterable[UUID],
        max_price: float,
    ) -> List[Book]:
        """Retrieve books in any of the categories priced at most `max_price`."""
        ids = [str(category_id) for category_id in category_ids]
        if not ids:
            return []

        placeholders = ", ".join("?" * len(ids))
        with self._db.connect() as conn:
            rows = conn.execute(
                _SELECT_WITH_CATEGORY
                + f" WHERE b.category_id IN ({placeholders}) AND b.price <= ?"
                + " ORDER BY b.rowid",
                [*ids, max_price],
            ).fetchall()

        return [self._row_to_book(row) for row in rows]

    def get_by_id(self, book_id: UUID) -> Optional[Book]:
        """Retrieve a book by its internal UUID, category expanded."""
        with self._db.connect() as conn:
            row = conn.execute(
                _SELECT_WITH_CATEGORY + " WHERE b.id = ?",
                (str(book_id),),
            ).fetchone()

        if row is None:
            return None
        return self._row_to_book(row)

    def count(self) -> int:
        """Get the total number of books in the catalog."""
        with self._db.connect() as conn:
            result = conn.execute("SELECT COUNT(*) AS cnt FROM books").fetchone()
        return result["cnt"]

    def delete(self, book_id: UUID) -> bool:
        """Delete a book from the catalog. Returns True if deleted."""
        with self._db.connect() as conn:
            cursor = conn.execute(
                "DELETE FROM books WHERE id = ?",
                (str(book_id),),
            )
            return cursor.rowcount > 0

    def delete_all(self) -> int:
        with self._db.connect() as conn:
            cursor = conn.execute("DELETE FROM books")
            return cursor.rowcount
