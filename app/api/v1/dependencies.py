"""
FastAPI dependencies for dependency injection.

This module provides singleton instances of the database handle,
repositories and services for use with FastAPI's Depends() system.

Note: We use module-level singletons instead of @lru_cache with Depends()
parameters, which is an antipattern that can cause unexpected behavior.
"""

import os
from pathlib import Path
from typing import Optional

from app.domain.ports import BookCatalogRepository, CategoryRepository
from app.domain.services import BookService, CategoryResolver, CategoryService
from app.infrastructure.db.sqlite_database import SqliteDatabase
from app.infrastructure.db.sqlite_book_catalog_repository import SqliteBookCatalogRepository
from app.infrastructure.db.sqlite_category_repository import SqliteCategoryRepository

# Configuration from environment
DB_PATH = Path(os.getenv("CATALOG_DB_PATH", "data/catalog.db"))

# Module-level singletons (initialized lazily)
_database: Optional[SqliteDatabase] = None
_category_repository: Optional[CategoryRepository] = None
_book_repository: Optional[BookCatalogRepository] = None
_category_service: Optional[CategoryService] = None
_book_service: Optional[BookService] = None


def get_database() -> SqliteDatabase:
    """Provide the process-wide database handle, creating the schema on first use."""
    global _database
    if _database is None:
        _database = SqliteDatabase(DB_PATH)
    return _database


def get_category_repository() -> CategoryRepository:
    """Provide a singleton instance of the category repository."""
    global _category_repository
    if _category_repository is None:
        _category_repository = SqliteCategoryRepository(get_database())
    return _category_repository


def get_book_repository() -> BookCatalogRepository:
    """Provide a singleton instance of the book repository."""
    global _book_repository
    if _book_repository is None:
        _book_repository = SqliteBookCatalogRepository(get_database())
    return _book_repository


def get_category_service() -> CategoryService:
    """Provide the Category Service wired to the category repository."""
    global _category_service
    if _category_service is None:
        _category_service = CategoryService(get_category_repository())
    return _category_service


def get_book_service() -> BookService:
    """Provide the Book Service with all dependencies wired."""
    global _book_service
    if _book_service is None:
        _book_service = BookService(
            book_repo=get_book_repository(),
            resolver=CategoryResolver(get_category_repository()),
        )
    return _book_service


def reset_dependencies() -> None:
    """
    Close the database handle and reset all singletons.

    Called on application shutdown, and by tests to start from a clean state.
    """
    global _database, _category_repository, _book_repository
    global _category_service, _book_service

    if _database is not None:
        _database.close()

    _database = None
    _category_repository = None
    _book_repository = None
    _category_service = None
    _book_service = None
