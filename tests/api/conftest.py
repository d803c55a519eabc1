"""
Shared fixtures for the HTTP API tests.

Each test gets a FastAPI TestClient wired, through dependency overrides, to
repositories backed by a fresh temporary SQLite database.
"""

import pytest
from fastapi.testclient import TestClient

from app.api.v1 import dependencies
from app.domain.services import BookService, CategoryResolver, CategoryService
from app.infrastructure.db.sqlite_database import SqliteDatabase
from app.infrastructure.db.sqlite_book_catalog_repository import SqliteBookCatalogRepository
from app.infrastructure.db.sqlite_category_repository import SqliteCategoryRepository
from app.main import app


@pytest.fixture
def database(tmp_path):
    db = SqliteDatabase(tmp_path / "api_catalog.db")
    yield db
    db.close()


@pytest.fixture
def category_repo(database):
    """Direct store access, bypassing the API (for arrange/cleanup steps)."""
    return SqliteCategoryRepository(database)


@pytest.fixture
def book_repo(database):
    return SqliteBookCatalogRepository(database)


@pytest.fixture
def client(category_repo, book_repo):
    category_service = CategoryService(category_repo)
    book_service = BookService(
        book_repo=book_repo,
        resolver=CategoryResolver(category_repo),
    )

    app.dependency_overrides[dependencies.get_category_repository] = lambda: category_repo
    app.dependency_overrides[dependencies.get_book_repository] = lambda: book_repo
    app.dependency_overrides[dependencies.get_category_service] = lambda: category_service
    app.dependency_overrides[dependencies.get_book_service] = lambda: book_service

    yield TestClient(app)

    app.dependency_overrides.clear()
