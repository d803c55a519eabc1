"""
Tests for SqliteDatabase and SqliteCategoryRepository.

Test Pattern: AAA (Arrange-Act-Assert)
- Arrange: Set up test data and preconditions
- Act: Execute the operation being tested
- Assert: Verify the expected outcomes
"""
import pytest
from uuid import uuid4

from app.domain.entities import Category
from app.domain.errors import ConflictError, StoreError
from app.infrastructure.db.sqlite_database import SqliteDatabase
from app.infrastructure.db.sqlite_category_repository import SqliteCategoryRepository


# ============================================================================
# FIXTURES
# ============================================================================

@pytest.fixture
def database(tmp_path):
    """
    Create a database handle on a temporary file for each test.

    Uses pytest's tmp_path fixture to ensure isolation between tests.
    """
    return SqliteDatabase(tmp_path / "test_catalog.db")


@pytest.fixture
def repo(database):
    return SqliteCategoryRepository(database)


# ============================================================================
# DATABASE HANDLE TESTS
# ============================================================================

class TestSqliteDatabase:
    """Tests for the shared database handle."""

    def test_creates_parent_directories(self, tmp_path):
        db_path = tmp_path / "nested" / "dir" / "catalog.db"

        SqliteDatabase(db_path)

        assert db_path.exists()

    def test_schema_init_is_idempotent(self, database):
        """Opening a second handle on the same file keeps existing data."""
        repo = SqliteCategoryRepository(database)
        repo.save(Category.create_new("Kept"))

        reopened = SqliteCategoryRepository(SqliteDatabase(database.path))

        assert reopened.count() == 1

    def test_closed_handle_raises_store_error(self, database, repo):
        # Act
        database.close()

        # Assert
        assert database.closed is True
        with pytest.raises(StoreError, match="closed"):
            repo.count()

    def test_sql_errors_become_store_errors(self, database):
        with pytest.raises(StoreError):
            with database.connect() as conn:
                conn.execute("SELECT * FROM no_such_table")


# ============================================================================
# CATEGORY REPOSITORY TESTS
# ============================================================================

class TestSaveCategory:

    def test_save_persists_all_fields(self, repo):
        # Arrange
        category = Category.create_new("Test Category")

        # Act
        repo.save(category)
        retrieved = repo.get_by_id(category.id)

        # Assert
        assert retrieved is not None
        assert retrieved.id == category.id
        assert retrieved.name == category.name
        assert retrieved.created_at == category.created_at

    def test_duplicate_name_raises_conflict(self, repo):
        """The UNIQUE constraint on name rejects a second category."""
        repo.save(Category.create_new("Existing Category"))

        with pytest.raises(ConflictError):
            repo.save(Category.create_new("Existing Category"))

        assert repo.count() == 1


class TestLookups:

    def test_get_by_name_exact_match(self, repo):
        category = Category.create_new("Test Category")
        repo.save(category)

        assert repo.get_by_name("Test Category") == category
        assert repo.get_by_name("test category") is None
        assert repo.get_by_name("Test") is None

    def test_get_by_names_returns_found_subset(self, repo):
        # Arrange
        first = Category.create_new("Category1")
        second = Category.create_new("Category2")
        repo.save(first)
        repo.save(second)

        # Act
        result = repo.get_by_names(["Category2", "Missing", "Category1"])

        # Assert: insertion order, unknown names ignored
        assert result == [first, second]

    def test_get_by_names_empty_input(self, repo):
        assert repo.get_by_names([]) == []

    def test_get_by_id_not_found(self, repo):
        assert repo.get_by_id(uuid4()) is None


class TestGetAllAndDelete:

    def test_get_all_in_insertion_order(self, repo):
        names = ["Zeta", "Alpha", "Mid"]
        for name in names:
            repo.save(Category.create_new(name))

        assert [c.name for c in repo.get_all()] == names

    def test_delete_existing_returns_true(self, repo):
        category = Category.create_new("Gone")
        repo.save(category)

        assert repo.delete(category.id) is True
        assert repo.get_by_id(category.id) is None

    def test_delete_nonexistent_returns_false(self, repo):
        assert repo.delete(uuid4()) is False

    def test_delete_all(self, repo):
        repo.save(Category.create_new("A"))
        repo.save(Category.create_new("B"))

        assert repo.delete_all() == 2
        assert repo.count() == 0
