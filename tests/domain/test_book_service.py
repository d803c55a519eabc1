"""
Tests for BookService.

This test suite validates the book use cases orchestration:
- Delegating the resolve-then-insert step to the repository
- Category-scoped listing
- Budget suggestions across several categories
"""

import pytest
from datetime import date
from unittest.mock import Mock

from app.domain.entities import Book, Category
from app.domain.errors import NotFoundError
from app.domain.services import BookService, CategoryResolver
from app.domain.value_objects import BudgetQuery, NewBook


@pytest.fixture
def mock_book_repo():
    """Mock BookCatalogRepository."""
    return Mock()


@pytest.fixture
def mock_category_repo():
    """Mock CategoryRepository."""
    return Mock()


@pytest.fixture
def book_service(mock_book_repo, mock_category_repo):
    """BookService with mocked dependencies."""
    return BookService(
        book_repo=mock_book_repo,
        resolver=CategoryResolver(mock_category_repo),
    )


@pytest.fixture
def fiction():
    return Category.create_new("Fiction")


@pytest.fixture
def sample_book(fiction):
    return Book.create_new(
        title="Test Book",
        author="Test Author",
        price=15,
        published_date=date(2023, 1, 1),
        category_id=fiction.id,
        category=fiction,
    )


class TestAddBook:

    def test_delegates_to_repository(self, book_service, mock_book_repo, sample_book):
        new_book = NewBook.parse(
            title="Test Book",
            author="Test Author",
            price=15,
            published_date=date(2023, 1, 1),
            category="Fiction",
        )
        mock_book_repo.add_to_category.return_value = sample_book

        result = book_service.add_book(new_book)

        assert result is sample_book
        mock_book_repo.add_to_category.assert_called_once_with(new_book)

    def test_unknown_category_propagates(self, book_service, mock_book_repo):
        mock_book_repo.add_to_category.side_effect = NotFoundError("Category not found")
        new_book = NewBook.parse(
            title="Test Book",
            author="Test Author",
            price=15,
            published_date=date(2023, 1, 1),
            category="Nonexistent Category",
        )

        with pytest.raises(NotFoundError, match="Category not found"):
            book_service.add_book(new_book)


class TestListByCategory:

    def test_queries_by_resolved_id(
        self, book_service, mock_book_repo, mock_category_repo, fiction, sample_book
    ):
        mock_category_repo.get_by_name.return_value = fiction
        mock_book_repo.find_by_category.return_value = [sample_book]

        books = book_service.list_by_category("Fiction")

        assert books == [sample_book]
        mock_book_repo.find_by_category.assert_called_once_with(fiction.id)

    def test_unknown_category_skips_book_query(
        self, book_service, mock_book_repo, mock_category_repo
    ):
        mock_category_repo.get_by_name.return_value = None

        with pytest.raises(NotFoundError, match="Category not found"):
            book_service.list_by_category("Nonexistent Category")

        mock_book_repo.find_by_category.assert_not_called()


class TestSuggestByBudget:

    def test_queries_resolved_ids_with_budget(
        self, book_service, mock_book_repo, mock_category_repo, fiction, sample_book
    ):
        horror = Category.create_new("Horror")
        mock_category_repo.get_by_names.return_value = [fiction, horror]
        mock_book_repo.find_within_budget.return_value = [sample_book]

        books = book_service.suggest_by_budget(BudgetQuery.parse("20", "Fiction,Horror"))

        assert books == [sample_book]
        mock_book_repo.find_within_budget.assert_called_once_with(
            [fiction.id, horror.id], 20.0
        )

    def test_no_matching_categories(self, book_service, mock_book_repo, mock_category_repo):
        mock_category_repo.get_by_names.return_value = []

        with pytest.raises(NotFoundError, match="Categories not found"):
            book_service.suggest_by_budget(BudgetQuery.parse("20", "NonexistentCategory"))

        mock_book_repo.find_within_budget.assert_not_called()

    def test_empty_result_is_not_an_error(
        self, book_service, mock_book_repo, mock_category_repo, fiction
    ):
        mock_category_repo.get_by_names.return_value = [fiction]
        mock_book_repo.find_within_budget.return_value = []

        assert book_service.suggest_by_budget(BudgetQuery.parse("5", "Fiction")) == []
