"""
Domain service for adding and querying books.

The service depends only on repository ports and the category resolver;
it does not know which storage engine sits behind them.
"""

import logging
from typing import List

from app.domain.entities import Book
from app.domain.ports import BookCatalogRepository
from app.domain.value_objects import BudgetQuery, NewBook
from .category_resolver import CategoryResolver

logger = logging.getLogger(__name__)


class BookService:
    """
    Orchestrates the book use cases:

    1. Add a book to a category given by name
    2. List the books of one category
    3. Suggest books at or under a budget across several categories
    """

    def __init__(
        self,
        book_repo: BookCatalogRepository,
        resolver: CategoryResolver,
    ) -> None:
        """
        Initialize the book service with required dependencies.

        Args:
            book_repo: Repository for persisting and querying books
            resolver: Resolver turning category names into categories
        """
        self._book_repo = book_repo
        self._resolver = resolver

    def add_book(self, new_book: NewBook) -> Book:
        """
        Persist a validated book under the category named in the payload.

        Raises:
            NotFoundError: If the category name does not exist
        """
        book = self._book_repo.add_to_category(new_book)
        logger.info(
            "Added book '%s' (%s) to category '%s'",
            book.title,
            book.id,
            new_book.category_name,
        )
        return book

    def list_by_category(self, name: str) -> List[Book]:
        """
        Return every book in the named category, with the category expanded.

        Raises:
            NotFoundError: If the category name does not exist
        """
        category = self._resolver.resolve_one(name)
        books = self._book_repo.find_by_category(category.id)
        logger.debug("Found %d books in category '%s'", len(books), name)
        return books

    def suggest_by_budget(self, query: BudgetQuery) -> List[Book]:
        """
        Return books priced at or under the budget in any of the categories.

        Unknown category names are ignored as long as at least one matches.
        Results come back in store order; no sorting is applied.

        Raises:
            NotFoundError: If none of the category names exist
        """
        categories = self._resolver.resolve_many(query.category_names)
        books = self._book_repo.find_within_budget(
            [category.id for category in categories],
            query.max_price,
        )
        logger.debug(
            "Suggested %d books under %.2f across %d categories",
            len(books),
            query.max_price,
            len(categories),
        )
        return books
