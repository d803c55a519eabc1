"""
Domain service for category creation and listing.
"""

import logging
from typing import List, Optional

from app.domain.entities import Category
from app.domain.errors import ConflictError, ValidationError
from app.domain.ports import CategoryRepository

logger = logging.getLogger(__name__)

NAME_REQUIRED = "Name is required"
CATEGORY_EXISTS = "Category is already exists"


class CategoryService:
    """
    Creates and lists categories.

    Usage:
        service = CategoryService(category_repo=sqlite_category_repo)
        category = service.create_category("Science Fiction")
    """

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def create_category(self, name: Optional[str]) -> Category:
        """
        Create a category with a unique name.

        Args:
            name: Category name sent by the client

        Returns:
            The stored Category

        Raises:
            ValidationError: If name is missing or blank
            ConflictError: If a category with that name already exists
        """
        if name is None or not name.strip():
            raise ValidationError(NAME_REQUIRED)

        if self._category_repo.get_by_name(name) is not None:
            raise ConflictError(CATEGORY_EXISTS)

        category = Category.create_new(name)
        # Two concurrent requests can both pass the check above; the store's
        # unique constraint rejects the second insert with ConflictError.
        try:
            self._category_repo.save(category)
        except ConflictError as e:
            raise ConflictError(CATEGORY_EXISTS) from e

        logger.info("Created category '%s' (%s)", category.name, category.id)
        return category

    def list_categories(self) -> List[Category]:
        """Return all categories in insertion order."""
        return self._category_repo.get_all()
