"""
Resolution of human-readable category names to stored categories.
"""

import logging
from typing import Iterable, List

from app.domain.entities import Category
from app.domain.errors import NotFoundError
from app.domain.ports import CategoryRepository

logger = logging.getLogger(__name__)

CATEGORY_NOT_FOUND = "Category not found"
CATEGORIES_NOT_FOUND = "Categories not found"


class CategoryResolver:
    """
    Looks up one or many categories by name.

    Used by the book service before any query that is scoped to categories.
    """

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def resolve_one(self, name: str) -> Category:
        """
        Resolve a single category by exact name.

        Raises:
            NotFoundError: If no category has that name
        """
        category = self._category_repo.get_by_name(name)
        if category is None:
            raise NotFoundError(CATEGORY_NOT_FOUND)
        return category

    def resolve_many(self, names: Iterable[str]) -> List[Category]:
        """
        Resolve every category whose name is in `names`.

        Resolution is lenient: names with no stored category are dropped and
        only the found subset is returned.

        Raises:
            NotFoundError: If none of the names match
        """
        wanted = list(dict.fromkeys(names))
        categories = self._category_repo.get_by_names(wanted)
        if not categories:
            raise NotFoundError(CATEGORIES_NOT_FOUND)

        found = {category.name for category in categories}
        missing = [name for name in wanted if name not in found]
        if missing:
            logger.info("Ignoring unknown categories: %s", ", ".join(missing))

        return categories
