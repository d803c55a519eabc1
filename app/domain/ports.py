"""
Port interfaces (protocols) for the domain layer.

Ports define the contracts between the domain and infrastructure layers.
They are implemented by adapters in the infrastructure layer, allowing
the domain to remain independent of the storage engine.
"""

from typing import Protocol, List, Optional, Iterable
from uuid import UUID

from .entities import Book, Category
from .value_objects import NewBook


class CategoryRepository(Protocol):
    """
    Port for persisting and looking up categories.

    Implementations must enforce uniqueness of `name`.
    """

    def save(self, category: Category) -> None:
        """
        Insert a new category.

        Raises:
            ConflictError: If a category with the same name already exists
            StoreError: If a database error occurs
        """
        ...

    def get_by_name(self, name: str) -> Optional[Category]:
        """
        Retrieve a category by exact name match.

        Returns:
            The Category if found, None otherwise
        """
        ...

    def get_by_names(self, names: Iterable[str]) -> List[Category]:
        """
        Retrieve every category whose name is in `names`.

        Names without a matching category are ignored.

        Returns:
            Matching categories in insertion order (possibly empty)
        """
        ...

    def get_by_id(self, category_id: UUID) -> Optional[Category]:
        """Retrieve a category by its identifier."""
        ...

    def get_all(self) -> List[Category]:
        """Retrieve all categories in insertion order."""
        ...

    def count(self) -> int:
        """Get the total number of categories."""
        ...

    def delete(self, category_id: UUID) -> bool:
        """
        Delete a category. Books referencing it are left untouched.

        Returns:
            True if the category was deleted, False if not found
        """
        ...

    def delete_all(self) -> int:
        """Delete every category. Returns the number of rows removed."""
        ...


class BookCatalogRepository(Protocol):
    """
    Port for persisting and querying books.

    Query methods return books with their `category` expanded.
    """

    def add_to_category(self, new_book: NewBook) -> Book:
        """
        Resolve `new_book.category_name` and insert the book in one step.

        The lookup and the insert happen in the same store transaction, so
        the stored book always references a category that existed when it
        was written.

        Returns:
            The stored Book (with `category` left unexpanded)

        Raises:
            NotFoundError: If no category has that name
            StoreError: If a database error occurs
        """
        ...

    def find_by_category(self, category_id: UUID) -> List[Book]:
        """
        Retrieve every book in a category, in insertion order.
        """
        ...

    def find_within_budget(
        self,
        category_ids: Iterable[UUID],
        max_price: float,
    ) -> List[Book]:
        """
        Retrieve every book whose category is in `category_ids` and whose
        price is less than or equal to `max_price`, in insertion order.
        """
        ...

    def get_by_id(self, book_id: UUID) -> Optional[Book]:
        """Retrieve a book by its identifier."""
        ...

    def count(self) -> int:
        """Get the total number of books."""
        ...

    def delete(self, book_id: UUID) -> bool:
        """
        Delete a book.

        Returns:
            True if the book was deleted, False if not found
        """
        ...

    def delete_all(self) -> int:
        """Delete every book. Returns the number of rows removed."""
        ...
