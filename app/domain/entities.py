"""
Domain entities for the bookstore catalog.

Entities are objects with a unique identity that runs through time and
different representations. They are the core building blocks of the domain.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, UTC
from typing import Optional
from uuid import UUID, uuid4


@dataclass
class Category:
    """
    A named grouping that books reference by identifier.

    Categories are created once and never updated by the API.
    """

    id: UUID
    """Unique identifier assigned on creation"""

    name: str
    """Human-readable, unique category name"""

    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    """When this category was created"""

    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    """When this category was last updated"""

    def __post_init__(self) -> None:
        """Validate category data."""
        if not self.name or not self.name.strip():
            raise ValueError("Category name cannot be empty")

    def __eq__(self, other: object) -> bool:
        """Two categories are equal if they have the same ID."""
        if not isinstance(other, Category):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    @staticmethod
    def create_new(name: str) -> "Category":
        """Factory method to create a new category with auto-generated ID."""
        return Category(id=uuid4(), name=name)


@dataclass
class Book:
    """
    Represents a book in the catalog.

    A book always references exactly one category through `category_id`.
    Query paths fill `category` with the expanded Category record; the write
    path leaves it as None.
    """

    id: UUID
    """Unique identifier for this book in our system"""

    title: str
    """Book title"""

    author: str
    """Author name"""

    price: float
    """Price, used as the budget ceiling in suggestions"""

    published_date: date
    """Publication date"""

    category_id: UUID
    """Identifier of the category this book belongs to"""

    description: Optional[str] = None
    """Book description/summary"""

    category: Optional[Category] = None
    """Expanded category record (only set by query operations)"""

    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    """When this book was added to our catalog"""

    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    """When this book was last updated"""

    def __post_init__(self) -> None:
        """Validate book data."""
        if not self.title or not self.title.strip():
            raise ValueError("Book title cannot be empty")

        if not self.author or not self.author.strip():
            raise ValueError("Book author cannot be empty")

        if self.price < 0:
            raise ValueError(f"price must be >= 0, got {self.price}")

    def __eq__(self, other: object) -> bool:
        """Two books are equal if they have the same ID."""
        if not isinstance(other, Book):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on book ID."""
        return hash(self.id)

    def is_within_budget(self, max_price: float) -> bool:
        """Check whether the book costs at most `max_price` (inclusive)."""
        return self.price <= max_price

    @staticmethod
    def create_new(
        title: str,
        author: str,
        price: float,
        published_date: date,
        category_id: UUID,
        **kwargs,
    ) -> "Book":
        """
        Factory method to create a new book with auto-generated ID.

        Args:
            title: Book title
            author: Author name
            price: Book price
            published_date: Publication date
            category_id: Identifier of an existing category
            **kwargs: Additional book attributes

        Returns:
            A new Book instance with generated UUID
        """
        return Book(
            id=uuid4(),
            title=title,
            author=author,
            price=price,
            published_date=published_date,
            category_id=category_id,
            **kwargs,
        )
