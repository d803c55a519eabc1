"""
Domain layer - Core business logic and entities.

This layer contains the business entities, value objects, and errors, and
defines the ports (interfaces) that the infrastructure layer must implement.

It has NO dependencies on external frameworks or databases.
"""

from .entities import Book, Category
from .errors import (
    CatalogError,
    ConflictError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from .value_objects import BudgetQuery, NewBook

__all__ = [
    # Entities
    "Book",
    "Category",
    # Value Objects
    "BudgetQuery",
    "NewBook",
    # Errors
    "CatalogError",
    "ConflictError",
    "NotFoundError",
    "StoreError",
    "ValidationError",
]
