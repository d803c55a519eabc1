"""
Domain services package.

Services orchestrate domain logic that doesn't naturally belong to a single
entity. They coordinate between entities and ports to implement use cases.

Services depend only on domain entities, value objects, and port protocols
(never on concrete implementations).
"""

from .category_resolver import CategoryResolver
from .category_service import CategoryService
from .book_service import BookService

__all__ = [
    "CategoryResolver",
    "CategoryService",
    "BookService",
]
