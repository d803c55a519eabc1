"""
Converters between domain entities/value objects and API schemas.

This module centralizes all conversion logic between the domain layer
and the API layer, maintaining clean separation of concerns.
"""

from typing import List, Optional

from app.domain import entities as domain
from app.domain.value_objects import NewBook
from app.api.v1 import schemas as api


def domain_category_to_api(category: domain.Category) -> api.Category:
    """
    Convert a domain Category entity to an API Category model.
    """
    return api.Category(
        id=category.id,
        name=category.name,
        created_at=category.created_at,
        updated_at=category.updated_at,
    )


def domain_book_to_api(book: domain.Book) -> api.Book:
    """
    Convert a domain Book entity to an API Book model with the raw
    category identifier.
    """
    return api.Book(
        id=book.id,
        title=book.title,
        author=book.author,
        description=book.description,
        price=book.price,
        published_date=book.published_date,
        category=book.category_id,
        created_at=book.created_at,
        updated_at=book.updated_at,
    )


def domain_book_to_api_expanded(book: domain.Book) -> api.BookWithCategory:
    """
    Convert a domain Book entity to an API model with the category expanded.

    Args:
        book: Domain Book, as returned by a query operation

    Returns:
        API BookWithCategory model
    """
    category: Optional[api.Category] = None
    if book.category is not None:
        category = domain_category_to_api(book.category)

    return api.BookWithCategory(
        id=book.id,
        title=book.title,
        author=book.author,
        description=book.description,
        price=book.price,
        published_date=book.published_date,
        category=category,
        created_at=book.created_at,
        updated_at=book.updated_at,
    )


def domain_books_to_api_expanded(books: List[domain.Book]) -> List[api.BookWithCategory]:
    return [domain_book_to_api_expanded(book) for book in books]


def api_request_to_new_book(request: Optional[api.AddBookRequest]) -> NewBook:
    """
    Convert an AddBookRequest to a validated domain NewBook.

    A missing body is treated like a body with every field missing.

    Raises:
        ValidationError: If required fields are missing
    """
    request = request or api.AddBookRequest()
    return NewBook.parse(
        title=request.title,
        author=request.author,
        price=request.price,
        published_date=request.published_date,
        category=request.category,
        description=request.description,
    )


def envelope(status_code: int, data, message: str) -> api.ApiResponse:
    """Wrap a handler result in the response envelope."""
    return api.ApiResponse(status_code=status_code, data=data, message=message)
