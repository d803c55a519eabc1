"""
API endpoints for book operations.

This module defines the FastAPI routes for adding books, listing the books
of a category and suggesting books under a budget. It handles HTTP concerns
and delegates to the book service.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from app.domain.services import BookService
from app.domain.value_objects import BudgetQuery
from app.api.v1 import schemas as api
from app.api.v1.converters import (
    api_request_to_new_book,
    domain_book_to_api,
    domain_books_to_api_expanded,
    envelope,
)
from app.api.v1.dependencies import get_book_service

router = APIRouter()

BOOKS_RETRIEVED = "Books retrieved successfully"


@router.post(
    "/add-book",
    response_model=api.ApiResponse[api.Book],
    status_code=status.HTTP_201_CREATED,
)
def add_book(
    request: Optional[api.AddBookRequest] = None,
    service: BookService = Depends(get_book_service),
) -> api.ApiResponse:
    """
    Add a book to an existing category, given by name.

    Raises:
        400: A required field is missing
        404: Category not found
    """
    new_book = api_request_to_new_book(request)
    book = service.add_book(new_book)
    return envelope(
        status.HTTP_201_CREATED,
        domain_book_to_api(book),
        "book added successfully",
    )


@router.get(
    "/category/{name}",
    response_model=api.ApiResponse[List[api.BookWithCategory]],
)
def get_books_by_category(
    name: str,
    service: BookService = Depends(get_book_service),
) -> api.ApiResponse:
    """
    List the books of one category, each with the category expanded.

    Raises:
        404: Category not found
    """
    books = service.list_by_category(name)
    return envelope(status.HTTP_200_OK, domain_books_to_api_expanded(books), BOOKS_RETRIEVED)


@router.get(
    "/suggest",
    response_model=api.ApiResponse[List[api.BookWithCategory]],
)
def suggest_books_by_budget(
    budget: Optional[str] = Query(default=None, description="Maximum price (inclusive)"),
    categories: Optional[str] = Query(default=None, description="Comma-separated category names"),
    service: BookService = Depends(get_book_service),
) -> api.ApiResponse:
    """
    Suggest books priced at or under `budget` in any of `categories`.

    Unknown category names are ignored as long as one of them exists.

    Raises:
        400: Budget or categories missing, or budget not a number
        404: None of the categories exist
    """
    query = BudgetQuery.parse(budget, categories)
    books = service.suggest_by_budget(query)
    return envelope(status.HTTP_200_OK, domain_books_to_api_expanded(books), BOOKS_RETRIEVED)
