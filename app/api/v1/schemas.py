"""
API request and response models.

Every response body is an `ApiResponse` envelope: `{statusCode, data, message}`.
Models serialize with camelCase keys and accept either camelCase or
snake_case on input.
"""

from datetime import date, datetime
from typing import Any, Generic, Optional, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ApiResponse(CamelModel, Generic[T]):
    """
    Uniform response envelope wrapping every handler result.
    """
    status_code: int = Field(description="HTTP status code of the response")
    data: T = Field(description="Payload; an empty object on failures")
    message: str = Field(description="Human-readable outcome")


# request bodies
# All fields are optional so that missing fields reach the domain validation
# and produce the catalog's own 400 messages instead of a schema error.

class CreateCategoryRequest(CamelModel):
    """
    Request body for POST /api/category/category.
    """
    name: Optional[str] = Field(default=None, description="Unique category name")


class AddBookRequest(CamelModel):
    """
    Request body for POST /api/book/add-book.
    """
    title: Optional[str] = None
    author: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    published_date: Optional[date] = Field(default=None, description="Publication date (YYYY-MM-DD)")
    category: Optional[str] = Field(default=None, description="Name of an existing category")


# response bodies

class Category(CamelModel):
    id: UUID
    name: str
    created_at: datetime
    updated_at: datetime


class _BookFields(CamelModel):
    id: UUID = Field(description="Unique identifier for this book in our system")
    title: str
    author: str
    description: Optional[str] = None
    price: float
    published_date: date
    created_at: datetime = Field(description="When this book was added to our catalog")
    updated_at: datetime = Field(description="When this book was last updated")


class Book(_BookFields):
    """
    A book as returned by the write path: `category` is the raw identifier.
    """
    category: UUID


class BookWithCategory(_BookFields):
    """
    A book as returned by the query paths: `category` is the expanded record.

    `category` is null when the referenced category no longer exists.
    """
    category: Optional[Category] = None


class HealthStatus(BaseModel):
    status: str
    categories: int
    books: int


def error_envelope(status_code: int, message: str, data: Any = None) -> dict:
    """Serialized envelope for a failed request."""
    return ApiResponse[Any](
        status_code=status_code,
        data=data if data is not None else {},
        message=message,
    ).model_dump(mode="json", by_alias=True)
