"""
Value objects for the domain layer.

Value objects are immutable objects that represent descriptive aspects
of the domain with no conceptual identity. Here they carry validated
request input into the domain services.
"""

import math
from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

from .errors import ValidationError

BOOK_FIELDS_REQUIRED = "Title, author, price, category and publishedDate are required"
BUDGET_FIELDS_REQUIRED = "Budget and categories are required"
BUDGET_FORMAT_INVALID = "Invalid budget or categories format"
PRICE_NEGATIVE = "Price must be a non-negative number"


def _is_missing(value: object) -> bool:
    """A value is missing when absent or a blank string. Zero is present."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


@dataclass(frozen=True)
class NewBook:
    """
    A validated book-creation payload.

    `category_name` is the human-readable name sent by the client; the
    repository resolves it to an identifier when the book is inserted.
    """

    title: str
    author: str
    price: float
    published_date: date
    category_name: str
    description: Optional[str] = None

    def __post_init__(self) -> None:
        if self.price < 0 or not math.isfinite(self.price):
            raise ValidationError(PRICE_NEGATIVE)

    @classmethod
    def parse(
        cls,
        *,
        title: Optional[str],
        author: Optional[str],
        price: Optional[float],
        published_date: Optional[date],
        category: Optional[str],
        description: Optional[str] = None,
    ) -> "NewBook":
        """
        Build a NewBook from raw request fields.

        Presence is checked, not truthiness, so a price of 0 is accepted.

        Raises:
            ValidationError: If a required field is missing or price is negative
        """
        required = (title, author, price, published_date, category)
        if any(_is_missing(value) for value in required):
            raise ValidationError(BOOK_FIELDS_REQUIRED)

        return cls(
            title=title,
            author=author,
            price=float(price),
            published_date=published_date,
            category_name=category,
            description=description,
        )


@dataclass(frozen=True)
class BudgetQuery:
    """
    Input of the budget suggestion: a price ceiling and a set of category names.
    """

    max_price: float
    """Inclusive upper bound on book price"""

    category_names: Tuple[str, ...]
    """Distinct category names, in the order the client sent them"""

    def __post_init__(self) -> None:
        if not self.category_names or not math.isfinite(self.max_price):
            raise ValidationError(BUDGET_FORMAT_INVALID)

    @classmethod
    def parse(cls, budget: Optional[str], categories: Optional[str]) -> "BudgetQuery":
        """
        Parse the raw `budget` and comma-separated `categories` query strings.

        Raises:
            ValidationError: If either is missing, the budget is not a number,
                or no category name remains after splitting
        """
        if _is_missing(budget) or _is_missing(categories):
            raise ValidationError(BUDGET_FIELDS_REQUIRED)

        try:
            max_price = float(budget)
        except ValueError:
            raise ValidationError(BUDGET_FORMAT_INVALID) from None

        names = []
        for raw in categories.split(","):
            name = raw.strip()
            if name and name not in names:
                names.append(name)

        return cls(max_price=max_price, category_names=tuple(names))
