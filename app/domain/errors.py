"""
Domain exceptions for the catalog.

Services and repositories raise these; the API layer maps each one to an
HTTP status code and a response envelope. Each exception also derives from
the closest built-in so callers that only know about ValueError/RuntimeError
keep working.
"""


class CatalogError(Exception):
    """Base class for every error raised by the catalog domain."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(CatalogError, ValueError):
    """Client omitted or malformed a required field."""

    status_code = 400


class NotFoundError(CatalogError, LookupError):
    """A referenced category does not exist."""

    status_code = 404


class ConflictError(CatalogError, ValueError):
    """A unique key (category name) already exists."""

    status_code = 409


class StoreError(CatalogError, RuntimeError):
    """Unexpected failure inside the persistence layer."""

    status_code = 500
