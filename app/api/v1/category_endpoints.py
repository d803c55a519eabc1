"""
API endpoints for category operations.

Handles HTTP concerns and delegates to the category service. Domain errors
propagate to the exception handlers registered in app.main.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, status

from app.domain.services import CategoryService
from app.api.v1 import schemas as api
from app.api.v1.converters import domain_category_to_api, envelope
from app.api.v1.dependencies import get_category_service

router = APIRouter()


@router.post(
    "/category",
    response_model=api.ApiResponse[api.Category],
    status_code=status.HTTP_201_CREATED,
)
def create_category(
    request: Optional[api.CreateCategoryRequest] = None,
    service: CategoryService = Depends(get_category_service),
) -> api.ApiResponse:
    """
    Create a category.

    Raises:
        400: Name missing
        409: A category with this name already exists
    """
    name = request.name if request is not None else None
    category = service.create_category(name)
    return envelope(
        status.HTTP_201_CREATED,
        domain_category_to_api(category),
        "category created",
    )


@router.get("/categories", response_model=api.ApiResponse[List[api.Category]])
def list_categories(
    service: CategoryService = Depends(get_category_service),
) -> api.ApiResponse:
    """List every category in insertion order."""
    categories = service.list_categories()
    return envelope(
        status.HTTP_200_OK,
        [domain_category_to_api(c) for c in categories],
        "all categories retrieved",
    )
