"""Category API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from catalog_api.api.products import get_read_service, get_write_service
from catalog_api.api.schemas import CategoryCreateRequest, CategoryResponse
from catalog_api.catalog.models import Category
from catalog_api.catalog.service import CatalogService

router = APIRouter(prefix="/api/categories", tags=["Categories"])


def category_to_response(category: Category) -> CategoryResponse:
    """Convert Category model to response schema."""
    return CategoryResponse(
        id=category.id,
        name=category.name,
        description=category.description,
    )


@router.get(
    "",
    response_model=list[CategoryResponse],
    summary="List categories",
)
async def list_categories(
    service: Annotated[CatalogService, Depends(get_read_service)],
) -> list[CategoryResponse]:
    """List all active categories."""
    categories = await service.list_categories()
    return [category_to_response(c) for c in categories]


@router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create category",
)
async def create_category(
    request: CategoryCreateRequest,
    response: Response,
    service: Annotated[CatalogService, Depends(get_write_service)],
) -> CategoryResponse:
    """Create a new category. New categories are always active."""
    category = await service.create_category(request.name, request.description)
    response.headers["Location"] = f"{router.prefix}/{category.id}"
    return category_to_response(category)
