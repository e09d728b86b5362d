"""Product API endpoints.

Provides endpoints for reading, searching, creating, updating and
soft-deleting products. Inactive products behave as if they don't exist.
"""

from decimal import Decimal
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.api.schemas import (
    MAX_INT,
    ErrorResponse,
    ProductCreateRequest,
    ProductPageResponse,
    ProductResponse,
    ProductUpdateRequest,
)
from catalog_api.catalog.filters import ProductFilter
from catalog_api.catalog.models import Product
from catalog_api.catalog.pagination import PaginatedResult, PaginationParams
from catalog_api.catalog.repository import ProductChanges
from catalog_api.catalog.service import CatalogService
from catalog_api.catalog.sorting import ProductSort
from catalog_api.infrastructure.config import settings
from catalog_api.infrastructure.database import get_read_session, get_session

router = APIRouter(prefix="/api/products", tags=["Products"])

ProductId = Annotated[int, Path(ge=1, le=MAX_INT)]


# ============================================================================
# Dependencies
# ============================================================================


def get_read_service(
    session: Annotated[AsyncSession, Depends(get_read_session)],
) -> CatalogService:
    """Get catalog service backed by a read-only session."""
    return CatalogService(session)


def get_write_service(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> CatalogService:
    """Get catalog service backed by a session that commits on success."""
    return CatalogService(session)


# ============================================================================
# Converters
# ============================================================================


def product_to_response(product: Product) -> ProductResponse:
    """Convert Product model to response schema."""
    return ProductResponse(
        id=product.id,
        name=product.name,
        description=product.description,
        price=product.price,
        category_id=product.category_id,
        category_name=product.category_name,
        stock_quantity=product.stock_quantity,
        created_date=product.created_date,
    )


def page_to_response(page: PaginatedResult[Product]) -> ProductPageResponse:
    """Convert a search result page to response schema."""
    return ProductPageResponse(
        items=[product_to_response(p) for p in page.items],
        total_count=page.total_count,
        page_number=page.page_number,
        page_size=page.page_size,
        total_pages=page.total_pages,
    )


def product_not_found(product_id: int) -> HTTPException:
    """Build the 404 raised for missing or inactive products."""
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail={
            "error_code": "PRODUCT_NOT_FOUND",
            "message": f"Product with ID {product_id} not found or is inactive",
        },
    )


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "",
    response_model=list[ProductResponse],
    summary="List products",
    description="Get all active products with their category name.",
)
async def list_products(
    service: Annotated[CatalogService, Depends(get_read_service)],
) -> list[ProductResponse]:
    """List all active products."""
    products = await service.list_products()
    return [product_to_response(p) for p in products]


@router.get(
    "/search",
    response_model=ProductPageResponse,
    summary="Search products",
    description=(
        "Search active products with optional filters, sorting and pagination. "
        "Every search term word must appear in the name or description."
    ),
)
async def search_products(
    service: Annotated[CatalogService, Depends(get_read_service)],
    search_term: Annotated[str | None, Query(alias="searchTerm", max_length=200)] = None,
    category_id: Annotated[int | None, Query(alias="categoryId", le=MAX_INT)] = None,
    min_price: Annotated[Decimal | None, Query(alias="minPrice")] = None,
    max_price: Annotated[Decimal | None, Query(alias="maxPrice")] = None,
    in_stock: Annotated[bool | None, Query(alias="inStock")] = None,
    sort_by: Annotated[str | None, Query(alias="sortBy")] = None,
    sort_order: Annotated[str | None, Query(alias="sortOrder")] = None,
    page_number: Annotated[int, Query(alias="pageNumber", ge=1, le=MAX_INT)] = 1,
    page_size: Annotated[
        int, Query(alias="pageSize", ge=1, le=settings.max_page_size)
    ] = settings.default_page_size,
) -> ProductPageResponse:
    """Search products.

    Unknown ``sortBy`` values sort by name; any ``sortOrder`` other than
    ``desc`` sorts ascending.

    Returns:
        One page of matching products and the total match count.
    """
    page = await service.search_products(
        ProductFilter(
            search_term=search_term,
            category_id=category_id,
            min_price=min_price,
            max_price=max_price,
            in_stock=in_stock,
        ),
        ProductSort.from_request(sort_by, sort_order),
        PaginationParams(page_number=page_number, page_size=page_size),
    )
    return page_to_response(page)


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get product",
)
async def get_product(
    product_id: ProductId,
    service: Annotated[CatalogService, Depends(get_read_service)],
) -> ProductResponse:
    """Get an active product by ID.

    Raises:
        HTTPException: If the product is missing or inactive.
    """
    product = await service.get_product(product_id)

    if product is None:
        raise product_not_found(product_id)

    return product_to_response(product)


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}},
    summary="Create product",
)
async def create_product(
    request: ProductCreateRequest,
    response: Response,
    service: Annotated[CatalogService, Depends(get_write_service)],
) -> ProductResponse:
    """Create a new product."""
    product = await service.create_product(
        name=request.name,
        description=request.description,
        price=request.price,
        category_id=request.category_id,
        stock_quantity=request.stock_quantity,
    )
    response.headers["Location"] = f"{router.prefix}/{product.id}"
    return product_to_response(product)


@router.put(
    "/{product_id}",
    response_model=ProductResponse,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    summary="Update product",
)
async def update_product(
    product_id: ProductId,
    request: ProductUpdateRequest,
    service: Annotated[CatalogService, Depends(get_write_service)],
) -> ProductResponse:
    """Replace the mutable fields of an active product.

    Raises:
        HTTPException: If the product is missing or inactive.
    """
    product = await service.update_product(
        product_id,
        ProductChanges(
            name=request.name,
            description=request.description,
            price=request.price,
            category_id=request.category_id,
            stock_quantity=request.stock_quantity,
        ),
    )

    if product is None:
        raise product_not_found(product_id)

    return product_to_response(product)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": ErrorResponse}},
    summary="Delete product",
    description="Soft delete: the product is deactivated, not removed.",
)
async def delete_product(
    product_id: ProductId,
    service: Annotated[CatalogService, Depends(get_write_service)],
) -> Response:
    """Soft delete an active product.

    Raises:
        HTTPException: If the product is missing or already deleted.
    """
    if not await service.delete_product(product_id):
        raise product_not_found(product_id)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
