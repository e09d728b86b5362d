"""API schemas for the Catalog API.

Pydantic models for request/response validation and serialization.
JSON field names are camelCase; Python attributes stay snake_case.
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

# Prices travel as JSON numbers, not strings
Price = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

# Identifiers and counts are 32-bit in the store.
MAX_INT = 2**31 - 1


class CamelModel(BaseModel):
    """Base model exposing camelCase field names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    message: str = Field(..., description="Error message")


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


# ============================================================================
# Category Schemas
# ============================================================================


class CategoryCreateRequest(CamelModel):
    """Request to create a category."""

    name: str = Field(..., min_length=1, max_length=200, description="Category name")
    description: str = Field(
        ..., min_length=1, max_length=1000, description="Category description"
    )


class CategoryResponse(CamelModel):
    """Category information."""

    id: int = Field(..., description="Category identifier")
    name: str = Field(..., description="Category name")
    description: str = Field(..., description="Category description")


# ============================================================================
# Product Schemas
# ============================================================================


class ProductWriteRequest(CamelModel):
    """Fields supplied when creating or replacing a product."""

    name: str = Field(..., min_length=1, max_length=200, description="Product name")
    description: str = Field(
        default="", max_length=1000, description="Product description"
    )
    price: Decimal = Field(
        ..., ge=0, max_digits=18, decimal_places=2, description="Unit price"
    )
    category_id: int = Field(..., ge=1, le=MAX_INT, description="Owning category identifier")
    stock_quantity: int = Field(..., ge=0, le=MAX_INT, description="Available quantity")


class ProductCreateRequest(ProductWriteRequest):
    """Request to create a product."""


class ProductUpdateRequest(ProductWriteRequest):
    """Request to replace a product's mutable fields."""


class ProductResponse(CamelModel):
    """Product view with its category name."""

    id: int = Field(..., description="Product identifier")
    name: str = Field(..., description="Product name")
    description: str = Field(..., description="Product description")
    price: Price = Field(..., description="Unit price")
    category_id: int = Field(..., description="Owning category identifier")
    category_name: str | None = Field(default=None, description="Owning category name")
    stock_quantity: int = Field(..., description="Available quantity")
    created_date: datetime = Field(..., description="When the product was created")


class ProductPageResponse(CamelModel):
    """One page of product search results."""

    items: list[ProductResponse] = Field(..., description="Products on this page")
    total_count: int = Field(..., description="Matches across all pages")
    page_number: int = Field(..., description="Current page number")
    page_size: int = Field(..., description="Items per page")
    total_pages: int = Field(..., description="Number of pages")
