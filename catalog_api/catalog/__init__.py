"""Product Catalog.

Provides product and category storage, soft deletion, and the
filter/sort/paginate search engine over active products.
"""

from catalog_api.catalog.filters import ProductFilter, build_product_predicate
from catalog_api.catalog.models import Category, Product
from catalog_api.catalog.pagination import PaginatedResult, PaginationParams, total_pages
from catalog_api.catalog.repository import CategoryRepository, ProductChanges, ProductRepository
from catalog_api.catalog.service import CatalogService
from catalog_api.catalog.sorting import ProductSort, SortKey, SortOrder

__all__ = [
    # Models
    "Category",
    "Product",
    # Filters
    "ProductFilter",
    "build_product_predicate",
    # Sorting
    "ProductSort",
    "SortKey",
    "SortOrder",
    # Pagination
    "PaginatedResult",
    "PaginationParams",
    "total_pages",
    # Repository
    "CategoryRepository",
    "ProductChanges",
    "ProductRepository",
    # Service
    "CatalogService",
]
