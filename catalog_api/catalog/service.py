"""Catalog service for product operations.

High-level service that combines repository operations with
business logic for catalog management.
"""

from collections.abc import Sequence
from decimal import Decimal
from typing import Any

import structlog
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.catalog.filters import ProductFilter, build_product_predicate
from catalog_api.catalog.models import Category, Product
from catalog_api.catalog.pagination import PaginatedResult, PaginationParams
from catalog_api.catalog.repository import (
    CategoryRepository,
    ProductChanges,
    ProductRepository,
)
from catalog_api.catalog.seed import CATEGORIES, PRODUCTS
from catalog_api.catalog.sorting import ProductSort

logger = structlog.get_logger()


class CatalogService:
    """Service for catalog operations.

    Provides high-level operations for the product catalog including
    searching, soft-deletion, and seeding.

    Example usage:
        async with async_session_factory() as session:
            service = CatalogService(session)

            results = await service.search_products(
                ProductFilter(search_term="wireless headphones", in_stock=True),
                ProductSort.from_request("price", "desc"),
                PaginationParams(page_number=1, page_size=10),
            )
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session
        self.products = ProductRepository(session)
        self.categories = CategoryRepository(session)

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    async def search_products(
        self,
        filters: ProductFilter,
        sort: ProductSort,
        pagination: PaginationParams,
    ) -> PaginatedResult[Product]:
        """Search active products with filters, sorting and pagination.

        The total is counted with the same predicate used to fetch the
        page, before offset/limit are applied.

        Args:
            filters: Filter parameters.
            sort: Ordering applied before slicing.
            pagination: Page to return.

        Returns:
            Paginated product results.
        """
        predicate = build_product_predicate(filters)

        total_count = await self.products.count_active(predicate)

        items: Sequence[Product] = []
        if total_count > 0:
            items = await self.products.fetch_active(
                predicate,
                sort,
                offset=pagination.offset,
                limit=pagination.limit,
            )

        result = PaginatedResult(
            items=list(items),
            total_count=total_count,
            page_number=pagination.page_number,
            page_size=pagination.page_size,
        )

        logger.info(
            "Product search completed",
            search_term=filters.search_term,
            category_id=filters.category_id,
            min_price=str(filters.min_price) if filters.min_price is not None else None,
            max_price=str(filters.max_price) if filters.max_price is not None else None,
            in_stock=filters.in_stock,
            sort_by=sort.key.value,
            sort_order=sort.order.value,
            page_number=pagination.page_number,
            page_size=pagination.page_size,
            total_count=total_count,
            returned=len(result.items),
        )

        return result

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------

    async def list_products(self) -> Sequence[Product]:
        """Get all active products."""
        return await self.products.list_active()

    async def get_product(self, product_id: int) -> Product | None:
        """Get product by ID.

        Args:
            product_id: Product ID.

        Returns:
            Product if found and active.
        """
        return await self.products.get_active_by_id(product_id)

    async def create_product(
        self,
        name: str,
        description: str,
        price: Decimal,
        category_id: int,
        stock_quantity: int,
    ) -> Product:
        """Create a product.

        Returns:
            Created product with id, creation date and category.
        """
        product = await self.products.insert(
            Product(
                name=name,
                description=description,
                price=price,
                category_id=category_id,
                stock_quantity=stock_quantity,
            )
        )
        logger.info("Product created", product_id=product.id, category_id=category_id)
        return product

    async def update_product(
        self,
        product_id: int,
        changes: ProductChanges,
    ) -> Product | None:
        """Update an active product.

        Args:
            product_id: Product ID.
            changes: Replacement values for the mutable fields.

        Returns:
            Updated product, or None if missing or inactive.
        """
        product = await self.products.update_active_by_id(product_id, changes)
        if product is None:
            logger.info("Product update skipped, not found", product_id=product_id)
        else:
            logger.info("Product updated", product_id=product_id)
        return product

    async def delete_product(self, product_id: int) -> bool:
        """Soft delete an active product.

        Args:
            product_id: Product ID.

        Returns:
            True if the product was deactivated.
        """
        deleted = await self.products.soft_delete_active_by_id(product_id)
        logger.info("Product delete", product_id=product_id, deleted=deleted)
        return deleted

    # ------------------------------------------------------------------
    # Categories
    # ------------------------------------------------------------------

    async def list_categories(self) -> Sequence[Category]:
        """Get all active categories."""
        return await self.categories.list_active()

    async def create_category(self, name: str, description: str) -> Category:
        """Create a category."""
        category = await self.categories.insert(Category(name=name, description=description))
        logger.info("Category created", category_id=category.id)
        return category

    # ------------------------------------------------------------------
    # Seeding
    # ------------------------------------------------------------------

    async def seed_catalog(self) -> dict[str, Any]:
        """Seed the demo catalog into an empty database.

        Nothing is inserted when categories already exist.

        Returns:
            Seeding result with counts.
        """
        existing = (
            await self.session.execute(select(func.count(Category.id)))
        ).scalar_one()

        if existing:
            logger.info("Catalog already seeded", categories=existing)
            return {"seeded": False, "categories_created": 0, "products_created": 0}

        categories = await self.categories.insert_all(
            [Category(name=c.name, description=c.description) for c in CATEGORIES]
        )

        for seed in PRODUCTS:
            await self.products.insert(
                Product(
                    name=seed.name,
                    description=seed.description,
                    price=seed.price,
                    category_id=categories[seed.category_index - 1].id,
                    stock_quantity=seed.stock_quantity,
                )
            )

        await self.session.commit()

        logger.info(
            "Catalog seeded",
            categories_created=len(categories),
            products_created=len(PRODUCTS),
        )

        return {
            "seeded": True,
            "categories_created": len(categories),
            "products_created": len(PRODUCTS),
        }
