"""Catalog repositories for database operations.

Every product read, update and delete goes through the active-only
predicate; inactive rows stay in the table but are never returned.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import ColumnElement, and_, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from catalog_api.catalog.filters import active_only
from catalog_api.catalog.models import Category, Product
from catalog_api.catalog.sorting import ProductSort


@dataclass(frozen=True)
class ProductChanges:
    """Mutable product fields, replaced together on update.

    Attributes:
        name: Product name.
        description: Product description.
        price: Unit price.
        category_id: Owning category.
        stock_quantity: Available quantity.
    """

    name: str
    description: str
    price: Decimal
    category_id: int
    stock_quantity: int


class ProductRepository:
    """Repository for Product database operations.

    Handles all database interactions for products including
    filtering, sorting, and pagination.

    Example usage:
        async with async_session_factory() as session:
            repo = ProductRepository(session)
            predicate = build_product_predicate(ProductFilter(category_id=1))
            total = await repo.count_active(predicate)
            products = await repo.fetch_active(predicate, ProductSort(), 0, 10)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def count_active(self, predicate: ColumnElement[bool] | None = None) -> int:
        """Count active products matching a predicate.

        Args:
            predicate: Filter built by ``build_product_predicate``. The
                active-only condition is applied regardless.

        Returns:
            Count of matching products.
        """
        query = select(func.count(Product.id)).where(self._active(predicate))
        result = await self.session.execute(query)
        return result.scalar_one()

    async def fetch_active(
        self,
        predicate: ColumnElement[bool] | None,
        sort: ProductSort,
        offset: int,
        limit: int,
    ) -> Sequence[Product]:
        """Fetch one page of active products.

        The category is joined in the same query.

        Args:
            predicate: Filter built by ``build_product_predicate``.
            sort: Ordering, applied before offset/limit.
            offset: Rows to skip.
            limit: Maximum rows to return.

        Returns:
            Sequence of matching products.
        """
        query = (
            select(Product)
            .options(joinedload(Product.category))
            .where(self._active(predicate))
            .order_by(*sort.order_by())
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(query)
        return result.scalars().all()

    async def list_active(self) -> Sequence[Product]:
        """Get all active products ordered by name."""
        query = (
            select(Product)
            .options(joinedload(Product.category))
            .where(active_only())
            .order_by(*ProductSort().order_by())
        )
        result = await self.session.execute(query)
        return result.scalars().all()

    async def get_active_by_id(self, product_id: int) -> Product | None:
        """Get an active product by ID.

        Args:
            product_id: Product ID.

        Returns:
            Product if found and active, None otherwise.
        """
        query = (
            select(Product)
            .options(joinedload(Product.category))
            .where(Product.id == product_id, active_only())
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def insert(self, product: Product) -> Product:
        """Save a new product.

        Sets the creation timestamp and marks the product active.

        Args:
            product: Product to save. Its id is assigned by the store.

        Returns:
            Saved product with its category loaded.
        """
        product.created_date = datetime.now(timezone.utc)
        product.is_active = True
        self.session.add(product)
        await self.session.flush()
        return await self._reload(product.id)

    async def update_active_by_id(
        self,
        product_id: int,
        changes: ProductChanges,
    ) -> Product | None:
        """Replace the mutable fields of an active product.

        ``created_date`` and ``is_active`` are left untouched.

        Args:
            product_id: Product ID.
            changes: New field values.

        Returns:
            Updated product, or None if missing or inactive.
        """
        query = select(Product).where(Product.id == product_id, active_only())
        result = await self.session.execute(query)
        product = result.scalar_one_or_none()

        if product is None:
            return None

        product.name = changes.name
        product.description = changes.description
        product.price = changes.price
        product.category_id = changes.category_id
        product.stock_quantity = changes.stock_quantity

        await self.session.flush()
        return await self._reload(product.id)

    async def soft_delete_active_by_id(self, product_id: int) -> bool:
        """Mark an active product as deleted.

        Args:
            product_id: Product ID.

        Returns:
            True if a product was deactivated, False if it was missing or
            already inactive.
        """
        stmt = (
            update(Product)
            .where(Product.id == product_id, active_only())
            .values(is_active=False)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1

    async def _reload(self, product_id: int) -> Product:
        query = (
            select(Product)
            .options(joinedload(Product.category))
            .where(Product.id == product_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(query)
        return result.scalar_one()

    @staticmethod
    def _active(predicate: ColumnElement[bool] | None) -> ColumnElement[bool]:
        if predicate is None:
            return active_only()
        return and_(active_only(), predicate)


class CategoryRepository:
    """Repository for Category database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def list_active(self) -> Sequence[Category]:
        """Get all active categories ordered by id."""
        query = select(Category).where(Category.is_active.is_(True)).order_by(Category.id)
        result = await self.session.execute(query)
        return result.scalars().all()

    async def get_active_by_id(self, category_id: int) -> Category | None:
        """Get an active category by ID."""
        query = select(Category).where(
            Category.id == category_id,
            Category.is_active.is_(True),
        )
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def insert(self, category: Category) -> Category:
        """Save a new category. Categories are always created active."""
        category.is_active = True
        self.session.add(category)
        await self.session.flush()
        return category

    async def insert_all(self, categories: list[Category]) -> list[Category]:
        """Save multiple categories."""
        for category in categories:
            category.is_active = True
        self.session.add_all(categories)
        await self.session.flush()
        return categories
