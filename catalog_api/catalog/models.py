"""SQLAlchemy models for product catalog.

Defines Category and Product tables for persistent storage.
"""

from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog_api.infrastructure.database import Base


class Category(Base):
    """Product category.

    Attributes:
        id: Store-assigned identifier.
        name: Category name.
        description: Category description.
        is_active: Visibility flag. Categories are always created active.
    """

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(String(1000), nullable=False, default="")
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, index=True)

    def __repr__(self) -> str:
        """String representation."""
        return f"<Category(id={self.id}, name={self.name})>"


class Product(Base):
    """Product entity in the catalog.

    Products are never physically removed; deleting one flips ``is_active``
    to False and every active read path filters on that flag.

    Attributes:
        id: Store-assigned identifier.
        name: Product name.
        description: Product description.
        price: Unit price in major currency units.
        category_id: Owning category.
        stock_quantity: Available quantity.
        created_date: Insertion timestamp, never modified afterwards.
        is_active: False once the product has been deleted.
        category: Owning category. Must be loaded explicitly by the query.
    """

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    description: Mapped[str] = mapped_column(String(1000), nullable=False, default="")
    price: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False, index=True)
    category_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("categories.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    stock_quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0, index=True)
    created_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        index=True,
    )
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, index=True)

    # Relationships
    category: Mapped[Category] = relationship("Category", lazy="raise")

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_products_price_non_negative"),
        CheckConstraint("stock_quantity >= 0", name="ck_products_stock_non_negative"),
        Index("ix_products_active_category_price", "is_active", "category_id", "price"),
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Product(id={self.id}, name={self.name[:30]})>"

    @property
    def category_name(self) -> str | None:
        """Name of the owning category, if it was loaded with the product."""
        if "category" in self.__dict__ and self.category is not None:
            return self.category.name
        return None
