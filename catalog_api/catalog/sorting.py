"""Sort options for product search."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from catalog_api.catalog.models import Product


class SortKey(str, Enum):
    """Fields a product search can be ordered by."""

    NAME = "name"
    PRICE = "price"
    CREATED_DATE = "createddate"
    STOCK_QUANTITY = "stockquantity"

    @classmethod
    def parse(cls, value: str | None) -> "SortKey":
        """Resolve a client-supplied sort key.

        Matching is case-insensitive. Missing or unknown values sort by name.
        """
        if value:
            try:
                return cls(value.lower())
            except ValueError:
                pass
        return cls.NAME


class SortOrder(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: str | None) -> "SortOrder":
        """Only ``desc`` (any case) sorts descending."""
        if value and value.lower() == cls.DESC.value:
            return cls.DESC
        return cls.ASC


SORT_COLUMNS: dict[SortKey, Any] = {
    SortKey.NAME: Product.name,
    SortKey.PRICE: Product.price,
    SortKey.CREATED_DATE: Product.created_date,
    SortKey.STOCK_QUANTITY: Product.stock_quantity,
}


@dataclass(frozen=True)
class ProductSort:
    """Resolved ordering for a product search.

    Attributes:
        key: Field to sort by.
        order: Sort direction.
    """

    key: SortKey = SortKey.NAME
    order: SortOrder = SortOrder.ASC

    @classmethod
    def from_request(cls, sort_by: str | None, sort_order: str | None) -> "ProductSort":
        """Build ordering from raw request values."""
        return cls(key=SortKey.parse(sort_by), order=SortOrder.parse(sort_order))

    @property
    def descending(self) -> bool:
        """Whether the primary key sorts descending."""
        return self.order is SortOrder.DESC

    def order_by(self) -> list[Any]:
        """Get ORDER BY clauses.

        Rows with equal sort values are ordered by id so pages stay
        stable across repeated calls.

        Returns:
            SQLAlchemy order clauses.
        """
        column = SORT_COLUMNS[self.key]
        primary = column.desc() if self.descending else column.asc()
        return [primary, Product.id.asc()]
