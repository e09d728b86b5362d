"""Product search filters.

Turns an optional-filter request into one SQL predicate over the
active product set.
"""

from dataclasses import dataclass
from decimal import Decimal

from sqlalchemy import ColumnElement, and_, or_

from catalog_api.catalog.models import Product


@dataclass(frozen=True)
class ProductFilter:
    """Filter parameters for product search.

    Every field is optional and ``None`` means the filter adds no
    constraint.

    Attributes:
        search_term: Whitespace-separated tokens; each must appear in the
            name or the description (case-insensitive).
        category_id: Exact category match.
        min_price: Inclusive lower price bound.
        max_price: Inclusive upper price bound.
        in_stock: When True, only products with stock. False is the same
            as not filtering.
    """

    search_term: str | None = None
    category_id: int | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    in_stock: bool | None = None

    @property
    def search_tokens(self) -> list[str]:
        """Split the search term into non-empty tokens."""
        if not self.search_term:
            return []
        return self.search_term.strip().split()


def active_only() -> ColumnElement[bool]:
    """Predicate every active read path starts from."""
    return Product.is_active.is_(True)


def token_predicate(token: str) -> ColumnElement[bool]:
    """Match one search token against name or description."""
    return or_(
        Product.name.icontains(token, autoescape=True),
        Product.description.icontains(token, autoescape=True),
    )


def build_product_predicate(filters: ProductFilter) -> ColumnElement[bool]:
    """Build a conjunctive predicate for a product search.

    Args:
        filters: Filter parameters.

    Returns:
        SQL expression usable in both count and fetch queries.
    """
    conditions = [active_only()]

    for token in filters.search_tokens:
        conditions.append(token_predicate(token))

    if filters.category_id is not None:
        conditions.append(Product.category_id == filters.category_id)

    if filters.min_price is not None:
        conditions.append(Product.price >= filters.min_price)

    if filters.max_price is not None:
        conditions.append(Product.price <= filters.max_price)

    # inStock=false means "don't care", not "out of stock only"
    if filters.in_stock is True:
        conditions.append(Product.stock_quantity > 0)

    return and_(*conditions)
