"""Demo catalog data.

Five categories and twenty products used to seed an empty database.
Products reference categories by position (1-based) in ``CATEGORIES``.
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class CategorySeed:
    """Seed row for a category."""

    name: str
    description: str


@dataclass(frozen=True)
class ProductSeed:
    """Seed row for a product."""

    name: str
    description: str
    price: Decimal
    category_index: int
    stock_quantity: int


CATEGORIES: tuple[CategorySeed, ...] = (
    CategorySeed("Electronics", "Electronic devices and accessories"),
    CategorySeed("Clothing", "Apparel and fashion items"),
    CategorySeed("Books", "Books and publications"),
    CategorySeed("Home & Garden", "Home improvement and garden supplies"),
    CategorySeed("Sports & Fitness", "Sports equipment and fitness gear"),
)

PRODUCTS: tuple[ProductSeed, ...] = (
    # Electronics
    ProductSeed("Laptop", "High-performance laptop", Decimal("999.99"), 1, 50),
    ProductSeed("Smartphone", "Latest model smartphone", Decimal("699.99"), 1, 100),
    ProductSeed(
        "Wireless Headphones",
        "Noise-cancelling Bluetooth headphones",
        Decimal("149.99"),
        1,
        75,
    ),
    ProductSeed("Tablet", "10-inch tablet with stylus", Decimal("399.99"), 1, 60),
    # Clothing
    ProductSeed("T-Shirt", "Cotton t-shirt", Decimal("19.99"), 2, 200),
    ProductSeed("Jeans", "Denim jeans", Decimal("49.99"), 2, 150),
    ProductSeed("Winter Jacket", "Waterproof winter jacket", Decimal("129.99"), 2, 80),
    ProductSeed("Winter Boots", "Warm winter boots", Decimal("79.99"), 2, 120),
    # Books
    ProductSeed("Novel", "Bestselling fiction novel", Decimal("14.99"), 3, 75),
    ProductSeed("Cookbook", "Gourmet cooking recipes", Decimal("24.99"), 3, 60),
    ProductSeed("Self-Help Book", "Personal development guide", Decimal("18.99"), 3, 90),
    ProductSeed(
        "Programming Guide",
        "Complete guide to modern programming",
        Decimal("49.99"),
        3,
        45,
    ),
    # Home & Garden
    ProductSeed("Garden Hose", "50ft expandable garden hose", Decimal("29.99"), 4, 40),
    ProductSeed("Plant Pot", "Ceramic plant pot", Decimal("12.99"), 4, 80),
    ProductSeed("Lawn Mower", "Electric lawn mower", Decimal("249.99"), 4, 25),
    ProductSeed("Tool Set", "50-piece home tool set", Decimal("89.99"), 4, 55),
    # Sports & Fitness
    ProductSeed("Yoga Mat", "Non-slip exercise yoga mat", Decimal("34.99"), 5, 100),
    ProductSeed("Dumbbells Set", "Adjustable dumbbells 5-50 lbs", Decimal("199.99"), 5, 40),
    ProductSeed("Resistance Bands", "Set of 5 resistance bands", Decimal("24.99"), 5, 85),
    ProductSeed("Jump Rope", "Speed jump rope with counter", Decimal("15.99"), 5, 110),
)
