"""Shared fixtures for catalog tests.

Repository and service tests run against an in-memory SQLite database
through aiosqlite.
"""

from collections.abc import AsyncGenerator
from decimal import Decimal

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession
from sqlalchemy.pool import StaticPool

from catalog_api.catalog.models import Category, Product
from catalog_api.catalog.repository import CategoryRepository, ProductRepository
from catalog_api.infrastructure.database import (
    build_engine,
    build_session_factory,
    create_tables,
)


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create an in-memory database with the catalog schema."""
    engine = build_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Open a session on the test database."""
    async with build_session_factory(engine)() as session:
        yield session


@pytest_asyncio.fixture
async def categories(session: AsyncSession) -> dict[str, Category]:
    """Create the Electronics (id 1) and Clothing (id 2) categories."""
    repo = CategoryRepository(session)
    electronics = await repo.insert(
        Category(name="Electronics", description="Electronic devices and accessories")
    )
    clothing = await repo.insert(
        Category(name="Clothing", description="Apparel and fashion items")
    )
    await session.commit()
    return {"electronics": electronics, "clothing": clothing}


@pytest_asyncio.fixture
async def products(
    session: AsyncSession,
    categories: dict[str, Category],
) -> dict[str, Product]:
    """Create the three-product catalog used by the search scenarios."""
    repo = ProductRepository(session)
    electronics_id = categories["electronics"].id
    clothing_id = categories["clothing"].id

    rows = [
        ("Laptop", "High-performance laptop", Decimal("999.99"), electronics_id, 50),
        ("Smartphone", "Latest model smartphone", Decimal("699.99"), electronics_id, 100),
        ("T-Shirt", "Cotton t-shirt", Decimal("19.99"), clothing_id, 200),
    ]

    created = {}
    for name, description, price, category_id, stock in rows:
        created[name] = await repo.insert(
            Product(
                name=name,
                description=description,
                price=price,
                category_id=category_id,
                stock_quantity=stock,
            )
        )
    await session.commit()
    return created
