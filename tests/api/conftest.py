"""Shared fixtures for API tests.

Each test gets its own SQLite file. The schema and seed rows are written
with a synchronous engine; requests go through an aiosqlite engine wired
in with dependency overrides.
"""

from collections.abc import AsyncGenerator, Generator
from decimal import Decimal
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session
from sqlalchemy.pool import NullPool

from catalog_api.catalog.models import Category, Product
from catalog_api.infrastructure.database import (
    Base,
    build_engine,
    build_session_factory,
    get_read_session,
    get_session,
)
from catalog_api.main import app


@pytest.fixture
def database_path(tmp_path: Path) -> Path:
    """Create an empty catalog database file."""
    path = tmp_path / "catalog.db"
    sync_engine = create_engine(f"sqlite:///{path}")
    Base.metadata.create_all(sync_engine)
    sync_engine.dispose()
    return path


@pytest.fixture
def seeded_database(database_path: Path) -> Path:
    """Add two categories and the Laptop / Smartphone / T-Shirt products."""
    sync_engine = create_engine(f"sqlite:///{database_path}")
    with Session(sync_engine) as session:
        electronics = Category(name="Electronics", description="Electronic devices")
        clothing = Category(name="Clothing", description="Apparel and fashion items")
        session.add_all([electronics, clothing])
        session.flush()
        session.add_all(
            [
                Product(
                    name="Laptop",
                    description="High-performance laptop",
                    price=Decimal("999.99"),
                    category_id=electronics.id,
                    stock_quantity=50,
                ),
                Product(
                    name="Smartphone",
                    description="Latest model smartphone",
                    price=Decimal("699.99"),
                    category_id=electronics.id,
                    stock_quantity=100,
                ),
                Product(
                    name="T-Shirt",
                    description="Cotton t-shirt",
                    price=Decimal("19.99"),
                    category_id=clothing.id,
                    stock_quantity=200,
                ),
            ]
        )
        session.commit()
    sync_engine.dispose()
    return database_path


def override_sessions(path: Path) -> Generator[None, None, None]:
    """Point the session dependencies at a test database file."""
    engine = build_engine(f"sqlite+aiosqlite:///{path}", poolclass=NullPool)
    session_factory = build_session_factory(engine)

    async def read_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
            finally:
                await session.rollback()

    async def write_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_read_session] = read_session
    app.dependency_overrides[get_session] = write_session
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def empty_db(database_path: Path) -> Generator[None, None, None]:
    """Use an empty catalog database for requests."""
    yield from override_sessions(database_path)


@pytest.fixture
def catalog_db(seeded_database: Path) -> Generator[None, None, None]:
    """Use the three-product catalog database for requests."""
    yield from override_sessions(seeded_database)


@pytest.fixture
def client() -> TestClient:
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def catalog_client(catalog_db: None) -> TestClient:
    """Create test client over the seeded catalog."""
    return TestClient(app)
