"""Tests for health check endpoints."""

from collections.abc import AsyncGenerator, Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.pool import NullPool

from catalog_api.infrastructure.database import (
    build_engine,
    build_session_factory,
    get_read_session,
)
from catalog_api.main import app


def use_database(url: str) -> Generator[None, None, None]:
    """Serve read sessions from the given database URL."""
    session_factory = build_session_factory(build_engine(url, poolclass=NullPool))

    async def read_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_read_session] = read_session
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client() -> TestClient:
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def reachable_db() -> Generator[None, None, None]:
    """Use an in-memory database."""
    yield from use_database("sqlite+aiosqlite:///:memory:")


@pytest.fixture
def unreachable_db() -> Generator[None, None, None]:
    """Use a database file in a directory that doesn't exist."""
    yield from use_database("sqlite+aiosqlite:////nonexistent-dir/catalog.db")


def test_health_check(client: TestClient) -> None:
    """Test health endpoint returns healthy status."""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["service"] == "catalog-api"
    assert "version" in data


def test_readiness_check(client: TestClient, reachable_db: None) -> None:
    """Test readiness endpoint returns ready status."""
    response = client.get("/ready")
    assert response.status_code == 200
    assert response.json()["status"] == "ready"


def test_readiness_check_database_down(client: TestClient, unreachable_db: None) -> None:
    """Readiness reports 503 when the database can't be reached."""
    response = client.get("/ready")
    assert response.status_code == 503
    assert response.json()["status"] == "unavailable"
