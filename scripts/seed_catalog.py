#!/usr/bin/env python3
"""Seed product catalog script.

Creates the catalog tables and loads the demo categories and products
into an empty database. Existing data is never removed.

Usage:
    python scripts/seed_catalog.py
    python scripts/seed_catalog.py --database-url sqlite+aiosqlite:///./catalog.db
    python scripts/seed_catalog.py --skip-create-tables
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from catalog_api.catalog.service import CatalogService
from catalog_api.infrastructure.config import settings
from catalog_api.infrastructure.database import (
    build_engine,
    build_session_factory,
    create_tables,
)


async def seed(database_url: str, create: bool = True) -> dict:
    """Seed the demo catalog.

    Args:
        database_url: Async SQLAlchemy URL of the target database.
        create: Whether to create missing tables first.

    Returns:
        Seeding result.
    """
    engine = build_engine(database_url)
    try:
        if create:
            print("Creating database tables...")
            await create_tables(engine)
            print("Tables ready.")
            print()

        async with build_session_factory(engine)() as session:
            return await CatalogService(session).seed_catalog()
    finally:
        await engine.dispose()


async def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Seed the demo product catalog",
    )
    parser.add_argument(
        "--database-url",
        default=settings.database_url,
        help="Database URL (default: DATABASE_URL setting)",
    )
    parser.add_argument(
        "--skip-create-tables",
        action="store_true",
        help="Don't create missing tables before seeding",
    )

    args = parser.parse_args()

    print("=" * 60)
    print("Catalog Seeder")
    print("=" * 60)
    print(f"Database: {args.database_url}")
    print()

    result = await seed(args.database_url, create=not args.skip_create_tables)

    if result["seeded"]:
        print(f"  ✓ Categories: {result['categories_created']}")
        print(f"  ✓ Products: {result['products_created']}")
    else:
        print("  - Catalog already has data, nothing inserted")
    print()

    print("=" * 60)
    print("Seeding complete!")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
