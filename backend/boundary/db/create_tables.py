"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, backend.configs
System role: Database schema initialization

Usage:
    python -m backend.boundary.db.create_tables
"""

import asyncio

from backend.boundary.db.base import Base
from backend.boundary.db.connection import dispose_engine, get_async_engine

# Import all models to register them with Base.metadata
import backend.boundary.db.models  # noqa: F401


async def create_all_tables() -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: calls CREATE TABLE IF NOT EXISTS for each model, so safe
    to run multiple times. Existing tables remain unchanged.

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails
        (e.g., invalid schema, permissions denied, unsupported data types)

    Usage:
        python -m backend.boundary.db.create_tables
        # Or in code:
        await create_all_tables()
    """
    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    print("All tables created successfully.")


async def _main() -> None:
    try:
        await create_all_tables()
    finally:
        await dispose_engine()


if __name__ == "__main__":
    asyncio.run(_main())
