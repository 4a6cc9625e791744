"""Script to create any missing tables without running migrations."""

import asyncio

from fitness_server.database import create_tables, engine


async def init_db() -> None:
    """Create all tables, then release the engine."""
    try:
        await create_tables()
        print("✓ Database initialized successfully!")
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(init_db())
