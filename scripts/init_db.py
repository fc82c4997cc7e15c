#!/usr/bin/env python
"""Create the users table from ORM metadata for local setups."""

import asyncio

from onboarding_api.config import get_settings
from onboarding_api.database import Database
from onboarding_api.main import configure_logging


async def init_db() -> None:
    """Create all tables."""
    settings = get_settings()
    database = Database.from_settings(settings)
    try:
        await database.ping()
        await database.create_schema()
    finally:
        await database.dispose()
    print("Database schema is ready")


if __name__ == "__main__":
    configure_logging()
    asyncio.run(init_db())
