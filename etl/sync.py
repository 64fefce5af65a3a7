"""Main sync orchestration."""

import asyncio

from loguru import logger

from app.repositories.db import get_write_connection
from etl.catalog import sync_catalog
from etl.validation import validate_catalog
from pokeapi_client import PokeApiClient
from settings import CATALOG_LIMIT


async def _sync_async(limit: int) -> int:
    """Async sync implementation."""
    conn = get_write_connection()
    try:
        async with PokeApiClient() as client:
            added = await sync_catalog(client, conn, limit)

        result = validate_catalog(conn)
        if result["valid"]:
            logger.info("Validation OK: {}", result["stats"])
        else:
            logger.warning("Validation issues: {}", result["issues"])
    finally:
        conn.close()

    logger.info("Sync complete!")
    return added


def sync_all(limit: int = CATALOG_LIMIT) -> int:
    """Main sync entry point. Returns number of Pokemon added."""
    return asyncio.run(_sync_async(limit))
