"""Catalog ETL - load PokeAPI entries into the pokemon table."""

import duckdb
import polars as pl
from loguru import logger

from app.repositories.db import transaction
from etl.helpers import get_existing_ids
from pokeapi_client import NamedResourceSchema, PokeApiClient


def load_catalog(conn: duckdb.DuckDBPyConnection, entries: list[NamedResourceSchema]) -> int:
    """Insert entries missing from the table. Existing rows (and their votes) are left alone."""
    by_id = {e.dex_id: e for e in entries}
    existing = get_existing_ids(conn)
    new = [e for dex_id, e in sorted(by_id.items()) if dex_id not in existing]

    if not new:
        logger.info("Catalog: {} (all exist)", len(by_id))
        return 0

    catalog_df = pl.DataFrame(
        [
            {
                "id": e.dex_id,
                "name": e.name,
                "dex_id": e.dex_id,
            }
            for e in new
        ]
    )
    conn.register("catalog_df", catalog_df)
    try:
        with transaction(conn):
            conn.execute("INSERT INTO pokemon (id, name, dex_id) SELECT id, name, dex_id FROM catalog_df")
    finally:
        conn.unregister("catalog_df")
    logger.info("Catalog: +{} new (total {})", len(new), len(by_id))
    return len(new)


async def sync_catalog(client: PokeApiClient, conn: duckdb.DuckDBPyConnection, limit: int) -> int:
    """Fetch the first `limit` Pokemon and load the missing ones."""
    entries = await client.pokemon(limit)
    if not entries:
        logger.error("PokeAPI returned no Pokemon, skipping")
        return 0
    return load_catalog(conn, entries)
