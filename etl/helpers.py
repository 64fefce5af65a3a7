"""ETL helper functions."""

import duckdb


def get_existing_ids(conn: duckdb.DuckDBPyConnection) -> set[int]:
    """Get Pokemon IDs already in the catalog."""
    rows = conn.execute("SELECT id FROM pokemon").fetchall()
    return {r[0] for r in rows}
