"""Data validation functions."""

import duckdb


def validate_catalog(conn: duckdb.DuckDBPyConnection) -> dict:
    """Validate catalog integrity."""
    issues = []
    stats = {}

    stats["pokemon"] = conn.execute("SELECT COUNT(*) FROM pokemon").fetchone()[0]
    if stats["pokemon"] < 2:
        issues.append(f"Only {stats['pokemon']} Pokemon - random pairs need at least 2")

    negative = conn.execute(
        "SELECT COUNT(*) FROM pokemon WHERE up_votes < 0 OR down_votes < 0"
    ).fetchone()[0]
    if negative > 0:
        issues.append(f"{negative} Pokemon have negative vote counters")

    duplicates = conn.execute(
        """
        SELECT COUNT(*) FROM (
            SELECT dex_id FROM pokemon GROUP BY dex_id HAVING COUNT(*) > 1
        )
        """
    ).fetchone()[0]
    if duplicates > 0:
        issues.append(f"{duplicates} dex ids appear more than once")

    totals = conn.execute(
        "SELECT COALESCE(SUM(up_votes), 0), COALESCE(SUM(down_votes), 0) FROM pokemon"
    ).fetchone()
    stats["up_votes"] = int(totals[0])
    stats["down_votes"] = int(totals[1])
    # every vote adds exactly one up and one down
    if stats["up_votes"] != stats["down_votes"]:
        issues.append(f"Vote totals differ: {stats['up_votes']} up vs {stats['down_votes']} down")

    return {
        "valid": len(issues) == 0,
        "stats": stats,
        "issues": issues,
    }
