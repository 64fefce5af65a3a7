#!/usr/bin/env python3
"""
Seed the Pokemon catalog from PokeAPI.

Usage:
    python sync_data.py              # Sync the default catalog size
    python sync_data.py 151          # Sync the first 151 Pokemon
    python sync_data.py --validate   # Check data integrity
"""

import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

import duckdb

from etl import sync_all
from etl.validation import validate_catalog
from settings import CATALOG_LIMIT, DB_PATH
from settings.logging import setup_logging

logger = setup_logging(level="INFO", to_file=True)


def run_validation() -> bool:
    """Validate catalog in database."""
    if not Path(DB_PATH).exists():
        print("\n⚠️  No database found. Run 'python sync_data.py' first.\n")
        return True

    conn = duckdb.connect(DB_PATH, read_only=True)
    result = validate_catalog(conn)
    conn.close()

    print("\n" + "=" * 60)
    print("DATA VALIDATION REPORT")
    print("=" * 60)
    print(f"  Pokemon: {result['stats']['pokemon']:,}")
    print(f"  Up-votes: {result['stats']['up_votes']:,}")
    print(f"  Down-votes: {result['stats']['down_votes']:,}")
    for issue in result["issues"]:
        print(f"  ⚠️  {issue}")

    print("\n" + "=" * 60)
    if result["valid"]:
        print("✅ All data valid!")
    else:
        print("❌ Some issues found.")
    print("=" * 60 + "\n")

    return result["valid"]


def main():
    args = sys.argv[1:]

    if "--validate" in args or args == ["validate"]:
        sys.exit(0 if run_validation() else 1)

    if not args:
        limit = CATALOG_LIMIT
    elif args[0].isdigit():
        limit = int(args[0])
    else:
        print(__doc__)
        sys.exit(1)

    logger.info("Syncing first {} Pokemon into {}", limit, DB_PATH)
    added = sync_all(limit=limit)
    logger.info("Added {} Pokemon", added)


if __name__ == "__main__":
    main()
