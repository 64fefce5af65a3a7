"""ETL package - catalog sync from PokeAPI to database."""

from etl.catalog import load_catalog, sync_catalog
from etl.sync import sync_all
from etl.validation import validate_catalog

__all__ = [
    "load_catalog",
    "sync_catalog",
    "sync_all",
    "validate_catalog",
]
