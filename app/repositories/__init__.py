"""Repositories package - data access layer for our database."""

from app.repositories.base import BaseRepository
from app.repositories.db import (
    close_all_db,
    close_db,
    get_db,
    get_db_path,
    get_write_connection,
    init_tables,
    open_connections,
    set_db_path,
    transaction,
)
from app.repositories.pokemon import PokemonRepository

__all__ = [
    # DB
    "get_db",
    "get_db_path",
    "set_db_path",
    "close_db",
    "close_all_db",
    "open_connections",
    "init_tables",
    "transaction",
    "get_write_connection",
    # Base
    "BaseRepository",
    # Pokemon
    "PokemonRepository",
]
