"""Models package - DDL and entities."""

from app.models.common import BaseEntity
from app.models.pokemon import (
    POKEMON_COLUMNS,
    POKEMON_DDL,
    Pokemon,
    RankingRow,
)

ALL_DDL = [
    POKEMON_DDL,
]

__all__ = [
    # Common
    "BaseEntity",
    # Pokemon
    "POKEMON_DDL",
    "POKEMON_COLUMNS",
    "Pokemon",
    "RankingRow",
    # All DDL
    "ALL_DDL",
]
