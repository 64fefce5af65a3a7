"""Pokemon domain models - catalog table and ranking entities."""

from app.models.pokemon.entities import Pokemon, RankingRow
from app.models.pokemon.pokemon import POKEMON_COLUMNS, POKEMON_DDL

__all__ = [
    "POKEMON_DDL",
    "POKEMON_COLUMNS",
    "Pokemon",
    "RankingRow",
]
