"""Pokemon API."""

from web.api.pokemon.views import (
    get_pokemon,
    get_random_pair,
    get_results,
    vote,
)

__all__ = [
    "get_pokemon",
    "get_results",
    "get_random_pair",
    "vote",
]
