"""Pokemon repositories."""

from app.repositories.pokemon.pokemon import PokemonRepository

__all__ = [
    "PokemonRepository",
]
