"""PokeAPI client package."""

from pokeapi_client.base import BaseClient
from pokeapi_client.client import PokeApiClient
from pokeapi_client.schemas import NamedResourceListSchema, NamedResourceSchema

__all__ = [
    # Base
    "BaseClient",
    # Clients
    "PokeApiClient",
    # Schemas
    "NamedResourceSchema",
    "NamedResourceListSchema",
]
