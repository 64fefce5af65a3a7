"""PokeAPI client - the Pokemon catalog."""

from loguru import logger

from pokeapi_client.base import BaseClient
from pokeapi_client.schemas import NamedResourceListSchema, NamedResourceSchema


class PokeApiClient(BaseClient):
    """Client for PokeAPI catalog endpoints."""

    async def pokemon(self, limit: int, offset: int = 0) -> list[NamedResourceSchema]:
        """GET /pokemon?limit=N - one page of the Pokemon list."""
        data = await self._get("pokemon", params={"limit": limit, "offset": offset})
        page = NamedResourceListSchema.model_validate(data)
        logger.debug("pokemon(limit={}, offset={}): {} of {}", limit, offset, len(page.results), page.count)
        return page.results
