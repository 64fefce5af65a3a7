"""PokeAPI schemas - named resource listings."""

from pydantic import BaseModel


class NamedResourceSchema(BaseModel):
    """Entry of a PokeAPI named resource list."""

    name: str
    url: str

    @property
    def dex_id(self) -> int:
        """National dex number, the last path segment of the resource URL."""
        return int(self.url.rstrip("/").rsplit("/", 1)[-1])


class NamedResourceListSchema(BaseModel):
    """Paginated PokeAPI list response."""

    count: int
    next: str | None = None
    previous: str | None = None
    results: list[NamedResourceSchema] = []
