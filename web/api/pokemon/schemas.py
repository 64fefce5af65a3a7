"""Pokemon API response schemas."""

from pydantic import BaseModel


class PokemonItem(BaseModel):
    """Catalog entry as listed to clients."""

    id: int
    name: str
    dex_id: int
    up_votes: int
    down_votes: int


class ResultItem(BaseModel):
    """Ranked row with derived percentages."""

    name: str
    id: int
    dex_id: int
    up_votes: int
    down_votes: int
    total_votes: int
    win_percentage: float
    loss_percentage: float


class RandomPairResponse(BaseModel):
    """Two distinct Pokemon for a head-to-head vote."""

    first: PokemonItem
    second: PokemonItem


class VoteResponse(BaseModel):
    """Vote outcome."""

    success: bool
