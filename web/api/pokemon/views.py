"""Pokemon API views - thin layer over services."""

from app.container import container
from app.models import Pokemon
from web.api.errors import validate_vote

from .schemas import PokemonItem, RandomPairResponse, ResultItem, VoteResponse


def _item(p: Pokemon) -> PokemonItem:
    return PokemonItem(
        id=p.id,
        name=p.name,
        dex_id=p.dex_id,
        up_votes=p.up_votes,
        down_votes=p.down_votes,
    )


def get_pokemon() -> list[PokemonItem]:
    """Get all Pokemon ordered by up-votes."""
    return [_item(p) for p in container.ranking.pokemon()]


def get_results() -> list[ResultItem]:
    """Get ranked results (win percentage, then up-votes)."""
    return [ResultItem(**row.to_dict()) for row in container.ranking.results()]


def get_random_pair() -> RandomPairResponse | None:
    """Get two random Pokemon, or None if fewer than two exist."""
    pair = container.ranking.random_pair()
    if pair is None:
        return None
    return RandomPairResponse(first=_item(pair[0]), second=_item(pair[1]))


def vote(upvote_id: int, downvote_id: int) -> VoteResponse:
    """Record a head-to-head vote."""
    validate_vote(upvote_id, downvote_id)
    container.voting.vote(upvote_id, downvote_id)
    return VoteResponse(success=True)
