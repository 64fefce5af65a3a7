"""Pure ranking formulas - no dependencies, easily testable."""
from collections.abc import Iterable

from app.models import Pokemon, RankingRow


def win_percentage(up_votes: int, down_votes: int) -> float:
    """Share of votes won, in percent; 0 when never voted on."""
    total = up_votes + down_votes
    if total <= 0:
        return 0.0
    return up_votes / total * 100


def loss_percentage(up_votes: int, down_votes: int) -> float:
    """Share of votes lost, in percent; 0 when never voted on."""
    total = up_votes + down_votes
    if total <= 0:
        return 0.0
    return down_votes / total * 100


def ranking_row(pokemon: Pokemon) -> RankingRow:
    return RankingRow(
        name=pokemon.name,
        id=pokemon.id,
        dex_id=pokemon.dex_id,
        up_votes=pokemon.up_votes,
        down_votes=pokemon.down_votes,
        total_votes=pokemon.up_votes + pokemon.down_votes,
        win_percentage=win_percentage(pokemon.up_votes, pokemon.down_votes),
        loss_percentage=loss_percentage(pokemon.up_votes, pokemon.down_votes),
    )


def rank(pokemon: Iterable[Pokemon]) -> list[RankingRow]:
    """Ranking rows by win percentage, then up-votes, both descending.

    Full ties keep their input order (sorted() is stable with reverse=True).
    """
    rows = [ranking_row(p) for p in pokemon]
    return sorted(rows, key=lambda r: (r.win_percentage, r.up_votes), reverse=True)
