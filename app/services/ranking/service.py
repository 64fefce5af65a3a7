"""Ranking service."""

from loguru import logger

from app.models import Pokemon, RankingRow
from app.repositories.pokemon import PokemonRepository
from app.services.ranking import formulas


class RankingService:
    """Catalog reads: vote-ordered list, ranked results, random pair."""

    def __init__(self, repo: PokemonRepository):
        self._repo = repo

    def pokemon(self) -> list[Pokemon]:
        """All Pokemon ordered by up-votes."""
        return self._repo.list_by_votes()

    def results(self) -> list[RankingRow]:
        """Ranked rows, recomputed from the current store snapshot."""
        rows = formulas.rank(self._repo.list_by_votes())
        if rows:
            top = rows[0]
            logger.debug("Results: {} rows, top={} ({:.1f}%)", len(rows), top.name, top.win_percentage)
        return rows

    def random_pair(self) -> tuple[Pokemon, Pokemon] | None:
        """Two distinct random Pokemon, or None when the catalog is too small."""
        sample = self._repo.random_sample(2)
        if len(sample) < 2:
            logger.warning("Random pair requested with {} Pokemon in store", len(sample))
            return None
        return sample[0], sample[1]
