"""Voting service."""

from loguru import logger

from app.errors import ValidationError
from app.repositories.pokemon import PokemonRepository


class VotingService:
    """Head-to-head vote recording."""

    def __init__(self, repo: PokemonRepository):
        self._repo = repo

    def vote(self, winner_id: int, loser_id: int) -> bool:
        """Record one vote; raises on failure, nothing is partially applied."""
        if winner_id == loser_id:
            raise ValidationError(f"Winner and loser must differ (both {winner_id})")

        try:
            self._repo.record_vote(winner_id, loser_id)
        except Exception as e:
            logger.error("Vote {} over {} failed: {}", winner_id, loser_id, e)
            raise
        return True
