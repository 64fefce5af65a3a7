"""Services package - service class exports."""

from app.services.ranking import RankingService
from app.services.voting import VotingService

__all__ = [
    "RankingService",
    "VotingService",
]
