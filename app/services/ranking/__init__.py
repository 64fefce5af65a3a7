"""Ranking services."""

from app.services.ranking.service import RankingService

__all__ = [
    "RankingService",
]
