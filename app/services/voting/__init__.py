"""Voting services."""

from app.services.voting.service import VotingService

__all__ = [
    "VotingService",
]
