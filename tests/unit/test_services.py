"""Tests for ranking and voting services."""

import pytest

from app.errors import NotFoundError, ValidationError
from app.services import RankingService, VotingService


class TestRankingService:
    def test_results_ranked(self, seeded):
        rows = RankingService(seeded).results()
        assert [r.id for r in rows] == [2, 1, 3]

    def test_results_reflect_new_votes(self, seeded):
        ranking = RankingService(seeded)
        VotingService(seeded).vote(3, 2)
        rows = ranking.results()
        assert [r.id for r in rows] == [3, 2, 1]
        assert rows[0].win_percentage == 100.0
        assert rows[1].win_percentage == pytest.approx(6 / 7 * 100)

    def test_random_pair(self, seeded):
        first, second = RankingService(seeded).random_pair()
        assert first.id != second.id

    def test_random_pair_single_is_none(self, repo):
        repo.add(1, "ditto", 132)
        assert RankingService(repo).random_pair() is None

    def test_random_pair_empty_is_none(self, repo):
        assert RankingService(repo).random_pair() is None


class TestVotingService:
    def test_vote(self, seeded):
        assert VotingService(seeded).vote(3, 1) is True
        assert seeded.get(3).up_votes == 1
        assert seeded.get(1).down_votes == 3

    def test_same_id_rejected(self, seeded):
        with pytest.raises(ValidationError):
            VotingService(seeded).vote(1, 1)
        assert seeded.get(1).up_votes == 8
        assert seeded.get(1).down_votes == 2

    def test_unknown_id_propagates(self, seeded):
        with pytest.raises(NotFoundError):
            VotingService(seeded).vote(1, 42)
        assert seeded.get(1).up_votes == 8
