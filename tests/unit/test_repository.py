"""Tests for the Pokemon repository and the vote transaction."""

from concurrent.futures import ThreadPoolExecutor

import duckdb
import pytest

from app.errors import NotFoundError
from app.repositories import PokemonRepository, close_all_db, get_db, open_connections
from app.services import VotingService


def counters(repo) -> dict[int, tuple[int, int]]:
    return {p.id: (p.up_votes, p.down_votes) for p in repo.list_by_votes()}


class TestReads:
    def test_list_ordered_by_up_votes(self, seeded):
        assert [p.id for p in seeded.list_by_votes()] == [1, 2, 3]

    def test_list_empty(self, repo):
        assert repo.list_by_votes() == []

    def test_timestamps_set_by_store(self, seeded):
        p = seeded.get(1)
        assert p.inserted_at is not None
        assert p.updated_at is not None

    def test_get_missing(self, seeded):
        with pytest.raises(NotFoundError):
            seeded.get(999)

    def test_count(self, seeded):
        assert seeded.count() == 3

    def test_random_sample_distinct(self, seeded):
        for _ in range(10):
            sample = seeded.random_sample(2)
            assert len(sample) == 2
            assert sample[0].id != sample[1].id

    def test_random_sample_single(self, repo):
        repo.add(1, "ditto", 132)
        assert [p.id for p in repo.random_sample(2)] == [1]


class TestRecordVote:
    def test_increments_exactly_once(self, seeded):
        before = counters(seeded)
        seeded.record_vote(2, 1)
        after = counters(seeded)

        assert after[2] == (before[2][0] + 1, before[2][1])
        assert after[1] == (before[1][0], before[1][1] + 1)
        assert after[3] == before[3]

    def test_repeated_votes_accumulate(self, seeded):
        for _ in range(5):
            seeded.record_vote(3, 2)
        assert seeded.get(3).up_votes == 5
        assert seeded.get(2).down_votes == 5

    def test_missing_loser_rolls_back(self, seeded):
        before = counters(seeded)
        with pytest.raises(NotFoundError):
            seeded.record_vote(1, 999)
        assert counters(seeded) == before

    def test_missing_winner_rolls_back(self, seeded):
        before = counters(seeded)
        with pytest.raises(NotFoundError):
            seeded.record_vote(999, 1)
        assert counters(seeded) == before

    def test_connection_usable_after_rollback(self, seeded):
        with pytest.raises(NotFoundError):
            seeded.record_vote(1, 999)
        seeded.record_vote(1, 2)
        assert seeded.get(1).up_votes == 9

    def test_updates_timestamp(self, seeded):
        before = seeded.get(1).updated_at
        seeded.record_vote(1, 2)
        assert seeded.get(1).updated_at >= before


class TestTransaction:
    def test_store_error_rolls_back(self, seeded):
        with pytest.raises(duckdb.Error):
            with seeded.transaction():
                seeded.execute("UPDATE pokemon SET up_votes = up_votes + 1 WHERE id = 1")
                seeded.execute("UPDATE pokemon SET down_votes = -1 WHERE id = 2")
        assert seeded.get(1).up_votes == 8
        assert seeded.get(2).down_votes == 0

    def test_read_only_refuses(self, db_path):
        with pytest.raises(RuntimeError):
            with PokemonRepository(read_only=True).transaction():
                pass

    def test_thread_local_connection_reused(self, seeded):
        assert get_db() is get_db()


class TestConcurrentVotes:
    def test_overlapping_votes_all_commit(self, seeded):
        voting = VotingService(seeded)

        def cast(_):
            for _ in range(20):
                voting.vote(2, 1)

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(cast, range(8)))

        assert seeded.get(2).up_votes == 6 + 160
        assert seeded.get(1).down_votes == 2 + 160
        assert seeded.get(3).up_votes == 0

    def test_mixed_pairs_keep_totals_balanced(self, seeded):
        pairs = [(1, 2), (2, 3), (3, 1), (2, 1)] * 10

        with ThreadPoolExecutor(max_workers=4) as pool:
            list(pool.map(lambda p: seeded.record_vote(*p), pairs))

        rows = seeded.list_by_votes()
        assert sum(p.up_votes for p in rows) == 14 + 40
        assert sum(p.down_votes for p in rows) == 2 + 40


class TestConnections:
    def test_close_all_includes_worker_threads(self, seeded):
        with ThreadPoolExecutor(max_workers=3) as pool:
            list(pool.map(lambda _: seeded.count(), range(3)))
        assert open_connections() >= 2

        close_all_db()
        assert open_connections() == 0
        # stale thread-locals reconnect on next use
        assert seeded.count() == 3
