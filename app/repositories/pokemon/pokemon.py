"""Pokemon repository - catalog reads and the paired vote increment."""

from loguru import logger

from app.errors import NotFoundError
from app.models import POKEMON_COLUMNS, Pokemon
from app.repositories.base import BaseRepository


class PokemonRepository(BaseRepository):
    """Repository for the voteable catalog."""

    def list_by_votes(self) -> list[Pokemon]:
        """All Pokemon ordered by up-votes, most first."""
        rows = self.fetchall(f"SELECT {POKEMON_COLUMNS} FROM pokemon ORDER BY up_votes DESC")
        logger.debug("list_by_votes: {} rows", len(rows))
        return [Pokemon.from_row(r) for r in rows]

    def random_sample(self, size: int = 2) -> list[Pokemon]:
        """Up to `size` distinct Pokemon chosen uniformly at random."""
        rows = self.fetchall(
            f"SELECT {POKEMON_COLUMNS} FROM pokemon ORDER BY random() LIMIT {int(size)}"
        )
        return [Pokemon.from_row(r) for r in rows]

    def get(self, pokemon_id: int) -> Pokemon:
        row = self.fetchone(f"SELECT {POKEMON_COLUMNS} FROM pokemon WHERE id = ?", [pokemon_id])
        if row is None:
            raise NotFoundError(f"Pokemon {pokemon_id} not found")
        return Pokemon.from_row(row)

    def count(self) -> int:
        return self.fetchone("SELECT COUNT(*) FROM pokemon")[0]

    def add(self, pokemon_id: int, name: str, dex_id: int, up_votes: int = 0, down_votes: int = 0) -> None:
        """Insert a single catalog entry."""
        self.execute(
            "INSERT INTO pokemon (id, name, dex_id, up_votes, down_votes) VALUES (?, ?, ?, ?, ?)",
            [pokemon_id, name, dex_id, up_votes, down_votes],
        )

    def record_vote(self, winner_id: int, loser_id: int) -> None:
        """Increment winner's up-votes and loser's down-votes atomically."""
        with self.transaction():
            self._increment("up_votes", winner_id)
            self._increment("down_votes", loser_id)
        logger.info("Vote recorded: {} beat {}", winner_id, loser_id)

    def _increment(self, column: str, pokemon_id: int) -> None:
        # relative increment, never a read-then-write of a cached value
        row = self.fetchone(
            f"""
            UPDATE pokemon
            SET {column} = {column} + 1, updated_at = CAST(current_timestamp AS TIMESTAMP)
            WHERE id = ?
            RETURNING id
            """,
            [pokemon_id],
        )
        if row is None:
            raise NotFoundError(f"Pokemon {pokemon_id} not found")
