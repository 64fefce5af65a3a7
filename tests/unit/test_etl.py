"""Tests for catalog sync and validation."""

import asyncio

import duckdb
import httpx
import pytest

from app.repositories import get_write_connection
from etl import catalog, load_catalog, sync_catalog, validate_catalog
from pokeapi_client import NamedResourceSchema, PokeApiClient


def entry(dex_id: int, name: str) -> NamedResourceSchema:
    return NamedResourceSchema(name=name, url=f"https://pokeapi.co/api/v2/pokemon/{dex_id}/")


@pytest.fixture
def conn(db_path):
    c = get_write_connection()
    yield c
    c.close()


class TestLoadCatalog:
    def test_inserts_new(self, conn):
        added = load_catalog(conn, [entry(1, "bulbasaur"), entry(4, "charmander")])
        assert added == 2
        rows = conn.execute("SELECT id, name, dex_id, up_votes, down_votes FROM pokemon ORDER BY id").fetchall()
        assert rows == [(1, "bulbasaur", 1, 0, 0), (4, "charmander", 4, 0, 0)]

    def test_keeps_existing_votes(self, conn, seeded):
        added = load_catalog(conn, [entry(1, "bulbasaur"), entry(7, "squirtle")])
        assert added == 1
        assert seeded.get(1).up_votes == 8
        assert seeded.get(1).name == "snorlax"
        assert seeded.count() == 4

    def test_nothing_new(self, conn):
        load_catalog(conn, [entry(1, "bulbasaur")])
        assert load_catalog(conn, [entry(1, "bulbasaur")]) == 0

    def test_duplicates_in_input(self, conn):
        assert load_catalog(conn, [entry(25, "pikachu"), entry(25, "pikachu")]) == 1


class TestSyncCatalog:
    def test_fetch_and_load(self, conn):
        page = {
            "count": 2,
            "results": [
                {"name": "bulbasaur", "url": "https://pokeapi.co/api/v2/pokemon/1/"},
                {"name": "ivysaur", "url": "https://pokeapi.co/api/v2/pokemon/2/"},
            ],
        }
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json=page))

        async def run():
            async with PokeApiClient(base_url="https://pokeapi.test/api/v2", transport=transport) as client:
                return await sync_catalog(client, conn, limit=2)

        assert asyncio.run(run()) == 2
        assert conn.execute("SELECT COUNT(*) FROM pokemon").fetchone()[0] == 2


class TestValidateCatalog:
    def test_empty(self, conn):
        result = validate_catalog(conn)
        assert not result["valid"]
        assert result["stats"]["pokemon"] == 0

    def test_unbalanced_votes(self, conn, seeded):
        # seed data has 14 up-votes vs 2 down-votes
        result = validate_catalog(conn)
        assert not result["valid"]
        assert any("Vote totals" in i for i in result["issues"])

    def test_valid_after_votes(self, conn, repo):
        load_catalog(conn, [entry(1, "bulbasaur"), entry(2, "ivysaur")])
        repo.record_vote(1, 2)
        result = validate_catalog(conn)
        assert result["valid"], result["issues"]
        assert result["stats"] == {"pokemon": 2, "up_votes": 1, "down_votes": 1}


class TestCatalogTransaction:
    def test_frame_unregistered_after_load(self, conn):
        load_catalog(conn, [entry(1, "bulbasaur")])
        with pytest.raises(duckdb.CatalogException):
            conn.execute("SELECT * FROM catalog_df")

    def test_failed_insert_rolls_back(self, conn, monkeypatch):
        load_catalog(conn, [entry(1, "bulbasaur")])
        # pretend nothing exists so id 1 collides on the primary key
        monkeypatch.setattr(catalog, "get_existing_ids", lambda _conn: set())

        with pytest.raises(duckdb.ConstraintException):
            load_catalog(conn, [entry(1, "bulbasaur"), entry(2, "ivysaur")])

        assert conn.execute("SELECT id FROM pokemon").fetchall() == [(1,)]
        with pytest.raises(duckdb.CatalogException):
            conn.execute("SELECT * FROM catalog_df")
