"""Shared fixtures - every test gets its own DuckDB file."""

import pytest

import settings
from app.container import container
from app.repositories import PokemonRepository, close_db, set_db_path

SEED = [
    # id, name, dex_id, up_votes, down_votes
    (1, "snorlax", 143, 8, 2),
    (2, "jigglypuff", 39, 6, 0),
    (3, "voltorb", 100, 0, 0),
]


@pytest.fixture
def db_path(tmp_path):
    path = tmp_path / "roundest.duckdb"
    set_db_path(path)
    yield path
    container.close()
    close_db()
    set_db_path(settings.DB_PATH)


@pytest.fixture
def repo(db_path) -> PokemonRepository:
    return PokemonRepository()


@pytest.fixture
def seeded(repo) -> PokemonRepository:
    for row in SEED:
        repo.add(*row)
    return repo


@pytest.fixture
def app_container(seeded):
    container.init()
    return container
