"""Pokemon table - the voteable catalog."""

POKEMON_DDL = """
CREATE TABLE IF NOT EXISTS pokemon (
    id BIGINT PRIMARY KEY,
    name VARCHAR NOT NULL,
    dex_id INTEGER NOT NULL,
    up_votes INTEGER NOT NULL DEFAULT 0 CHECK (up_votes >= 0),
    down_votes INTEGER NOT NULL DEFAULT 0 CHECK (down_votes >= 0),
    inserted_at TIMESTAMP NOT NULL DEFAULT CAST(current_timestamp AS TIMESTAMP),
    updated_at TIMESTAMP NOT NULL DEFAULT CAST(current_timestamp AS TIMESTAMP)
)
"""

POKEMON_COLUMNS = "id, name, dex_id, up_votes, down_votes, inserted_at, updated_at"
