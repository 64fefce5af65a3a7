"""Application settings."""

import os
from pathlib import Path

# Database
DB_PATH = os.getenv("ROUNDEST_DB_PATH", "roundest.duckdb")

# Logging
LOG_DIR = Path(os.getenv("ROUNDEST_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("ROUNDEST_LOG_LEVEL", "INFO")

# Server
HOST = os.getenv("ROUNDEST_HOST", "0.0.0.0")
PORT = int(os.getenv("ROUNDEST_PORT", "8080"))
GRAPHQL_PATH = "/graphql"
GRAPHIQL = os.getenv("ROUNDEST_GRAPHIQL", "true").lower() in ("1", "true", "yes")
GRAPHQL_PRETTY = os.getenv("ROUNDEST_GRAPHQL_PRETTY", "true").lower() in ("1", "true", "yes")

# Query surface naming preset: "default" or "pokemon"
SCHEMA_NAMES = os.getenv("ROUNDEST_SCHEMA_NAMES", "default")

# CORS
CORS_ORIGINS = ["*"]
CORS_METHODS = ["GET", "POST", "OPTIONS"]
CORS_HEADERS = ["Accept", "Authorization", "Content-Type"]

# PokeAPI (catalog sync)
API_BASE_URL = os.getenv("POKEAPI_BASE_URL", "https://pokeapi.co/api/v2")
API_TIMEOUT = 30
MAX_CONCURRENT = 10
CATALOG_LIMIT = int(os.getenv("ROUNDEST_CATALOG_LIMIT", "1025"))

# Dashboard
GRAPHQL_URL = os.getenv("ROUNDEST_GRAPHQL_URL", f"http://localhost:{PORT}{GRAPHQL_PATH}")
