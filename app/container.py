"""Dependency Injection container - initialized at app startup."""

from loguru import logger

from app.repositories.db import close_all_db, get_db, get_db_path
from app.repositories.pokemon import PokemonRepository
from app.services.ranking import RankingService
from app.services.voting import VotingService


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self) -> None:
        """Initialize all dependencies. Call once at app startup.

        Opens the store connection eagerly so an unreachable database fails
        startup instead of the first request.
        """
        if self._initialized:
            return

        get_db()
        logger.info("Store ready: {}", get_db_path())

        # Repositories (singletons)
        self._pokemon_repo = PokemonRepository()

        # Services (with injected repos)
        self.ranking = RankingService(repo=self._pokemon_repo)
        self.voting = VotingService(repo=self._pokemon_repo)

        self._initialized = True

    @property
    def pokemon_repo(self) -> PokemonRepository:
        return self._pokemon_repo

    def close(self) -> None:
        """Close every open store connection (worker threads included) and allow re-init."""
        closed = close_all_db()
        logger.info("Store closed ({} connections)", closed)
        self._initialized = False


# Global container instance
container = Container()
