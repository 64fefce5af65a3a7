"""Pokemon domain entities."""

from dataclasses import dataclass
from datetime import datetime

from app.models.common import BaseEntity


@dataclass
class Pokemon(BaseEntity):
    """Catalog entry with accumulated vote counters."""

    id: int
    name: str
    dex_id: int
    up_votes: int = 0
    down_votes: int = 0
    inserted_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class RankingRow(BaseEntity):
    """Derived ranking row - computed per request, never stored."""

    name: str
    id: int
    dex_id: int
    up_votes: int
    down_votes: int
    total_votes: int
    win_percentage: float
    loss_percentage: float
