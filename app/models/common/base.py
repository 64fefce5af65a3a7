"""Base entity class for all domain entities."""

from collections.abc import Sequence
from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class BaseEntity:
    """Base class for all entities."""

    def to_dict(self) -> dict[str, Any]:
        """Convert entity to dictionary."""
        return asdict(self)

    @classmethod
    def from_row(cls, row: Sequence[Any]):
        """Build entity from a DB row selected in field declaration order."""
        return cls(*row)
