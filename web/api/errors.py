"""API validation helpers."""

from app.errors import NotFoundError, ValidationError

__all__ = [
    "NotFoundError",
    "ValidationError",
    "validate_pokemon_id",
    "validate_vote",
]

MIN_ID = 1


def validate_pokemon_id(pokemon_id: int, arg: str = "id") -> None:
    """Validate an entity id is a positive integer."""
    if isinstance(pokemon_id, bool) or not isinstance(pokemon_id, int) or pokemon_id < MIN_ID:
        raise ValidationError(f"Invalid {arg}: {pokemon_id}. Must be an integer >= {MIN_ID}")


def validate_vote(upvote_id: int, downvote_id: int) -> None:
    """Validate a vote's winner/loser pair."""
    validate_pokemon_id(upvote_id, "upvoteId")
    validate_pokemon_id(downvote_id, "downvoteId")
