"""GraphQL query surface.

One schema builder serves every client naming convention: field names come
from a `SurfaceNames` preset, the resolvers are shared.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from graphql import (
    GraphQLArgument,
    GraphQLBoolean,
    GraphQLField,
    GraphQLFloat,
    GraphQLInt,
    GraphQLList,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLResolveInfo,
    GraphQLSchema,
    GraphQLString,
)

from web.api import pokemon as views


@dataclass(frozen=True)
class SurfaceNames:
    """Client-facing names of the query surface."""

    list_field: str = "list"
    ranked_field: str = "rankedList"
    pair_field: str = "randomPair"
    vote_field: str = "vote"
    first_field: str = "entityOne"
    second_field: str = "entityTwo"
    rank_field: str = "externalRank"
    entity_type: str = "Pokemon"
    result_type: str = "Result"
    pair_type: str = "RandomPair"
    vote_type: str = "VoteResult"


PRESETS: dict[str, SurfaceNames] = {
    "default": SurfaceNames(),
    # legacy client field names (pokemon, results, pokemonOne, dexId)
    "pokemon": SurfaceNames(
        list_field="pokemon",
        ranked_field="results",
        first_field="pokemonOne",
        second_field="pokemonTwo",
        rank_field="dexId",
    ),
}


def get_names(preset: str) -> SurfaceNames:
    """Look up a naming preset by name."""
    try:
        return PRESETS[preset]
    except KeyError:
        raise ValueError(f"Unknown schema names preset: {preset!r}. Choose from {sorted(PRESETS)}") from None


def _attr(name: str) -> Callable[[Any, GraphQLResolveInfo], Any]:
    def resolve(obj: Any, _info: GraphQLResolveInfo) -> Any:
        return getattr(obj, name)

    return resolve


def _field(type_, attr: str) -> GraphQLField:
    return GraphQLField(type_, resolve=_attr(attr))


def _resolve_list(_root, _info):
    return views.get_pokemon()


def _resolve_ranked(_root, _info):
    return views.get_results()


def _resolve_pair(_root, _info):
    return views.get_random_pair()


def _resolve_vote(_root, _info, upvote_id: int, downvote_id: int):
    return views.vote(upvote_id, downvote_id)


def build_schema(names: SurfaceNames | None = None) -> GraphQLSchema:
    """Build the executable schema for a naming preset."""
    names = names or SurfaceNames()

    entity_type = GraphQLObjectType(
        names.entity_type,
        lambda: {
            "id": _field(GraphQLInt, "id"),
            "name": _field(GraphQLString, "name"),
            names.rank_field: _field(GraphQLInt, "dex_id"),
            "upVotes": _field(GraphQLInt, "up_votes"),
            "downVotes": _field(GraphQLInt, "down_votes"),
        },
    )

    result_type = GraphQLObjectType(
        names.result_type,
        lambda: {
            "name": _field(GraphQLString, "name"),
            "id": _field(GraphQLInt, "id"),
            names.rank_field: _field(GraphQLInt, "dex_id"),
            "upVotes": _field(GraphQLInt, "up_votes"),
            "downVotes": _field(GraphQLInt, "down_votes"),
            "totalVotes": _field(GraphQLInt, "total_votes"),
            "winPercentage": _field(GraphQLFloat, "win_percentage"),
            "lossPercentage": _field(GraphQLFloat, "loss_percentage"),
        },
    )

    pair_type = GraphQLObjectType(
        names.pair_type,
        lambda: {
            names.first_field: _field(entity_type, "first"),
            names.second_field: _field(entity_type, "second"),
        },
    )

    vote_type = GraphQLObjectType(
        names.vote_type,
        lambda: {"success": _field(GraphQLBoolean, "success")},
    )

    query = GraphQLObjectType(
        "RootQuery",
        lambda: {
            names.list_field: GraphQLField(GraphQLList(entity_type), resolve=_resolve_list),
            names.ranked_field: GraphQLField(GraphQLList(result_type), resolve=_resolve_ranked),
            names.pair_field: GraphQLField(pair_type, resolve=_resolve_pair),
        },
    )

    mutation = GraphQLObjectType(
        "Mutation",
        lambda: {
            names.vote_field: GraphQLField(
                vote_type,
                args={
                    "upvoteId": GraphQLArgument(GraphQLNonNull(GraphQLInt), out_name="upvote_id"),
                    "downvoteId": GraphQLArgument(GraphQLNonNull(GraphQLInt), out_name="downvote_id"),
                },
                resolve=_resolve_vote,
            ),
        },
    )

    return GraphQLSchema(query=query, mutation=mutation)
