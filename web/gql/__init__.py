"""GraphQL query surface."""

from web.gql.schema import PRESETS, SurfaceNames, build_schema, get_names

__all__ = [
    "PRESETS",
    "SurfaceNames",
    "build_schema",
    "get_names",
]
