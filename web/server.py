"""
web/server.py - FastAPI transport for the GraphQL query surface.

Endpoints:
    POST /graphql   Execute a GraphQL request ({query, variables, operationName})
    GET  /graphql   Execute from query params, or serve GraphiQL to browsers
    GET  /health    Store health check
"""

import json
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from graphql import GraphQLSchema, graphql_sync
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

import settings
from app.container import container
from app.repositories.db import get_db_path
from web.gql import SurfaceNames, build_schema, get_names

GRAPHIQL_HTML = """<!DOCTYPE html>
<html>
  <head>
    <title>Roundest GraphiQL</title>
    <link rel="stylesheet" href="https://unpkg.com/graphiql/graphiql.min.css" />
  </head>
  <body style="margin: 0;">
    <div id="graphiql" style="height: 100vh;"></div>
    <script crossorigin src="https://unpkg.com/react/umd/react.production.min.js"></script>
    <script crossorigin src="https://unpkg.com/react-dom/umd/react-dom.production.min.js"></script>
    <script crossorigin src="https://unpkg.com/graphiql/graphiql.min.js"></script>
    <script>
      const fetcher = GraphiQL.createFetcher({ url: window.location.pathname });
      ReactDOM.render(React.createElement(GraphiQL, { fetcher }), document.getElementById("graphiql"));
    </script>
  </body>
</html>
"""


class PrettyJSONResponse(JSONResponse):
    """JSON response indented for humans when GRAPHQL_PRETTY is on."""

    def render(self, content: Any) -> bytes:
        if not settings.GRAPHQL_PRETTY:
            return super().render(content)
        return json.dumps(content, ensure_ascii=False, indent=2).encode("utf-8")


class GraphQLRequest(BaseModel):
    """GraphQL POST body."""

    model_config = ConfigDict(populate_by_name=True)

    query: str | None = None
    variables: dict[str, Any] | None = None
    operation_name: str | None = Field(default=None, alias="operationName")


def _error(message: str, status_code: int = 400) -> JSONResponse:
    return PrettyJSONResponse({"errors": [{"message": message}]}, status_code=status_code)


def execute(schema: GraphQLSchema, req: GraphQLRequest) -> JSONResponse:
    """Run one GraphQL request and marshal the result."""
    if not req.query:
        return _error("Must provide query string.")

    result = graphql_sync(
        schema,
        req.query,
        variable_values=req.variables,
        operation_name=req.operation_name,
    )
    if result.errors:
        for err in result.errors:
            logger.warning("GraphQL error: {} (path={})", err.message, err.path)

    status_code = 200 if result.data is not None else 400
    return PrettyJSONResponse(result.formatted, status_code=status_code)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    try:
        container.init()
    except Exception as e:
        logger.critical("Could not connect to database {}: {}", get_db_path(), e)
        raise
    logger.info("Server is running on http://{}:{}{}", settings.HOST, settings.PORT, settings.GRAPHQL_PATH)
    yield
    container.close()


def create_app(names: SurfaceNames | None = None) -> FastAPI:
    """Build the HTTP app around one GraphQL schema."""
    schema = build_schema(names or get_names(settings.SCHEMA_NAMES))

    app = FastAPI(title="Roundest", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=settings.CORS_METHODS,
        allow_headers=settings.CORS_HEADERS,
    )

    @app.post(settings.GRAPHQL_PATH)
    def graphql_post(body: GraphQLRequest) -> JSONResponse:
        return execute(schema, body)

    @app.get(settings.GRAPHQL_PATH)
    def graphql_get(
        request: Request,
        query: str | None = None,
        variables: str | None = None,
        operationName: str | None = None,  # noqa: N803
    ):
        if query is None and settings.GRAPHIQL and "text/html" in request.headers.get("accept", ""):
            return HTMLResponse(GRAPHIQL_HTML)

        parsed = None
        if variables:
            try:
                parsed = json.loads(variables)
            except json.JSONDecodeError:
                return _error("Variables are invalid JSON.")
            if not isinstance(parsed, dict):
                return _error("Variables must be a JSON object.")

        return execute(schema, GraphQLRequest(query=query, variables=parsed, operation_name=operationName))

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok", "pokemon": container.pokemon_repo.count()}

    return app


app = create_app()
