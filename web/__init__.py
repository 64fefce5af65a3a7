"""Web layer - API views, GraphQL surface, HTTP server, dashboard."""
