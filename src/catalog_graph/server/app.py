"""Starlette ASGI application serving the catalog GraphQL endpoint."""

from __future__ import annotations

import logging
from pathlib import Path

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse, PlainTextResponse, Response
from starlette.routing import Route
from strawberry.asgi import GraphQL

from ..graph.schema import schema
from ..store.database import DocumentStore

logger = logging.getLogger(__name__)

_PKG_DIR = Path(__file__).parent
_TEMPLATE_DIR = _PKG_DIR / "templates"

# Read on first request to /playground
_PLAYGROUND_HTML: str | None = None


def _get_html() -> str:
    """Load the playground HTML template (cached after first read)."""
    global _PLAYGROUND_HTML  # noqa: PLW0603
    if _PLAYGROUND_HTML is None:
        _PLAYGROUND_HTML = (_TEMPLATE_DIR / "playground.html").read_text()
    return _PLAYGROUND_HTML


class CatalogGraphQL(GraphQL):
    """Strawberry ASGI handler that exposes ``app.state.store`` to resolvers."""

    async def get_context(self, request: Request, response: Response | None = None) -> dict:
        return {"request": request, "response": response, "store": request.app.state.store}


def create_app(store: DocumentStore) -> Starlette:
    """Build the Starlette application wired to *store*.

    Routes:
        GET /hello: plain-text health check
        GET, POST /graphql: GraphQL endpoint (GraphiQL in a browser)
        GET /playground: standalone query console
    """

    async def hello(request: Request) -> PlainTextResponse:
        return PlainTextResponse("Hello World!")

    async def playground(request: Request) -> HTMLResponse:
        return HTMLResponse(_get_html())

    graphql_app = CatalogGraphQL(schema, graphql_ide="graphiql")

    routes = [
        Route("/hello", hello),
        Route("/graphql", graphql_app),
        Route("/playground", playground),
    ]

    app = Starlette(routes=routes)
    app.state.store = store
    logger.debug("GraphQL app created for store %s", store.uri)
    return app
