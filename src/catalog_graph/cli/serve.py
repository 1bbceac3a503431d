"""``catalog-graph serve`` — run the GraphQL HTTP server."""

import logging
from pathlib import Path
from typing import Optional

import typer

from ..exceptions import StoreUnavailable
from ..store.database import DocumentStore
from . import app
from ._common import console, resolve_config

logger = logging.getLogger(__name__)


@app.command()
def serve(
    port: Optional[int] = typer.Option(None, "-p", "--port", help="Port to listen on [default: 5000]"),
    host: Optional[str] = typer.Option(None, help="Host to bind to"),
    database_uri: Optional[str] = typer.Option(None, "--database-uri", help="Store connection string"),
    config: Optional[Path] = typer.Option(None, "-c", "--config", help="Config file"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logging"),
) -> None:
    """Serve the GraphQL API, /hello and /playground."""
    import uvicorn

    from ..server.app import create_app

    settings = resolve_config(
        config=config, database_uri=database_uri, port=port, host=host, verbose=verbose
    )

    store = DocumentStore(settings.database_uri)
    try:
        store.connect()
    except StoreUnavailable as exc:
        # Keep serving: /hello still answers and queries report the outage.
        logger.error("Could not connect to store: %s", exc)

    asgi_app = create_app(store)
    url = f"http://{settings.host}:{settings.port}"
    console.print(f"Server is running on port {settings.port}")
    console.print(f"[bold]GraphQL[/bold] → [link={url}/graphql]{url}/graphql[/link]")
    console.print("[dim]Press Ctrl+C to stop[/dim]")

    try:
        uvicorn.run(
            asgi_app,
            host=settings.host,
            port=settings.port,
            log_level="info" if settings.verbose else "warning",
            log_config=None,
        )
    except KeyboardInterrupt:
        pass
    finally:
        store.close()
        console.print("\n[dim]Stopped.[/dim]")
