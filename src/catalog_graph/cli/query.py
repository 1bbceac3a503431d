"""``catalog-graph query`` — run one GraphQL query against the store."""

import json
from pathlib import Path
from typing import Optional

import typer

from ..exceptions import SchemaValidationError, StoreUnavailable
from ..graph.execute import execute_query
from ..store.database import DocumentStore
from . import app
from ._common import console, resolve_config


@app.command()
def query(
    document: str = typer.Argument(..., help="GraphQL query document"),
    variables: Optional[str] = typer.Option(None, "--variables", help="Variables as a JSON object"),
    database_uri: Optional[str] = typer.Option(None, "--database-uri", help="Store connection string"),
    config: Optional[Path] = typer.Option(None, "-c", "--config", help="Config file"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logging"),
) -> None:
    """Execute a query and print the JSON response."""
    settings = resolve_config(config=config, database_uri=database_uri, verbose=verbose)

    try:
        variable_values = json.loads(variables) if variables else None
    except json.JSONDecodeError as exc:
        console.print(f"[red]Invalid --variables JSON: {exc}[/red]")
        raise typer.Exit(2)

    try:
        with DocumentStore(settings.database_uri) as store:
            response = execute_query(store, document, variable_values)
    except (SchemaValidationError, StoreUnavailable) as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)

    typer.echo(json.dumps(response, indent=2))
