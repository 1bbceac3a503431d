"""``catalog-graph seed`` — fill the store with fake data."""

import logging
from pathlib import Path
from typing import Optional

import typer
from faker import Faker
from rich.table import Table

from ..exceptions import StoreUnavailable
from ..seeding import seed_database
from ..store.database import DocumentStore
from . import app
from ._common import console, resolve_config

logger = logging.getLogger(__name__)


@app.command()
def seed(
    database_uri: Optional[str] = typer.Option(None, "--database-uri", help="Store connection string"),
    seed_value: Optional[int] = typer.Option(None, "--seed", help="Random seed for repeatable data"),
    config: Optional[Path] = typer.Option(None, "-c", "--config", help="Config file"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logging"),
) -> None:
    """Insert a demo user plus random categories, products and orders."""
    settings = resolve_config(config=config, database_uri=database_uri, verbose=verbose)

    fake = Faker()
    if seed_value is not None:
        fake.seed_instance(seed_value)

    try:
        with DocumentStore(settings.database_uri) as store:
            summary = seed_database(store, fake)
    except StoreUnavailable as exc:
        logger.error("An error occurred while seeding: %s", exc)
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)

    table = Table(title="Seed summary")
    table.add_column("Entity", style="bold")
    table.add_column("Created", justify="right")
    table.add_column("Skipped", justify="right")
    for entity, created in summary.created.items():
        table.add_row(entity, str(created), str(summary.skipped[entity]))
    console.print(table)
