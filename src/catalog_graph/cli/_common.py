"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ..config import ServerConfig, load_config
from ..exceptions import ConfigurationError
from ..logging_config import setup_logging

console = Console()


def resolve_config(
    config: Optional[Path] = None,
    database_uri: Optional[str] = None,
    port: Optional[int] = None,
    host: Optional[str] = None,
    verbose: bool = False,
) -> ServerConfig:
    """Build config from CLI options and set up logging.

    Exits with status 1 if the configuration is invalid.
    """
    overrides = {"database_uri": database_uri, "port": port, "host": host}
    if verbose:
        overrides["verbose"] = True
    try:
        settings = load_config(config_file=config, **overrides)
    except ConfigurationError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)
    setup_logging(settings.verbosity, log_file=settings.log_file)
    return settings
