"""CLI entry point — registers all subcommands."""

import typer

app = typer.Typer(
    name="catalog-graph",
    help="catalog-graph - GraphQL catalog/order demo service",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


# Import subcommands to register them
from .serve import serve as _serve  # noqa: F401, E402
from .seed import seed as _seed  # noqa: F401, E402
from .query import query as _query  # noqa: F401, E402
