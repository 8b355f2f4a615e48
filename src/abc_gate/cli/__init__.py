"""CLI entry point. Registers all subcommands."""

import typer

app = typer.Typer(
    name="abc-gate",
    help="abc-gate - ABC complexity gate for Ruby",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import subcommands to register them
from .check import check as _check  # noqa: F401, E402
from .version import version as _version  # noqa: F401, E402
