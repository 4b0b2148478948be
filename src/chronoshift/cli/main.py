from __future__ import annotations

import logging
from typing import Annotated

import typer

from ..global_config import PACKAGE_NAME
from .base import configure_logging
from .commands.calc import app as calc_app
from .commands.tree import tree_command
from .commands.tz import app as tz_app

configure_logging()
app = typer.Typer(
    name=PACKAGE_NAME,
    help="Calendar arithmetic and timezone-offset engine",
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.add_typer(calc_app, name="calc")
app.add_typer(tz_app, name="tz")


@app.callback()
def root(
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Enable debug logging"),
    ] = False,
) -> None:
    """Calendar arithmetic and timezone-offset engine."""
    configure_logging(logging.DEBUG if verbose else logging.INFO)


@app.command("tree")
def tree(
    filter_verb: Annotated[
        str | None,
        typer.Option(
            "-f",
            "--filter",
            help="Filter by command or group name (e.g., 'tz', 'diff')",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Show descriptions and options"),
    ] = False,
) -> None:
    """Display all CLI commands in a hierarchical tree.

    By default shows only command names (compact mode). Use --verbose to see
    descriptions and options.

    Args:
        filter_verb: Optional command or group name to filter by.
        verbose: If True, show help text and options (default is compact mode).
    """
    tree_command(typer_app=app, filter_verb=filter_verb, verbose=verbose)


def main() -> None:
    """Main entry point for package CLI.

    Invokes the Typer application, which handles command parsing and
    execution.

    Side Effects:
        - Processes CLI arguments and executes commands.
        - May exit with non-zero code on errors.
    """
    app()


if __name__ == "__main__":
    main()
