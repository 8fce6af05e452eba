"""Typer CLI for inspecting room libraries and level layouts."""

import logging
import os
from typing import Annotated

import typer

from cellslinker.cli.commands import graph_command, lookup_command, validate_command

app = typer.Typer(
    name="cellslinker",
    help="Inspect room template libraries, candidate lookups and level graphs.",
)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Configure logging for all commands.

    The level comes from --verbose, else from the LOGLEVEL environment
    variable (default WARNING).
    """
    if verbose:
        level = logging.DEBUG
    else:
        log_level = os.environ.get("LOGLEVEL", "WARNING").upper()
        level = getattr(logging, log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


app.command(name="validate")(validate_command)
app.command(name="lookup")(lookup_command)
app.command(name="graph")(graph_command)


if __name__ == "__main__":
    app()
