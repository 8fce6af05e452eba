"""Graph command for building and printing a layout's level graph."""

from pathlib import Path
from typing import Annotated

import typer

from cellslinker.application import RoomLibrary
from cellslinker.application.config import ConfigError, load_library
from cellslinker.cli.commands.validate import display_load_error
from cellslinker.domain import CellsLinkerError


def graph_command(
    library_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON room library file with a layout"),
    ],
) -> None:
    """Build the layout script of a room library and print the level graph.

    Each line shows a node id and its collection, indented by depth.

    Example:
        cellslinker graph dungeon.json
    """
    try:
        library = RoomLibrary.from_config(load_library(library_file))
        graph = library.build_level_graph()
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)
    except (CellsLinkerError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    for node in graph.walk():
        indent = "  " * node.depth
        typer.echo(f"{indent}#{node.id} {node.template_collection.name}")
    typer.echo()
    typer.echo(f"{graph.count} node(s), {len(graph.leaves())} leaf node(s)")
