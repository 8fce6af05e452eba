"""Lookup command for querying the room candidate index."""

from pathlib import Path
from typing import Annotated

import typer

from cellslinker.application import RoomLibrary
from cellslinker.application.config import ConfigError, DoorEdgeConfig, load_library
from cellslinker.cli.commands.validate import display_load_error
from cellslinker.domain import TemplateNotFoundError


def lookup_command(
    library_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON room library file"),
    ],
    collection: Annotated[
        str,
        typer.Option("--collection", "-c", help="Name of the collection to query"),
    ],
    edge: Annotated[
        DoorEdgeConfig,
        typer.Option("--edge", "-e", help="Edge the entrance must be on"),
    ],
    min_exits: Annotated[
        int,
        typer.Option("--min-exits", "-m", min=0, help="Minimum estimated exit count"),
    ] = 0,
    exit_facing: Annotated[
        bool,
        typer.Option(
            "--exit",
            help="Treat EDGE as the facing of the exit door to connect to",
        ),
    ] = False,
) -> None:
    """List rooms of a collection that can be entered from an edge.

    Examples:
        cellslinker lookup dungeon.json -c corridors --edge south
        cellslinker lookup dungeon.json -c corridors --edge north --exit --min-exits 1
    """
    try:
        library = RoomLibrary.from_config(load_library(library_file))
        lookup = library.lookup(collection)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)
    except TemplateNotFoundError as e:
        typer.echo(f"Error: {e}", err=True)
        typer.echo(f"Available collections: {', '.join(library.names)}", err=True)
        raise typer.Exit(code=1)

    if exit_facing:
        candidates = list(lookup.candidates_for_exit(edge.value, min_exits))
    else:
        candidates = list(lookup.candidates_for_edge(edge.value, min_exits))

    if not candidates:
        typer.echo("No candidates found.")
        return

    max_name_width = max(len(c.room.name) for c in candidates)
    for candidate in candidates:
        entrances = ", ".join(str(i) for i in candidate.entrances)
        typer.echo(
            f"  {candidate.room.name:<{max_name_width}}  "
            f"{candidate.edge.name.lower():<5}  "
            f"entrances=[{entrances}]  exits~{candidate.exit_count}"
        )
    typer.echo()
    typer.echo(f"{len(candidates)} candidate(s)")
