"""CLI command implementations for the cellslinker application.

This package contains subcommands for the cellslinker CLI:
- validate: Validate a room library file
- lookup: Query the room candidate index of a collection
- graph: Build and print a layout's level graph
"""

from cellslinker.cli.commands.graph import graph_command
from cellslinker.cli.commands.lookup import lookup_command
from cellslinker.cli.commands.validate import validate_command

__all__ = ["graph_command", "lookup_command", "validate_command"]
