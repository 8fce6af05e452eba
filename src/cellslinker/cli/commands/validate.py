"""Validate command for checking room library files.

This module provides the `validate` command that checks a JSON room library
for schema errors, layout script errors, and door placement advisories.
"""

from pathlib import Path
from typing import Annotated

import typer

from cellslinker.application.config import (
    ConfigError,
    ValidationIssue,
    ValidationResult,
    load_library,
    validate_library,
)


def validate_command(
    library_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON room library file to validate"),
    ],
) -> None:
    """Validate a room library file.

    Checks the file for:
    - JSON syntax errors
    - Schema validation errors (missing fields, duplicate names, etc.)
    - Layout script errors (unknown labels, unbalanced scopes)
    - Door advisories (doors off their edge, rooms with no entrance)

    Exit codes:
        0 - Library is valid with no warnings
        1 - Library has errors (cannot be used)
        2 - Library is valid but has warnings

    Example:
        cellslinker validate dungeon.json
    """
    typer.echo(f"Validating {library_file}...")
    typer.echo()

    try:
        config = load_library(library_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    result = validate_library(config)
    _display_validation_result(result)
    raise typer.Exit(code=result.exit_code)


def display_load_error(error: ConfigError) -> None:
    """Display a room library loading error."""
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        detail = error.details[0]
        typer.echo("  Invalid JSON syntax", err=True)
        typer.echo(
            f"    Line {detail['line']}, Column {detail['column']}: {detail['message']}",
            err=True,
        )
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)


def _echo_issues(
    heading: str, issues: list[ValidationIssue], detail_label: str, err: bool
) -> None:
    if not issues:
        return
    typer.echo(heading, err=err)
    for issue in issues:
        typer.echo(f"  {issue.path}: {issue.message}", err=err)
        if issue.detail is not None:
            typer.echo(f"    {detail_label}: {issue.detail}", err=err)
    typer.echo()


def _display_validation_result(result: ValidationResult) -> None:
    _echo_issues("Errors:", result.errors, "Value", err=True)
    _echo_issues("Warnings:", result.warnings, "Suggestion", err=False)

    if result.errors:
        typer.echo(
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)",
            err=True,
        )
    elif result.warnings:
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Room library is valid.")
