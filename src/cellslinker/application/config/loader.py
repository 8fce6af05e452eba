"""Room library file loader with comprehensive error handling.

This module loads and parses JSON room library files. It handles file system
errors, JSON parsing errors, and Pydantic validation errors with clear,
actionable error messages.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from cellslinker.application.config.schema import RoomLibraryConfiguration

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration-related errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, permission_denied,
            file_read_error, json_parse, validation)
        path: Path to the configuration file (if applicable)
        details: Additional error details (line/column for JSON, validation errors, etc.)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("collections", 0, "templates", 1, "name"))
        'collections[0].templates[1].name'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _validate(data: Any, path: Path | None = None) -> RoomLibraryConfiguration:
    """Validate parsed JSON, turning Pydantic errors into a ConfigError."""
    try:
        return RoomLibraryConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details: list[dict[str, Any]] = []
        lines = ["Room library validation failed:"]
        for err in e.errors():
            json_path = _format_json_path(err["loc"])
            value = err.get("input")
            details.append(
                {
                    "path": json_path,
                    "message": err["msg"],
                    "value": value,
                    "error_type": err["type"],
                }
            )
            line = f"  - {json_path or '<root>'}: {err['msg']}"
            if value is not None and not isinstance(value, (dict, list)):
                line += f" (got: {value!r})"
            lines.append(line)
        raise ConfigError(
            message="\n".join(lines),
            error_type="validation",
            path=path,
            details=details,
        )


def load_library(path: Path) -> RoomLibraryConfiguration:
    """Load and validate a room library from a JSON file.

    Args:
        path: Path to the JSON room library file

    Returns:
        A validated RoomLibraryConfiguration instance

    Raises:
        ConfigError: If the file cannot be loaded or validated. The
            error_type attribute indicates the category:
            - "file_not_found": File does not exist
            - "permission_denied" / "file_read_error": File cannot be read
            - "json_parse": Invalid JSON syntax
            - "validation": Schema validation failed
    """
    if not path.exists():
        raise ConfigError(
            message=f"Room library file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading room library file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading room library file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in room library file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )

    logger.debug(f"Loaded room library JSON from {path}")
    return _validate(data, path)


def load_library_from_dict(data: dict[str, Any]) -> RoomLibraryConfiguration:
    """Load and validate a room library from a dictionary.

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate(data)
