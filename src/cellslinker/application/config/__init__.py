"""Configuration schema and loading system for room libraries.

This package provides JSON-based loading and validation of room template
collections and layout scripts.

Public API:
    - RoomLibraryConfiguration: Root configuration model
    - RoomCollectionConfig / RoomTemplateConfig / DoorConfig / RectConfig
    - Layout steps: AddStep, LabelStep, JumpToStep, EnterScopeStep,
      ExitScopeStep, ForkStep
    - load_library / load_library_from_dict: Load and validate a library
    - ConfigError: Exception for configuration errors
    - config_to_collections / apply_layout: Build domain objects
    - validate_library: Domain-level checks with errors and warnings

Example:
    >>> from pathlib import Path
    >>> from cellslinker.application.config import load_library, ConfigError
    >>>
    >>> try:
    ...     config = load_library(Path("dungeon.json"))
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from cellslinker.application.config.adapter import (
    apply_layout,
    config_to_collections,
    config_to_door,
    config_to_rect,
    config_to_template,
)
from cellslinker.application.config.loader import (
    ConfigError,
    load_library,
    load_library_from_dict,
)
from cellslinker.application.config.schema import (
    SUPPORTED_VERSIONS,
    AddStep,
    DoorConfig,
    DoorEdgeConfig,
    EnterScopeStep,
    ExitScopeStep,
    ForkStep,
    JumpToStep,
    LabelStep,
    LayoutStep,
    RectConfig,
    RoomCollectionConfig,
    RoomLibraryConfiguration,
    RoomTemplateConfig,
)
from cellslinker.application.config.validator import (
    ValidationIssue,
    ValidationResult,
    check_collections,
    check_layout,
    validate_library,
)

__all__ = [
    "AddStep",
    "ConfigError",
    "DoorConfig",
    "DoorEdgeConfig",
    "EnterScopeStep",
    "ExitScopeStep",
    "ForkStep",
    "JumpToStep",
    "LabelStep",
    "LayoutStep",
    "RectConfig",
    "RoomCollectionConfig",
    "RoomLibraryConfiguration",
    "RoomTemplateConfig",
    "SUPPORTED_VERSIONS",
    "ValidationIssue",
    "ValidationResult",
    "apply_layout",
    "check_collections",
    "check_layout",
    "config_to_collections",
    "config_to_door",
    "config_to_rect",
    "config_to_template",
    "load_library",
    "load_library_from_dict",
    "validate_library",
]
