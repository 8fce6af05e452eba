"""Room library validation beyond the schema.

The schema catches structural problems. This module adds checks that need
the domain model:

- Layout scripts are dry-run on a LevelGraphBuilder; unknown labels and
  unbalanced scopes are errors.
- Doors whose anchor is off their declared edge are warnings. They are
  still indexed, only flagged.
- Rooms with no entrance door and empty collections are warnings, since they
  can never be picked by the placement stage.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from cellslinker.application.config.adapter import (
    apply_layout,
    config_to_collections,
)
from cellslinker.application.config.schema import (
    ForkStep,
    LayoutStep,
    RoomLibraryConfiguration,
)
from cellslinker.domain import (
    CellsLinkerError,
    LevelGraphBuilder,
    RoomTemplateCollection,
    build_room_candidates,
)


@dataclass
class ValidationIssue:
    """A single validation finding.

    Attributes:
        path: JSON path to the field concerned (e.g., "layout[3]")
        message: Human-readable description of the problem
        detail: The offending value for errors, a suggested fix for warnings
    """

    path: str
    message: str
    detail: Any = None


@dataclass
class ValidationResult:
    """Errors block use of the library; warnings are advisory."""

    errors: list[ValidationIssue] = field(default_factory=list)
    warnings: list[ValidationIssue] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 clean, 1 errors, 2 warnings only."""
        if self.errors:
            return 1
        return 2 if self.warnings else 0

    def add_error(self, path: str, message: str, value: Any = None) -> "ValidationResult":
        self.errors.append(ValidationIssue(path, message, value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        self.warnings.append(ValidationIssue(path, message, suggestion))
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def check_collections(
    collections: Mapping[str, RoomTemplateCollection],
) -> ValidationResult:
    """Flag empty collections, misplaced doors and rooms with no entrance."""
    result = ValidationResult()
    for c_index, collection in enumerate(collections.values()):
        c_path = f"collections[{c_index}]"
        if len(collection) == 0:
            result.add_warning(
                c_path,
                f"Collection '{collection.name}' has no templates",
                "Add at least one room template or remove the collection",
            )
        for t_index, room in enumerate(collection):
            t_path = f"{c_path}.templates[{t_index}]"
            for d_index in room.invalid_doors():
                door = room.doors[d_index]
                result.add_warning(
                    f"{t_path}.doors[{d_index}]",
                    f"Door at ({door.local_position.x}, {door.local_position.y}) "
                    f"is not on the {door.edge.name.lower()} edge of room '{room.name}'",
                    "Move the door anchor onto the room rectangle edge",
                )
            if not build_room_candidates(room):
                result.add_warning(
                    t_path,
                    f"Room '{room.name}' has no door usable as an entrance",
                    "The room can only be used as the level root",
                )
    return result


def check_layout(
    steps: list[LayoutStep],
    collections: Mapping[str, RoomTemplateCollection],
) -> ValidationResult:
    """Dry-run the layout script and report the first failing step per branch."""
    result = ValidationResult()
    _dry_run(LevelGraphBuilder(), steps, collections, "layout", result)
    return result


def _dry_run(
    builder: LevelGraphBuilder,
    steps: list[LayoutStep],
    collections: Mapping[str, RoomTemplateCollection],
    path: str,
    result: ValidationResult,
) -> bool:
    for index, step in enumerate(steps):
        step_path = f"{path}[{index}]"
        try:
            if isinstance(step, ForkStep):
                branch = builder.fork(step.at_label)
                if not _dry_run(branch, step.steps, collections, f"{step_path}.steps", result):
                    return False
            else:
                apply_layout(builder, [step], collections)
        except CellsLinkerError as e:
            result.add_error(step_path, str(e), step.op)
            return False
    return True


def validate_library(config: RoomLibraryConfiguration) -> ValidationResult:
    """Run every library check.

    Args:
        config: A RoomLibraryConfiguration that passed schema validation.

    Returns:
        ValidationResult containing all errors and warnings found.
    """
    collections = config_to_collections(config)
    result = check_collections(collections)
    result.merge(check_layout(config.layout, collections))
    return result
