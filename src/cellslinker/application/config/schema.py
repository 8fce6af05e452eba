"""Pydantic configuration schema models for room libraries.

A room library file declares named room template collections and, optionally,
a layout script that drives LevelGraphBuilder. It uses Pydantic v2 for
validation.

The DoorDirectionality enum is reused from the domain layer to keep the JSON
values and the domain values identical.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from cellslinker.domain.value_objects import DoorDirectionality

# Supported schema versions for room library files
# Version 1.0: Collections, templates, doors and layout scripts
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class DoorEdgeConfig(str, Enum):
    """Door edges for configuration.

    Mirrors the domain DoorEdge, whose integer ordinals are not meant to be
    written in files.
    """

    NORTH = "north"
    EAST = "east"
    WEST = "west"
    SOUTH = "south"


class RectConfig(BaseModel):
    """Room rectangle with inclusive tile bounds."""

    model_config = ConfigDict(extra="forbid")

    x_min: int
    y_min: int
    x_max: int
    y_max: int

    @model_validator(mode="after")
    def validate_bounds(self) -> "RectConfig":
        """Ensure max bounds are not below min bounds."""
        if self.x_max < self.x_min or self.y_max < self.y_min:
            raise ValueError("x_max/y_max must be greater than or equal to x_min/y_min")
        return self


class DoorConfig(BaseModel):
    """Configuration for a doorway in a room template.

    Attributes:
        position: Anchor tile [x, y] relative to the room origin
        edge: Cardinal edge the door is on
        directionality: bidirectional, entrance_only or exit_only
        width: Opening width in tiles (at least 1)
    """

    model_config = ConfigDict(extra="forbid")

    position: tuple[int, int]
    edge: DoorEdgeConfig
    directionality: DoorDirectionality = DoorDirectionality.BIDIRECTIONAL
    width: int = Field(default=2, ge=1)


class RoomTemplateConfig(BaseModel):
    """Configuration for a single room template."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1)
    rect: RectConfig
    doors: list[DoorConfig] = Field(default_factory=list)
    allow_mirror: bool = False


class RoomCollectionConfig(BaseModel):
    """A named collection of interchangeable room templates."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1)
    templates: list[RoomTemplateConfig] = Field(default_factory=list)

    @field_validator("templates")
    @classmethod
    def validate_unique_template_names(
        cls, v: list[RoomTemplateConfig]
    ) -> list[RoomTemplateConfig]:
        """Ensure template names are unique within the collection."""
        seen: set[str] = set()
        for template in v:
            if template.name in seen:
                raise ValueError(f"Duplicate template name '{template.name}'")
            seen.add(template.name)
        return v


# =============================================================================
# Layout script steps
# =============================================================================


class AddStep(BaseModel):
    """Add a room slot fed by a collection below the head."""

    model_config = ConfigDict(extra="forbid")

    op: Literal["add"]
    collection: str = Field(..., min_length=1)


class LabelStep(BaseModel):
    """Bind a label to the head."""

    model_config = ConfigDict(extra="forbid")

    op: Literal["label"]
    name: str = Field(..., min_length=1)


class JumpToStep(BaseModel):
    """Move the head to a labeled node."""

    model_config = ConfigDict(extra="forbid")

    op: Literal["jump_to"]
    name: str = Field(..., min_length=1)


class EnterScopeStep(BaseModel):
    model_config = ConfigDict(extra="forbid")

    op: Literal["enter_scope"]


class ExitScopeStep(BaseModel):
    model_config = ConfigDict(extra="forbid")

    op: Literal["exit_scope"]


class ForkStep(BaseModel):
    """Run nested steps on a forked builder.

    The fork starts at ``at_label`` (or the current head) with its own,
    empty label map and scope stack.
    """

    model_config = ConfigDict(extra="forbid")

    op: Literal["fork"]
    at_label: str | None = None
    steps: list["LayoutStep"] = Field(default_factory=list)


LayoutStep = Annotated[
    Union[AddStep, LabelStep, JumpToStep, EnterScopeStep, ExitScopeStep, ForkStep],
    Field(discriminator="op"),
]

ForkStep.model_rebuild()


def iter_add_steps(steps: list[LayoutStep]):
    """Yield every AddStep in ``steps``, including those nested in forks."""
    for step in steps:
        if isinstance(step, AddStep):
            yield step
        elif isinstance(step, ForkStep):
            yield from iter_add_steps(step.steps)


class RoomLibraryConfiguration(BaseModel):
    """Root configuration model for room library files.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        collections: Room template collections, unique by name
        layout: Optional layout script run by LevelGraphBuilder

    Example:
        >>> config = RoomLibraryConfiguration(
        ...     schema_version="1.0",
        ...     collections=[RoomCollectionConfig(name="start")],
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    collections: list[RoomCollectionConfig] = Field(..., min_length=1)
    layout: list[LayoutStep] = Field(default_factory=list)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions within a supported major version are accepted
        for forward compatibility.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )

    @field_validator("collections")
    @classmethod
    def validate_unique_collection_names(
        cls, v: list[RoomCollectionConfig]
    ) -> list[RoomCollectionConfig]:
        """Ensure collection names are unique."""
        seen: set[str] = set()
        for collection in v:
            if collection.name in seen:
                raise ValueError(f"Duplicate collection name '{collection.name}'")
            seen.add(collection.name)
        return v

    @model_validator(mode="after")
    def validate_layout_collections(self) -> "RoomLibraryConfiguration":
        """Ensure every add step references a declared collection."""
        known = {collection.name for collection in self.collections}
        for step in iter_add_steps(self.layout):
            if step.collection not in known:
                raise ValueError(
                    f"Layout references unknown collection '{step.collection}'"
                )
        return self
