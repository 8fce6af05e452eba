"""Adapters from configuration models to domain objects.

These functions turn validated Pydantic models into domain value objects and
entities, and replay layout scripts on a LevelGraphBuilder.
"""

from __future__ import annotations

from typing import Mapping

from cellslinker.application.config.schema import (
    AddStep,
    DoorConfig,
    EnterScopeStep,
    ExitScopeStep,
    ForkStep,
    JumpToStep,
    LabelStep,
    LayoutStep,
    RectConfig,
    RoomLibraryConfiguration,
    RoomTemplateConfig,
)
from cellslinker.domain import (
    LevelGraphBuilder,
    RectInt,
    RoomDoor,
    RoomTemplate,
    RoomTemplateCollection,
    TemplateNotFoundError,
    Vector2Int,
    coerce_edge,
)


def config_to_rect(rect: RectConfig) -> RectInt:
    return RectInt(
        x_min=rect.x_min,
        y_min=rect.y_min,
        x_max=rect.x_max,
        y_max=rect.y_max,
    )


def config_to_door(door: DoorConfig) -> RoomDoor:
    """Convert a door configuration to a RoomDoor value object."""
    x, y = door.position
    return RoomDoor(
        local_position=Vector2Int(x, y),
        edge=coerce_edge(door.edge.value),
        directionality=door.directionality,
        width=door.width,
    )


def config_to_template(template: RoomTemplateConfig) -> RoomTemplate:
    """Convert a room template configuration to a RoomTemplate entity."""
    return RoomTemplate(
        name=template.name,
        doors=tuple(config_to_door(door) for door in template.doors),
        room_rect=config_to_rect(template.rect),
        allow_mirror=template.allow_mirror,
    )


def config_to_collections(
    config: RoomLibraryConfiguration,
) -> dict[str, RoomTemplateCollection]:
    """Convert every collection of the library, keyed by name in file order.

    Example:
        >>> config = load_library(Path("dungeon.json"))
        >>> collections = config_to_collections(config)
        >>> lookup = RoomLookup(collections["corridors"])
    """
    return {
        collection.name: RoomTemplateCollection(
            name=collection.name,
            templates=[config_to_template(t) for t in collection.templates],
        )
        for collection in config.collections
    }


def apply_layout(
    builder: LevelGraphBuilder,
    steps: list[LayoutStep],
    collections: Mapping[str, RoomTemplateCollection],
) -> LevelGraphBuilder:
    """Replay layout steps on ``builder``.

    Fork steps run their nested steps on a forked builder; the outer
    builder's head is not moved by them.

    Args:
        builder: Builder to drive.
        steps: Validated layout steps.
        collections: Collections by name, as returned by config_to_collections.

    Returns:
        ``builder``, for chaining.

    Raises:
        TemplateNotFoundError: If an add step names an unknown collection.
        LabelNotFoundError, EmptyScopeError, BuilderStateError: From the builder.
    """
    for step in steps:
        if isinstance(step, AddStep):
            try:
                collection = collections[step.collection]
            except KeyError:
                raise TemplateNotFoundError(step.collection, kind="collection") from None
            builder.add(collection)
        elif isinstance(step, LabelStep):
            builder.label(step.name)
        elif isinstance(step, JumpToStep):
            builder.jump_to(step.name)
        elif isinstance(step, EnterScopeStep):
            builder.enter_scope()
        elif isinstance(step, ExitScopeStep):
            builder.exit_scope()
        elif isinstance(step, ForkStep):
            apply_layout(builder.fork(step.at_label), step.steps, collections)
        else:
            raise TypeError(f"Unknown layout step: {step!r}")
    return builder
