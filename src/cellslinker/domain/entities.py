"""Room templates and named template collections."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Sequence

from .errors import TemplateNotFoundError, UnrecognizedEnumValueError
from .value_objects import DoorEdge, RectInt, RoomDoor


def is_door_valid(room: "RoomTemplate", door: RoomDoor) -> bool:
    """Check that a door's anchor lies on the room rectangle at its edge.

    A North door must sit on the top row of the rectangle, a South door on
    the bottom row, an East door on the rightmost column and a West door on
    the leftmost column. The anchor must also fall within the span of that
    side.

    This is an advisory check used to flag malformed rooms. Malformed doors
    are still indexed by RoomLookup.

    Args:
        room: The room template the door belongs to.
        door: The door to check.

    Returns:
        True if the door anchor is on the declared edge.

    Raises:
        UnrecognizedEnumValueError: If the door edge is not one of the four
            cardinal edges.
    """
    rect = room.room_rect
    pos = door.local_position
    if door.edge == DoorEdge.NORTH:
        return pos.y == rect.y_max and rect.x_min <= pos.x <= rect.x_max
    if door.edge == DoorEdge.SOUTH:
        return pos.y == rect.y_min and rect.x_min <= pos.x <= rect.x_max
    if door.edge == DoorEdge.EAST:
        return pos.x == rect.x_max and rect.y_min <= pos.y <= rect.y_max
    if door.edge == DoorEdge.WEST:
        return pos.x == rect.x_min and rect.y_min <= pos.y <= rect.y_max
    raise UnrecognizedEnumValueError("DoorEdge", door.edge)


@dataclass(frozen=True)
class RoomTemplate:
    """A concrete, door-annotated room definition.

    Attributes:
        name: Template name, unique within its collection.
        doors: Ordered doors of the room. Door indices refer to this order.
        room_rect: Bounding rectangle of the room's solid tiles.
        allow_mirror: Whether a mirrored variant may be generated. Mirroring
            is not implemented; RoomLookup refuses to build mirrored candidates.
    """

    name: str
    doors: tuple[RoomDoor, ...]
    room_rect: RectInt
    allow_mirror: bool = False

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Room template name must not be empty")
        object.__setattr__(self, "doors", tuple(self.doors))

    def is_door_valid(self, door: RoomDoor) -> bool:
        return is_door_valid(self, door)

    def invalid_doors(self) -> list[int]:
        """Return indices of doors whose anchor is not on their declared edge."""
        return [i for i, door in enumerate(self.doors) if not is_door_valid(self, door)]


@dataclass(eq=False)
class RoomTemplateCollection:
    """A named group of interchangeable room templates.

    Two collections are never equal unless they are the same object; the
    name is only used for diagnostics.
    """

    name: str
    templates: Sequence[RoomTemplate] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.templates = list(self.templates)

    def __iter__(self) -> Iterator[RoomTemplate]:
        return iter(self.templates)

    def __len__(self) -> int:
        return len(self.templates)

    def get(self, name: str) -> RoomTemplate:
        """Get a template by name.

        Raises:
            TemplateNotFoundError: If no template has this name.
        """
        for template in self.templates:
            if template.name == name:
                return template
        raise TemplateNotFoundError(name)

    def __repr__(self) -> str:
        return f"RoomTemplateCollection({self.name!r}, templates={len(self.templates)})"
