"""Door geometry value objects.

Doors sit on one of the four cardinal edges of a room's rectangle. The
integer ordinal of each edge is part of the contract: ``opposite`` is the
arithmetic complement ``3 - ordinal``, so the order North, East, West, South
must not change.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Iterable, Iterator

from .errors import UnrecognizedEnumValueError


@dataclass(frozen=True)
class Vector2Int:
    """Integer 2D coordinate in tile space."""

    x: int
    y: int

    def __add__(self, other: "Vector2Int") -> "Vector2Int":
        return Vector2Int(self.x + other.x, self.y + other.y)

    def __neg__(self) -> "Vector2Int":
        return Vector2Int(-self.x, -self.y)

    def scale(self, factor: int) -> "Vector2Int":
        return Vector2Int(self.x * factor, self.y * factor)

    @classmethod
    def up(cls) -> "Vector2Int":
        return cls(0, 1)

    @classmethod
    def right(cls) -> "Vector2Int":
        return cls(1, 0)

    @classmethod
    def down(cls) -> "Vector2Int":
        return cls(0, -1)

    @classmethod
    def left(cls) -> "Vector2Int":
        return cls(-1, 0)


@dataclass(frozen=True)
class RectInt:
    """Integer rectangle with inclusive cell bounds.

    A rectangle from (0, 0) to (3, 2) covers 4 x 3 tiles.
    """

    x_min: int
    y_min: int
    x_max: int
    y_max: int

    def __post_init__(self) -> None:
        if self.x_max < self.x_min or self.y_max < self.y_min:
            raise ValueError("Rectangle max bounds must not be less than min bounds")

    @property
    def width(self) -> int:
        return self.x_max - self.x_min + 1

    @property
    def height(self) -> int:
        return self.y_max - self.y_min + 1

    def contains(self, point: Vector2Int) -> bool:
        """Check whether a cell lies inside the rectangle (edges included)."""
        return (
            self.x_min <= point.x <= self.x_max
            and self.y_min <= point.y <= self.y_max
        )

    def merge(self, other: "RectInt") -> "RectInt":
        """Return the smallest rectangle enclosing both rectangles."""
        return RectInt(
            x_min=min(self.x_min, other.x_min),
            y_min=min(self.y_min, other.y_min),
            x_max=max(self.x_max, other.x_max),
            y_max=max(self.y_max, other.y_max),
        )

    @classmethod
    def enclosing(cls, cells: Iterable[Vector2Int]) -> "RectInt":
        """Build the smallest rectangle covering every cell.

        Raises:
            ValueError: If ``cells`` is empty.
        """
        rect: RectInt | None = None
        for cell in cells:
            cell_rect = cls(cell.x, cell.y, cell.x, cell.y)
            rect = cell_rect if rect is None else rect.merge(cell_rect)
        if rect is None:
            raise ValueError("Cannot build a rectangle from no cells")
        return rect


class DoorEdge(IntEnum):
    """Cardinal edge of a room a door sits on (points outward)."""

    NORTH = 0  # +Y
    EAST = 1  # +X
    WEST = 2  # -X
    SOUTH = 3  # -Y

    def opposite(self) -> "DoorEdge":
        return opposite(self)

    def as_vector(self) -> Vector2Int:
        return edge_to_vector(self)

    def grow_direction(self) -> Vector2Int:
        """Direction along which a door wider than one tile extends."""
        if self in (DoorEdge.EAST, DoorEdge.WEST):
            return Vector2Int.up()
        return Vector2Int.right()


# Indexed by DoorEdge ordinal
_EDGE_DIRECTIONS: tuple[Vector2Int, ...] = (
    Vector2Int(0, 1),  # North
    Vector2Int(1, 0),  # East
    Vector2Int(-1, 0),  # West
    Vector2Int(0, -1),  # South
)

_EDGE_COUNT = len(DoorEdge)


def coerce_edge(value: Any) -> DoorEdge:
    """Convert an edge, its ordinal or its name into a DoorEdge.

    Raises:
        UnrecognizedEnumValueError: If the value names no edge.
    """
    if isinstance(value, DoorEdge):
        return value
    if isinstance(value, str):
        try:
            return DoorEdge[value.strip().upper()]
        except KeyError:
            raise UnrecognizedEnumValueError("DoorEdge", value) from None
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return DoorEdge(value)
        except ValueError:
            raise UnrecognizedEnumValueError("DoorEdge", value) from None
    raise UnrecognizedEnumValueError("DoorEdge", value)


def opposite(edge: Any) -> DoorEdge:
    """Return the edge 180 degrees across from ``edge``."""
    return DoorEdge(_EDGE_COUNT - 1 - coerce_edge(edge))


def edge_to_vector(edge: Any) -> Vector2Int:
    """Return the outward unit vector of ``edge``."""
    return _EDGE_DIRECTIONS[coerce_edge(edge)]


class DoorDirectionality(str, Enum):
    """Which way a door may be traversed."""

    BIDIRECTIONAL = "bidirectional"
    ENTRANCE_ONLY = "entrance_only"
    EXIT_ONLY = "exit_only"

    @property
    def can_enter(self) -> bool:
        """Whether the door can be used to enter the room."""
        return self is not DoorDirectionality.EXIT_ONLY

    @property
    def can_exit(self) -> bool:
        """Whether the door can be used to leave the room."""
        return self is not DoorDirectionality.ENTRANCE_ONLY


def coerce_directionality(value: Any) -> DoorDirectionality:
    """Convert a value into a DoorDirectionality.

    Raises:
        UnrecognizedEnumValueError: If the value names no directionality.
    """
    if isinstance(value, DoorDirectionality):
        return value
    try:
        return DoorDirectionality(value)
    except ValueError:
        raise UnrecognizedEnumValueError("DoorDirectionality", value) from None


@dataclass(frozen=True)
class RoomDoor:
    """A doorway in a room template, used to connect rooms.

    Attributes:
        local_position: Anchor cell relative to the room origin.
        edge: Cardinal edge the door is on, pointing to the adjacent room.
        directionality: Whether the door is an entrance, an exit, or both.
        width: Opening width in tiles, perpendicular to the edge direction.
    """

    local_position: Vector2Int
    edge: DoorEdge
    directionality: DoorDirectionality = DoorDirectionality.BIDIRECTIONAL
    width: int = 2

    def __post_init__(self) -> None:
        object.__setattr__(self, "edge", coerce_edge(self.edge))
        object.__setattr__(
            self, "directionality", coerce_directionality(self.directionality)
        )
        if self.width < 1:
            raise ValueError("Door width must be at least 1")

    def cells(self) -> Iterator[Vector2Int]:
        """Yield the tiles covered by the door opening, anchor first."""
        step = self.edge.grow_direction()
        for offset in range(self.width):
            yield self.local_position + step.scale(offset)
