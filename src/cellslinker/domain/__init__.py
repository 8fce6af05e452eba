"""Domain layer - level graph construction and room candidate indexing."""

from .builder import LevelGraphBuilder
from .entities import RoomTemplate, RoomTemplateCollection, is_door_valid
from .errors import (
    BuilderStateError,
    CellsLinkerError,
    EmptyScopeError,
    InvalidArgumentError,
    LabelNotFoundError,
    TemplateNotFoundError,
    UnrecognizedEnumValueError,
    UnsupportedOperationError,
)
from .level_graph import LevelGraph, LevelGraphNode, new_graph
from .room_lookup import (
    RoomCandidate,
    RoomLookup,
    build_room_candidates,
    effective_exit_count,
)
from .value_objects import (
    DoorDirectionality,
    DoorEdge,
    RectInt,
    RoomDoor,
    Vector2Int,
    coerce_directionality,
    coerce_edge,
    edge_to_vector,
    opposite,
)

__all__ = [
    "BuilderStateError",
    "CellsLinkerError",
    "DoorDirectionality",
    "DoorEdge",
    "EmptyScopeError",
    "InvalidArgumentError",
    "LabelNotFoundError",
    "LevelGraph",
    "LevelGraphBuilder",
    "LevelGraphNode",
    "RectInt",
    "RoomCandidate",
    "RoomDoor",
    "RoomLookup",
    "RoomTemplate",
    "RoomTemplateCollection",
    "TemplateNotFoundError",
    "UnrecognizedEnumValueError",
    "UnsupportedOperationError",
    "Vector2Int",
    "build_room_candidates",
    "coerce_directionality",
    "coerce_edge",
    "edge_to_vector",
    "effective_exit_count",
    "is_door_valid",
    "new_graph",
    "opposite",
]
