"""Pytest configuration and shared fixtures for cellslinker tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from cellslinker.domain import (
    DoorDirectionality,
    DoorEdge,
    RectInt,
    RoomDoor,
    RoomTemplate,
    RoomTemplateCollection,
    Vector2Int,
)

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "libraries"


def make_door(
    x: int,
    y: int,
    edge: DoorEdge,
    directionality: DoorDirectionality = DoorDirectionality.BIDIRECTIONAL,
    width: int = 2,
) -> RoomDoor:
    """Shorthand for building a RoomDoor from plain coordinates."""
    return RoomDoor(Vector2Int(x, y), edge, directionality, width)


# =============================================================================
# Room templates
# =============================================================================


@pytest.fixture
def square_rect() -> RectInt:
    """A 6x6 room rectangle from (0, 0) to (5, 5)."""
    return RectInt(0, 0, 5, 5)


@pytest.fixture
def one_way_room(square_rect: RectInt) -> RoomTemplate:
    """Room with an entrance-only North door and a bidirectional South door."""
    return RoomTemplate(
        name="one_way",
        doors=(
            make_door(2, 5, DoorEdge.NORTH, DoorDirectionality.ENTRANCE_ONLY),
            make_door(2, 0, DoorEdge.SOUTH, DoorDirectionality.BIDIRECTIONAL),
        ),
        room_rect=square_rect,
    )


@pytest.fixture
def crossroads_room(square_rect: RectInt) -> RoomTemplate:
    """Room with a bidirectional door on every edge."""
    return RoomTemplate(
        name="crossroads",
        doors=(
            make_door(2, 5, DoorEdge.NORTH),
            make_door(5, 2, DoorEdge.EAST),
            make_door(0, 2, DoorEdge.WEST),
            make_door(2, 0, DoorEdge.SOUTH),
        ),
        room_rect=square_rect,
    )


@pytest.fixture
def exit_only_room(square_rect: RectInt) -> RoomTemplate:
    """Room whose only door is an exit, so it can never be entered."""
    return RoomTemplate(
        name="spawn",
        doors=(make_door(5, 2, DoorEdge.EAST, DoorDirectionality.EXIT_ONLY),),
        room_rect=square_rect,
    )


@pytest.fixture
def dead_end_room(square_rect: RectInt) -> RoomTemplate:
    """Room with a single entrance-only South door."""
    return RoomTemplate(
        name="dead_end",
        doors=(make_door(2, 0, DoorEdge.SOUTH, DoorDirectionality.ENTRANCE_ONLY),),
        room_rect=square_rect,
    )


@pytest.fixture
def mixed_collection(
    one_way_room: RoomTemplate,
    crossroads_room: RoomTemplate,
    exit_only_room: RoomTemplate,
    dead_end_room: RoomTemplate,
) -> RoomTemplateCollection:
    """Collection covering every door directionality."""
    return RoomTemplateCollection(
        name="mixed",
        templates=[one_way_room, crossroads_room, exit_only_room, dead_end_room],
    )


# =============================================================================
# Collections for level graphs
# =============================================================================


@pytest.fixture
def start_rooms(crossroads_room: RoomTemplate) -> RoomTemplateCollection:
    return RoomTemplateCollection(name="start", templates=[crossroads_room])


@pytest.fixture
def corridors(one_way_room: RoomTemplate) -> RoomTemplateCollection:
    return RoomTemplateCollection(name="corridors", templates=[one_way_room])


@pytest.fixture
def treasure_rooms(dead_end_room: RoomTemplate) -> RoomTemplateCollection:
    return RoomTemplateCollection(name="treasure", templates=[dead_end_room])


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding JSON room library fixtures."""
    return FIXTURES_PATH
