"""End-to-end tests: build a level graph and pick rooms for every slot.

A tiny greedy placement loop walks the graph, and for every child picks a
room from the child's collection whose entrance faces an exit of the parent
room. This is the way the placement stage consumes the graph and lookups.
"""

from __future__ import annotations

from pathlib import Path

from cellslinker.application import RoomLibrary
from cellslinker.application.config import load_library
from cellslinker.domain import (
    DoorEdge,
    LevelGraphBuilder,
    RoomCandidate,
    RoomLookup,
    RoomTemplate,
    RoomTemplateCollection,
)

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "libraries"


def _exit_edges(room: RoomTemplate, used_entrance: int | None) -> list[DoorEdge]:
    return [
        door.edge
        for index, door in enumerate(room.doors)
        if index != used_entrance and door.directionality.can_exit
    ]


def _pick(lookup: RoomLookup, exit_edges: list[DoorEdge], min_exits: int) -> RoomCandidate | None:
    for edge in exit_edges:
        candidates = sorted(
            lookup.candidates_for_exit(edge, min_exits),
            key=lambda c: c.exit_count,
            reverse=True,
        )
        if candidates:
            return candidates[0]
    return None


class TestLevelGeneration:
    """Tests combining the builder, the graph and room lookups."""

    def test_every_slot_gets_a_compatible_room(self) -> None:
        """Every child slot finds a room entering through an exit of its parent."""
        library = RoomLibrary.from_config(load_library(FIXTURES_PATH / "valid_library.json"))
        graph = library.build_level_graph()

        root_room = graph.root.template_collection.templates[0]
        chosen: dict[int, tuple[RoomTemplate, int | None]] = {graph.root.id: (root_room, None)}

        for node in graph.walk():
            room, entrance = chosen[node.id]
            exits = _exit_edges(room, entrance)
            for child in node.children:
                lookup = library.lookup(child.template_collection.name)
                min_exits = 1 if child.children else 0
                candidate = _pick(lookup, exits, min_exits)
                assert candidate is not None, f"No room for {child!r}"
                assert candidate.edge.opposite() in exits
                assert candidate.exit_count >= min_exits
                chosen[child.id] = (candidate.room, candidate.entrances[0])

        assert len(chosen) == graph.count

    def test_branching_layout_built_in_code(
        self,
        start_rooms: RoomTemplateCollection,
        corridors: RoomTemplateCollection,
        treasure_rooms: RoomTemplateCollection,
    ) -> None:
        """Scopes, labels and forks combine into the expected tree."""
        builder = LevelGraphBuilder()
        builder.add(start_rooms).label("entry")
        builder.enter_scope().add(corridors).add(treasure_rooms).exit_scope()
        builder.add(corridors).label("deep").add(corridors)

        side = builder.fork("entry")
        side.add(treasure_rooms)
        deep = builder.fork("deep")
        deep.add(treasure_rooms).add(treasure_rooms)

        graph = builder.graph
        assert graph is not None
        assert graph.count == 8
        assert [node.id for node in graph.walk()] == [0, 1, 2, 3, 4, 6, 7, 5]
        assert [child.id for child in graph.root.children] == [1, 3, 5]
        assert [child.id for child in graph.node(3).children] == [4, 6]
        assert {leaf.template_collection.name for leaf in graph.leaves()} <= {
            "treasure",
            "corridors",
        }
