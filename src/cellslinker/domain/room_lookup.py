"""Candidate index over a room template collection.

Rooms are preprocessed once so the placement stage can quickly pick rooms
that have an entrance on a given edge and enough exits left to continue the
level.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterator

from .entities import RoomTemplate, RoomTemplateCollection
from .errors import UnsupportedOperationError
from .value_objects import DoorDirectionality, DoorEdge, coerce_edge, opposite

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoomCandidate:
    """A room seen from one edge, for connection during placement.

    Attributes:
        room: The room template.
        edge: Edge the entrances are on.
        entrances: Indices of the room's doors on ``edge`` usable as an entrance.
        exit_count: Over-estimate of the exits left once an entrance is
            connected. Only for quick filtering; callers must double-check.
        mirrored: Whether this is a mirrored variant (never true today).
    """

    room: RoomTemplate
    edge: DoorEdge
    entrances: tuple[int, ...]
    exit_count: int
    mirrored: bool = False


def effective_exit_count(room: RoomTemplate) -> int:
    """Estimate the exits left after one entrance of the room is used.

    ExitCount = count(EntranceOnly, max 1) + count(Bidirectional or ExitOnly) - 1

    The count ignores edges, so it over-counts when several usable doors
    share the consumed entrance's edge.
    """
    entrance_flag = 0
    exit_tally = 0
    for door in room.doors:
        if door.directionality is DoorDirectionality.ENTRANCE_ONLY:
            entrance_flag = 1
        else:
            exit_tally += 1
    return entrance_flag + exit_tally - 1


def build_room_candidates(
    room: RoomTemplate,
    mirrored: bool = False,
) -> dict[DoorEdge, RoomCandidate]:
    """Build one candidate per edge that has at least one entrance door.

    Args:
        room: Room template to index.
        mirrored: Request the mirrored variant. Not supported.

    Returns:
        Mapping from edge to candidate, in DoorEdge order.

    Raises:
        UnsupportedOperationError: If ``mirrored`` is True.
    """
    if mirrored:
        raise UnsupportedOperationError(
            f"Adding mirrored rooms is not supported yet (room {room.name!r})"
        )

    entrances: dict[DoorEdge, list[int]] = {edge: [] for edge in DoorEdge}
    for index, door in enumerate(room.doors):
        if door.directionality.can_enter:
            entrances[door.edge].append(index)

    exit_count = effective_exit_count(room)
    return {
        edge: RoomCandidate(
            room=room,
            edge=edge,
            entrances=tuple(indices),
            exit_count=exit_count,
        )
        for edge, indices in entrances.items()
        if indices
    }


class RoomLookup:
    """Pre-processed rooms for fast candidate queries by entrance edge.

    Candidates are stored per edge in collection order. The index is
    read-only once constructed.

    Example:
        >>> lookup = RoomLookup(corridors)
        >>> for candidate in lookup.candidates_for_edge(DoorEdge.SOUTH, min_exit_count=1):
        ...     print(candidate.room.name, candidate.entrances)
    """

    def __init__(
        self,
        collection: RoomTemplateCollection,
        include_mirrored: bool = False,
    ) -> None:
        """Index every room of ``collection``.

        Args:
            collection: The room templates to index.
            include_mirrored: Also index mirrored variants of rooms that
                allow mirroring. Fails with UnsupportedOperationError when
                such a room is present.
        """
        self._collection = collection
        buckets: dict[DoorEdge, list[RoomCandidate]] = {edge: [] for edge in DoorEdge}
        for room in collection:
            variants = [False]
            if include_mirrored and room.allow_mirror:
                variants.append(True)
            for mirrored in variants:
                candidates = build_room_candidates(room, mirrored)
                if not candidates:
                    logger.debug(
                        f"Room {room.name!r} in {collection.name!r} has no entrance doors"
                    )
                for edge, candidate in candidates.items():
                    buckets[edge].append(candidate)
        # TODO: Presort each bucket by descending exit_count for early exit in queries
        self._candidates: tuple[tuple[RoomCandidate, ...], ...] = tuple(
            tuple(buckets[edge]) for edge in DoorEdge
        )
        logger.debug(
            f"Indexed {len(collection)} rooms of {collection.name!r} into "
            f"{len(self)} candidates"
        )

    @property
    def collection(self) -> RoomTemplateCollection:
        return self._collection

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._candidates)

    def candidate_count(self, edge: Any) -> int:
        """Number of candidates with an entrance on ``edge``."""
        return len(self._candidates[coerce_edge(edge)])

    def candidates_for_edge(
        self,
        edge: Any,
        min_exit_count: int = 0,
    ) -> Iterator[RoomCandidate]:
        """Find rooms that have at least one entrance on ``edge``.

        Args:
            edge: The edge where entrances are expected.
            min_exit_count: Only yield candidates whose exit estimate is at
                least this value.

        Returns:
            Lazy iterator over candidates in storage order. Sort by
            ``exit_count`` if best-first order is needed.
        """
        bucket = self._candidates[coerce_edge(edge)]
        return (c for c in bucket if c.exit_count >= min_exit_count)

    def candidates_for_exit(
        self,
        exit_edge: Any,
        min_exit_count: int = 0,
    ) -> Iterator[RoomCandidate]:
        """Find rooms that can attach to an exit door facing ``exit_edge``.

        A door on the North edge of a placed room connects to an entrance on
        the South edge of the next room.
        """
        return self.candidates_for_edge(opposite(exit_edge), min_exit_count)
