"""Level graph: an owned tree of room slots with sequential integer ids.

The graph stores its nodes in a flat arena indexed by id. Each node keeps
the id of its parent and the ids of its children, so the tree has no
reference cycles between nodes and every node lives as long as its graph.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Iterator

from .errors import InvalidArgumentError

if TYPE_CHECKING:
    from .entities import RoomTemplateCollection

logger = logging.getLogger(__name__)


class LevelGraphNode:
    """A logical room slot in the level layout.

    Nodes are created by LevelGraph only. Their identity and position in
    the tree are read-only.
    """

    __slots__ = ("_graph", "_id", "_template_collection", "_parent_id", "_child_ids")

    def __init__(
        self,
        graph: "LevelGraph",
        node_id: int,
        template_collection: "RoomTemplateCollection",
        parent_id: int | None,
    ) -> None:
        self._graph = graph
        self._id = node_id
        self._template_collection = template_collection
        self._parent_id = parent_id
        self._child_ids: list[int] = []

    @property
    def id(self) -> int:
        return self._id

    @property
    def graph(self) -> "LevelGraph":
        return self._graph

    @property
    def template_collection(self) -> "RoomTemplateCollection":
        """The room template collection this node draws from."""
        return self._template_collection

    @property
    def parent_id(self) -> int | None:
        return self._parent_id

    @property
    def parent(self) -> "LevelGraphNode | None":
        """Parent node, or None for the root."""
        if self._parent_id is None:
            return None
        return self._graph.node(self._parent_id)

    @property
    def children(self) -> tuple["LevelGraphNode", ...]:
        """Child nodes in creation order."""
        return tuple(self._graph.node(child_id) for child_id in self._child_ids)

    @property
    def is_root(self) -> bool:
        return self._parent_id is None

    @property
    def depth(self) -> int:
        """Number of edges between this node and the root."""
        depth = 0
        node = self
        while node._parent_id is not None:
            node = self._graph.node(node._parent_id)
            depth += 1
        return depth

    def __repr__(self) -> str:
        return (
            f"Node({self._template_collection.name}-{self._id}, "
            f"Children: {len(self._child_ids)})"
        )


class LevelGraph:
    """Tree of room slots describing the desired level topology.

    Ids are assigned once, starting at 0 for the root, and increase by one
    for every node created anywhere in the graph. ``count`` is therefore the
    number of nodes ever created.

    Example:
        >>> graph = LevelGraph(start_rooms)
        >>> hall = graph.add_child(graph.root, corridors)
        >>> hall.id
        1
    """

    def __init__(self, root_collection: "RoomTemplateCollection") -> None:
        if root_collection is None:
            raise InvalidArgumentError("Root template collection is required")
        self._nodes: list[LevelGraphNode] = []
        self._lock = threading.Lock()
        self._root = self._create_node(root_collection, parent=None)

    @property
    def root(self) -> LevelGraphNode:
        return self._root

    @property
    def count(self) -> int:
        return len(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[LevelGraphNode]:
        return iter(list(self._nodes))

    def __contains__(self, node: object) -> bool:
        if not isinstance(node, LevelGraphNode) or node.graph is not self:
            return False
        return 0 <= node.id < len(self._nodes) and self._nodes[node.id] is node

    def node(self, node_id: int) -> LevelGraphNode:
        """Get a node by id.

        Raises:
            InvalidArgumentError: If the id was never assigned in this graph.
        """
        if not 0 <= node_id < len(self._nodes):
            raise InvalidArgumentError(f"No node with id {node_id} in this graph")
        return self._nodes[node_id]

    def add_child(
        self,
        parent: LevelGraphNode,
        collection: "RoomTemplateCollection",
    ) -> LevelGraphNode:
        """Create a new node under ``parent``.

        The child is appended after any existing children of ``parent``.

        Args:
            parent: A node of this graph.
            collection: Template collection feeding the new room slot.

        Returns:
            The new node.

        Raises:
            InvalidArgumentError: If ``collection`` or ``parent`` is missing,
                or ``parent`` belongs to another graph. Nothing is modified.
        """
        if collection is None:
            raise InvalidArgumentError("Template collection is required")
        if parent is None:
            raise InvalidArgumentError("Parent node is required")
        if parent not in self:
            raise InvalidArgumentError(f"{parent!r} does not belong to this graph")
        return self._create_node(collection, parent)

    def walk(self) -> Iterator[LevelGraphNode]:
        """Yield nodes depth-first, parents before children, children in order."""
        stack = [self._root]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def leaves(self) -> list[LevelGraphNode]:
        """Return nodes without children, in id order."""
        return [node for node in self._nodes if not node._child_ids]

    def _create_node(
        self,
        collection: "RoomTemplateCollection",
        parent: LevelGraphNode | None,
    ) -> LevelGraphNode:
        with self._lock:
            node = LevelGraphNode(
                self,
                len(self._nodes),
                collection,
                parent.id if parent is not None else None,
            )
            self._nodes.append(node)
            # The root has no parent list to join
            if parent is not None:
                parent._child_ids.append(node.id)
        logger.debug(f"Created {node!r} under parent {node.parent_id}")
        return node

    def __repr__(self) -> str:
        return f"LevelGraph(nodes={len(self._nodes)})"


def new_graph(
    root_collection: "RoomTemplateCollection",
) -> tuple[LevelGraph, LevelGraphNode]:
    """Create a graph and return it with its root node (id 0)."""
    graph = LevelGraph(root_collection)
    return graph, graph.root
