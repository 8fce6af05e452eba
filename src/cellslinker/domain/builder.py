"""Fluent builder for room-based level graphs.

The builder keeps a cursor (the head) into a single LevelGraph. Nodes are
added below the head, and the head can be labeled, jumped back to, saved in
nested scopes, or forked into independent branch builders.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .errors import BuilderStateError, EmptyScopeError, InvalidArgumentError, LabelNotFoundError
from .level_graph import LevelGraph, LevelGraphNode, new_graph

if TYPE_CHECKING:
    from .entities import RoomTemplateCollection

logger = logging.getLogger(__name__)


class LevelGraphBuilder:
    """Builder for constructing room-based level graphs.

    Labels and scopes belong to a single builder. A forked builder shares
    the graph but starts with no labels and an empty scope stack, so a
    branch can only jump to labels it declared itself.

    Example:
        >>> builder = LevelGraphBuilder()
        >>> builder.add(start).label("hub").add(corridor).add(boss)
        >>> side = builder.fork("hub")
        >>> side.add(corridor).add(treasure)
        >>> builder.graph.count
        6
    """

    def __init__(
        self,
        graph: LevelGraph | None = None,
        head: LevelGraphNode | None = None,
    ) -> None:
        """Initialize a builder.

        With no arguments the builder is empty and the first add() creates
        the graph. Passing a graph and head starts a sub-builder at that node.
        """
        if (graph is None) != (head is None):
            raise InvalidArgumentError("graph and head must be given together")
        if graph is not None and head not in graph:
            raise InvalidArgumentError(f"{head!r} does not belong to the given graph")
        self._graph = graph
        self._head = head
        self._labels: dict[str, LevelGraphNode] = {}
        self._scope_stack: list[LevelGraphNode] = []

    @property
    def graph(self) -> LevelGraph | None:
        return self._graph

    @property
    def head(self) -> LevelGraphNode | None:
        return self._head

    @property
    def labels(self) -> dict[str, LevelGraphNode]:
        return dict(self._labels)

    @property
    def scope_depth(self) -> int:
        return len(self._scope_stack)

    def add(self, collection: "RoomTemplateCollection") -> "LevelGraphBuilder":
        """Add a room slot below the head and move the head to it.

        The first call on an empty builder creates the graph and its root.
        """
        if collection is None:
            raise InvalidArgumentError("Template collection is required")
        if self._graph is None:
            self._graph, self._head = new_graph(collection)
        else:
            self._head = self._graph.add_child(self._require_head("add"), collection)
        return self

    def label(self, name: str) -> "LevelGraphBuilder":
        """Bind ``name`` to the head. Rebinding a name overwrites it."""
        self._labels[name] = self._require_head("label")
        return self

    def jump_to(self, name: str) -> "LevelGraphBuilder":
        """Move the head to the node bound to ``name``."""
        self._head = self._lookup(name)
        return self

    def enter_scope(self) -> "LevelGraphBuilder":
        """Save the head so exit_scope() can return to it."""
        self._scope_stack.append(self._require_head("enter_scope"))
        return self

    def exit_scope(self) -> "LevelGraphBuilder":
        """Return the head to the node saved by the matching enter_scope()."""
        if not self._scope_stack:
            raise EmptyScopeError()
        self._head = self._scope_stack.pop()
        return self

    def fork(self, at_label: str | None = None) -> "LevelGraphBuilder":
        """Start an independent branch builder on the same graph.

        Args:
            at_label: Label to branch from. Defaults to the current head.

        Returns:
            A new builder whose first add() creates a sibling of any existing
            children of the fork point.
        """
        start = self._lookup(at_label) if at_label is not None else self._require_head("fork")
        assert self._graph is not None
        logger.debug(f"Forking builder at {start!r}")
        return LevelGraphBuilder(self._graph, start)

    def _lookup(self, name: str) -> LevelGraphNode:
        try:
            return self._labels[name]
        except KeyError:
            raise LabelNotFoundError(name) from None

    def _require_head(self, operation: str) -> LevelGraphNode:
        if self._head is None:
            raise BuilderStateError(f"Cannot {operation}() before the first add()")
        return self._head
