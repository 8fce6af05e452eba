"""Application service tying room collections, lookups and layouts together."""

from __future__ import annotations

import logging
from typing import Iterable

from cellslinker.application.config import (
    RoomLibraryConfiguration,
    apply_layout,
    config_to_collections,
)
from cellslinker.application.config.schema import LayoutStep
from cellslinker.domain import (
    LevelGraph,
    LevelGraphBuilder,
    RoomLookup,
    RoomTemplateCollection,
    TemplateNotFoundError,
)

logger = logging.getLogger(__name__)


class RoomLibrary:
    """Named room collections with one cached RoomLookup per collection.

    Lookups are built on first use and reused afterwards; RoomLookup is
    read-only once constructed.

    Example:
        >>> library = RoomLibrary.from_config(load_library(Path("dungeon.json")))
        >>> graph = library.build_level_graph()
        >>> for node in graph.walk():
        ...     lookup = library.lookup(node.template_collection.name)
    """

    def __init__(
        self,
        collections: Iterable[RoomTemplateCollection],
        layout: list[LayoutStep] | None = None,
    ) -> None:
        self._collections: dict[str, RoomTemplateCollection] = {}
        for collection in collections:
            if collection.name in self._collections:
                raise ValueError(f"Duplicate collection name '{collection.name}'")
            self._collections[collection.name] = collection
        self._layout = list(layout or [])
        self._lookups: dict[str, RoomLookup] = {}

    @classmethod
    def from_config(cls, config: RoomLibraryConfiguration) -> "RoomLibrary":
        return cls(config_to_collections(config).values(), config.layout)

    @property
    def names(self) -> list[str]:
        return list(self._collections)

    def collection(self, name: str) -> RoomTemplateCollection:
        """Get a collection by name.

        Raises:
            TemplateNotFoundError: If the collection does not exist.
        """
        try:
            return self._collections[name]
        except KeyError:
            raise TemplateNotFoundError(name, kind="collection") from None

    def lookup(self, name: str) -> RoomLookup:
        """Get the candidate index of a collection, building it on first use."""
        if name not in self._lookups:
            self._lookups[name] = RoomLookup(self.collection(name))
        return self._lookups[name]

    def build_level_graph(self) -> LevelGraph:
        """Run the layout script on a fresh builder and return the graph.

        Raises:
            ValueError: If the library has no layout steps.
        """
        if not self._layout:
            raise ValueError("Room library has no layout to build")
        builder = apply_layout(LevelGraphBuilder(), self._layout, self._collections)
        assert builder.graph is not None
        logger.debug(f"Built level graph with {builder.graph.count} nodes")
        return builder.graph
