"""Unit tests for room library configuration schema models."""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import ValidationError

from cellslinker.application.config import (
    AddStep,
    DoorConfig,
    DoorEdgeConfig,
    ForkStep,
    RectConfig,
    RoomCollectionConfig,
    RoomLibraryConfiguration,
)
from cellslinker.domain import DoorDirectionality


def _library(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "schema_version": "1.0",
        "collections": [
            {
                "name": "start",
                "templates": [
                    {
                        "name": "hall",
                        "rect": {"x_min": 0, "y_min": 0, "x_max": 4, "y_max": 4},
                        "doors": [{"position": [2, 4], "edge": "north"}],
                    }
                ],
            }
        ],
    }
    data.update(overrides)
    return data


class TestDoorConfig:
    """Tests for DoorConfig."""

    def test_defaults(self) -> None:
        """Doors default to bidirectional and two cells wide."""
        door = DoorConfig(position=(1, 2), edge=DoorEdgeConfig.EAST)
        assert door.directionality is DoorDirectionality.BIDIRECTIONAL
        assert door.width == 2

    def test_parses_json_values(self) -> None:
        """JSON lists and strings are parsed into typed fields."""
        door = DoorConfig.model_validate(
            {"position": [3, 0], "edge": "south", "directionality": "exit_only", "width": 1}
        )
        assert door.position == (3, 0)
        assert door.edge is DoorEdgeConfig.SOUTH
        assert door.directionality is DoorDirectionality.EXIT_ONLY

    def test_zero_width_rejected(self) -> None:
        """Zero-width doors should fail validation."""
        with pytest.raises(ValidationError):
            DoorConfig.model_validate({"position": [0, 0], "edge": "north", "width": 0})

    def test_unknown_edge_rejected(self) -> None:
        """Unknown edge names should fail validation."""
        with pytest.raises(ValidationError):
            DoorConfig.model_validate({"position": [0, 0], "edge": "up"})

    def test_unknown_directionality_rejected(self) -> None:
        """Unknown directionality values should fail validation."""
        with pytest.raises(ValidationError):
            DoorConfig.model_validate(
                {"position": [0, 0], "edge": "north", "directionality": "sideways"}
            )


class TestRectConfig:
    """Tests for RectConfig."""

    def test_inverted_bounds_rejected(self) -> None:
        """Max bounds below min bounds should fail validation."""
        with pytest.raises(ValidationError, match="greater than or equal"):
            RectConfig(x_min=5, y_min=0, x_max=1, y_max=3)


class TestRoomCollectionConfig:
    """Tests for RoomCollectionConfig."""

    def test_duplicate_template_names_rejected(self) -> None:
        """Template names must be unique within a collection."""
        template = {
            "name": "hall",
            "rect": {"x_min": 0, "y_min": 0, "x_max": 1, "y_max": 1},
        }
        with pytest.raises(ValidationError, match="Duplicate template name 'hall'"):
            RoomCollectionConfig.model_validate({"name": "c", "templates": [template, template]})


class TestRoomLibraryConfiguration:
    """Tests for the root configuration model."""

    def test_minimal_library(self) -> None:
        """A library with one collection and no layout is valid."""
        config = RoomLibraryConfiguration.model_validate(_library())
        assert config.collections[0].name == "start"
        assert config.layout == []

    def test_unknown_field_rejected(self) -> None:
        """Unknown top-level fields should fail validation."""
        with pytest.raises(ValidationError):
            RoomLibraryConfiguration.model_validate(_library(theme="dark"))

    def test_collections_required(self) -> None:
        """At least one collection is required."""
        with pytest.raises(ValidationError):
            RoomLibraryConfiguration.model_validate(_library(collections=[]))

    @pytest.mark.parametrize("version", ["1.0", "1.4"])
    def test_supported_versions(self, version: str) -> None:
        """Minor versions of a supported major are accepted."""
        config = RoomLibraryConfiguration.model_validate(_library(schema_version=version))
        assert config.schema_version == version

    @pytest.mark.parametrize("version", ["2.0", "1", "one"])
    def test_unsupported_versions_rejected(self, version: str) -> None:
        """Other majors and malformed versions should fail validation."""
        with pytest.raises(ValidationError):
            RoomLibraryConfiguration.model_validate(_library(schema_version=version))

    def test_duplicate_collection_names_rejected(self) -> None:
        """Collection names must be unique."""
        collections = [{"name": "a"}, {"name": "a"}]
        with pytest.raises(ValidationError, match="Duplicate collection name 'a'"):
            RoomLibraryConfiguration.model_validate(_library(collections=collections))

    def test_layout_steps_are_discriminated(self) -> None:
        """Layout steps are parsed into the model named by op."""
        layout = [
            {"op": "add", "collection": "start"},
            {"op": "fork", "steps": [{"op": "add", "collection": "start"}]},
        ]
        config = RoomLibraryConfiguration.model_validate(_library(layout=layout))
        assert isinstance(config.layout[0], AddStep)
        fork = config.layout[1]
        assert isinstance(fork, ForkStep)
        assert fork.at_label is None
        assert isinstance(fork.steps[0], AddStep)

    def test_unknown_layout_op_rejected(self) -> None:
        """Unknown layout ops should fail validation."""
        with pytest.raises(ValidationError):
            RoomLibraryConfiguration.model_validate(_library(layout=[{"op": "teleport"}]))

    def test_layout_with_unknown_collection_rejected(self) -> None:
        """Layout steps must name a declared collection, even inside forks."""
        layout = [
            {"op": "add", "collection": "start"},
            {"op": "fork", "steps": [{"op": "add", "collection": "vault"}]},
        ]
        with pytest.raises(ValidationError, match="unknown collection 'vault'"):
            RoomLibraryConfiguration.model_validate(_library(layout=layout))
