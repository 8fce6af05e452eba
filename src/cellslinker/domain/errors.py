"""Exceptions raised by the level graph and room lookup domain.

Every error is raised synchronously to the immediate caller. The placement
stage treats any of them as fatal for the current generation attempt.
"""

from __future__ import annotations

from typing import Any


class CellsLinkerError(Exception):
    """Base class for all domain errors."""


class InvalidArgumentError(CellsLinkerError, ValueError):
    """Raised when a required argument is missing or does not belong here."""


class LabelNotFoundError(CellsLinkerError, LookupError):
    """Raised when a builder is asked for a label it never bound."""

    def __init__(self, label: str) -> None:
        self.label = label
        super().__init__(f"Label not found: {label!r}")


class EmptyScopeError(CellsLinkerError, IndexError):
    """Raised when exit_scope() has no matching enter_scope()."""

    def __init__(self) -> None:
        super().__init__("Cannot exit scope: scope stack is empty")


class BuilderStateError(CellsLinkerError, RuntimeError):
    """Raised when a builder operation needs a head node that does not exist yet."""


class UnsupportedOperationError(CellsLinkerError, NotImplementedError):
    """Raised for declared capabilities that are not implemented."""


class UnrecognizedEnumValueError(CellsLinkerError, ValueError):
    """Raised when a value is outside a closed enum set.

    Attributes:
        enum_name: Name of the enum the value was checked against.
        value: The rejected value.
    """

    def __init__(self, enum_name: str, value: Any) -> None:
        self.enum_name = enum_name
        self.value = value
        super().__init__(f"Unrecognized {enum_name} value: {value!r}")


class TemplateNotFoundError(CellsLinkerError, KeyError):
    """Raised when a room template or collection name is not known."""

    def __init__(self, name: str, kind: str = "template") -> None:
        self.name = name
        self.kind = kind
        super().__init__(name)

    def __str__(self) -> str:
        return f"Room {self.kind} not found: {self.name}"
