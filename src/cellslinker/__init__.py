"""Level graph construction and room candidate lookup for procedural levels."""

__version__ = "0.1.0"
