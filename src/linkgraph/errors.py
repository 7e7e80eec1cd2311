"""Exception taxonomy for linkgraph.

Only two situations are hard errors on the graph itself: data that cannot
back a node (``None`` or unhashable) and an ``insert`` under a parent that
does not resolve. Relationship queries between absent nodes degrade to
``False`` instead of raising.
"""

from __future__ import annotations

from typing import Any


class LinkGraphError(Exception):
    """Base exception for linkgraph."""


class InvalidArgumentError(LinkGraphError, ValueError):
    """Raised when a value cannot be stored as node data."""

    def __init__(self, message: str, *, value: Any = None) -> None:
        self.value = value
        super().__init__(message)


class NotFoundError(LinkGraphError, LookupError):
    """Raised when a required node is not reachable from the root."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Node not found: {value!r}")


class ConfigError(LinkGraphError):
    """Raised when a configuration file cannot be parsed."""
