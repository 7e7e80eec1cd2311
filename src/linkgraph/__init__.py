"""linkgraph — in-memory undirected graph with symmetric links."""

from __future__ import annotations

from linkgraph.domain.graph import Graph
from linkgraph.domain.model import Edge, Node
from linkgraph.errors import (
    ConfigError,
    InvalidArgumentError,
    LinkGraphError,
    NotFoundError,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "Edge",
    "Graph",
    "InvalidArgumentError",
    "LinkGraphError",
    "Node",
    "NotFoundError",
    "__version__",
]
