"""Node and Edge — the value types a Graph is built from.

INVARIANT: Node identity is its data. Two nodes are equal (and hash equal)
iff their data values are equal, regardless of the links they carry.
INVARIANT: Every edge added through ``Node.add_link`` has its reverse edge
present on the target once the call returns.
"""

from __future__ import annotations

from collections.abc import Iterator, ValuesView
from dataclasses import dataclass
from typing import Any

from linkgraph.errors import InvalidArgumentError


def validate_data(data: Any) -> None:
    """Raise :class:`InvalidArgumentError` unless *data* can back a node.

    Node data must be present and hashable, since nodes are keyed by it
    inside hash-based collections.
    """
    if data is None:
        raise InvalidArgumentError("Node data must not be None", value=data)
    try:
        hash(data)
    except TypeError as exc:
        msg = f"Node data must be hashable, got {type(data).__name__}"
        raise InvalidArgumentError(msg, value=data) from exc


class Node[T]:
    """A graph vertex holding a data value and its outgoing edges.

    Outgoing edges are keyed by target node, so edge-set membership follows
    node equality. Iteration order is link-creation order.
    """

    __slots__ = ("_data", "_links")

    def __init__(self, data: T) -> None:
        validate_data(data)
        self._data = data
        self._links: dict[Node[T], Edge[T]] = {}

    @classmethod
    def of(cls, data: T) -> Node[T]:
        return cls(data)

    @property
    def data(self) -> T:
        return self._data

    @property
    def links(self) -> ValuesView[Edge[T]]:
        """Read-only view of edges whose source is this node."""
        return self._links.values()

    def neighbors(self) -> Iterator[Node[T]]:
        return iter(self._links)

    def add_link(self, target: Node[T]) -> bool:
        """Link this node and *target* in both directions.

        Returns False if the forward edge already existed. A node may be
        linked to itself; the forward and reverse edge are then the same.
        """
        if target in self._links:
            return False
        self._links[target] = Edge(self, target)
        if self not in target._links:
            target._links[self] = Edge(target, self)
        return True

    def remove_link(self, target: Node[T]) -> bool:
        """Remove the link between this node and *target* in both directions.

        Returns False if the forward edge did not exist.
        """
        if self._links.pop(target, None) is None:
            return False
        target._links.pop(self, None)
        return True

    def contains_link(self, criteria: Node[T]) -> bool:
        """Whether an edge from this node to *criteria* exists."""
        return criteria in self._links

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Node):
            return NotImplemented
        return bool(self._data == other._data)

    def __hash__(self) -> int:
        return hash(self._data)

    def __repr__(self) -> str:
        return f"Node({self._data!r})"


@dataclass(frozen=True)
class Edge[T]:
    """A directed (source, target) record, compared by node data."""

    source: Node[T]
    target: Node[T]

    @classmethod
    def of(cls, source: Node[T], target: Node[T]) -> Edge[T]:
        return cls(source, target)

    def reversed(self) -> Edge[T]:
        return Edge(self.target, self.source)

    def __repr__(self) -> str:
        return f"Edge({self.source.data!r} -> {self.target.data!r})"
