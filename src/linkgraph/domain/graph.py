"""Graph — a root-anchored undirected graph built from symmetric links.

Every public operation resolves data values to nodes by a depth-first walk
from the root, then queries or mutates the resolved nodes' edge sets.
A node is visible only while it is reachable from the root.

INVARIANT: ``are_linked(a, b) == are_linked(b, a)`` after any public call.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator
from contextlib import AbstractContextManager, nullcontext
from typing import TYPE_CHECKING, Any

from linkgraph.domain.model import Node, validate_data
from linkgraph.domain.search import depth_first, find_first
from linkgraph.errors import NotFoundError

if TYPE_CHECKING:
    from linkgraph.config.models import GraphConfig

logger = logging.getLogger(__name__)

# Distinguishes "no parent given" from an explicit parent value.
UNSET: Any = object()


class Graph[T]:
    """In-memory undirected graph with a single root entry point.

    Args:
        first_element: Optional initial root value. ``None`` leaves the
            graph empty until the first :meth:`insert`.
        allow_self_links: When False, :meth:`link` refuses to link a node
            to itself and returns False.
        synchronized: Guard every public operation with one re-entrant
            lock, for graphs shared between threads.
    """

    def __init__(
        self,
        first_element: T | None = None,
        *,
        allow_self_links: bool = True,
        synchronized: bool = False,
    ) -> None:
        self._root: Node[T] | None = None
        if first_element is not None:
            self._root = Node(first_element)
        self.allow_self_links = allow_self_links
        self._lock: AbstractContextManager[Any] = (
            threading.RLock() if synchronized else nullcontext()
        )

    @classmethod
    def from_config(cls, config: GraphConfig, first_element: T | None = None) -> Graph[T]:
        """Build a graph using the ``[graph]`` configuration section."""
        return cls(
            first_element,
            allow_self_links=config.allow_self_links,
            synchronized=config.synchronized,
        )

    @property
    def root(self) -> Node[T] | None:
        return self._root

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def insert(self, data: T, parent: Any = UNSET) -> None:
        """Insert *data* into the graph.

        Without *parent*, the first insertion becomes the root and later ones
        are linked to the root. With *parent*, the new node is linked to the
        node holding *parent*.

        If *data* is already reachable, the existing node is linked instead
        of creating a second node with equal data. Inserting a value onto
        itself is a no-op.

        Raises:
            InvalidArgumentError: *data* is None or unhashable.
            NotFoundError: *parent* was given but is not reachable.
        """
        validate_data(data)
        with self._lock:
            if parent is UNSET:
                if self._root is None:
                    self._root = Node(data)
                    logger.debug("Inserted root %r", data)
                    return
                anchor = self._root
            else:
                found = find_first(self._root, parent)
                if found is None:
                    raise NotFoundError(parent)
                anchor = found

            node = find_first(self._root, data)
            if node is None:
                node = Node(data)
            if node is anchor:
                return
            anchor.add_link(node)
            logger.debug("Inserted %r under %r", data, anchor.data)

    def remove(self, data: T) -> None:
        """Detach the node holding *data* from every node it is linked to.

        No-op if *data* is not reachable. The root stays the root even when
        it is the node being detached.
        """
        with self._lock:
            node = find_first(self._root, data)
            if node is None:
                return
            for neighbor in tuple(node.neighbors()):
                node.remove_link(neighbor)
            logger.debug("Removed %r", data)

    def link(self, source: T, target: T) -> bool:
        """Link the nodes holding *source* and *target* in both directions.

        Returns True only if a new link was established; False if either
        node is absent, they were already linked, or a self-link was refused.
        """
        with self._lock:
            source_node = find_first(self._root, source)
            target_node = find_first(self._root, target)
            if source_node is None or target_node is None:
                return False
            if source_node is target_node and not self.allow_self_links:
                logger.debug("Refused self-link on %r", source)
                return False
            return source_node.add_link(target_node)

    def unlink(self, source: T, target: T) -> bool:
        """Remove the link between *source* and *target* in both directions.

        Returns False if either node is absent or they were not linked.
        """
        with self._lock:
            source_node = find_first(self._root, source)
            target_node = find_first(self._root, target)
            if source_node is None or target_node is None:
                return False
            return source_node.remove_link(target_node)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def are_linked(self, source: T, target: T) -> bool:
        with self._lock:
            source_node = find_first(self._root, source)
            target_node = find_first(self._root, target)
            if source_node is None or target_node is None:
                return False
            return source_node.contains_link(target_node)

    def find_node(self, data: Any) -> Node[T] | None:
        """Return the reachable node holding *data*, or None."""
        with self._lock:
            return find_first(self._root, data)

    def for_each(self, visitor: Callable[[Node[T]], object]) -> None:
        """Call *visitor* once for every node reachable from the root."""
        with self._lock:
            for node in depth_first(self._root):
                visitor(node)

    def __iter__(self) -> Iterator[Node[T]]:
        with self._lock:
            nodes = list(depth_first(self._root))
        return iter(nodes)

    def __contains__(self, data: object) -> bool:
        return self.find_node(data) is not None

    def __len__(self) -> int:
        with self._lock:
            return sum(1 for _ in depth_first(self._root))

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Graph):
            return NotImplemented
        return self._root == other._root

    def __repr__(self) -> str:
        root = self._root.data if self._root is not None else None
        return f"Graph(root={root!r})"
