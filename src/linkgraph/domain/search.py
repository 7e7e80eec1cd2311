"""Depth-first walk shared by lookup and traversal.

Iterative rather than recursive so deep chains never hit the recursion
limit. Visit order matches the recursive pre-order formulation: the start
node first, then each unvisited neighbour's subtree in edge order.
Each reachable node is yielded exactly once, cycles included.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from linkgraph.domain.model import Node


def depth_first[T](start: Node[T] | None) -> Iterator[Node[T]]:
    """Yield every node reachable from *start* in depth-first pre-order.

    Neighbour sets are snapshotted when a node is entered, so the walk
    tolerates link changes made by the consumer between yields.
    """
    if start is None:
        return
    visited: set[Node[T]] = {start}
    yield start
    stack = [iter(tuple(start.neighbors()))]
    while stack:
        for neighbor in stack[-1]:
            if neighbor in visited:
                continue
            visited.add(neighbor)
            yield neighbor
            stack.append(iter(tuple(neighbor.neighbors())))
            break
        else:
            stack.pop()


def find_first[T](start: Node[T] | None, criteria: Any) -> Node[T] | None:
    """Return the first node in walk order whose data equals *criteria*.

    Stops at the first match, so the result never depends on edges visited
    after it.
    """
    for node in depth_first(start):
        if node.data == criteria:
            return node
    return None
