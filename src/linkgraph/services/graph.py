"""GraphService — ServiceResult facade over a domain :class:`Graph`.

Hard domain errors (invalid data, missing parent) are converted into
``ok=False`` results with an :class:`ErrorCode`. Soft outcomes from the
graph (absent nodes, existing links) are reported as booleans in ``data``.
Unexpected exceptions propagate.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import structlog

from linkgraph.domain.graph import UNSET, Graph
from linkgraph.errors import InvalidArgumentError, NotFoundError
from linkgraph.services.result import ErrorCode, ServiceError, ServiceResult

if TYPE_CHECKING:
    from linkgraph.config.settings import LinkGraphSettings
    from linkgraph.domain.model import Node

# Bound to a stdlib logger so nothing is emitted until configure_logging runs.
log = structlog.wrap_logger(logging.getLogger(__name__))


def _neighbors(node: Node[Any]) -> list[Any]:
    return [neighbor.data for neighbor in node.neighbors()]


def _error_result(op: str, exc: InvalidArgumentError | NotFoundError) -> ServiceResult:
    code = ErrorCode.NOT_FOUND if isinstance(exc, NotFoundError) else ErrorCode.INVALID_ARGUMENT
    log.info("graph.op_failed", op=op, code=str(code), reason=str(exc))
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=str(exc), detail={"value": repr(exc.value)}),
    )


class GraphService:
    """Handles graph mutations and queries, returning ServiceResult."""

    def __init__(self, graph: Graph[Any] | None = None) -> None:
        self._graph: Graph[Any] = graph if graph is not None else Graph()

    @classmethod
    def from_settings(cls, settings: LinkGraphSettings | None = None) -> GraphService:
        """Configure logging and build an empty graph from *settings*.

        Loads settings via discovery when none are given.
        """
        from linkgraph.config.logging import configure_logging
        from linkgraph.config.settings import LinkGraphSettings

        if settings is None:
            settings = LinkGraphSettings.load()
        configure_logging(verbose=settings.logging.verbose, log_json=settings.logging.log_json)
        return cls(Graph.from_config(settings.graph))

    @property
    def graph(self) -> Graph[Any]:
        return self._graph

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def insert(self, data: Any, parent: Any = UNSET) -> ServiceResult:
        """Insert *data* at the root, or under *parent* when given."""
        try:
            self._graph.insert(data, parent)
        except (InvalidArgumentError, NotFoundError) as exc:
            return _error_result("insert", exc)
        log.debug("graph.insert", data=data, parent=None if parent is UNSET else parent)
        return ServiceResult(
            ok=True,
            op="insert",
            data={"data": data, "parent": None if parent is UNSET else parent},
        )

    def remove(self, data: Any) -> ServiceResult:
        """Detach *data* from all its neighbours. Absent data is a warning."""
        removed = data in self._graph
        self._graph.remove(data)
        warnings: list[str] = []
        if not removed:
            warnings.append(f"Node {data!r} not found; nothing removed")
        log.debug("graph.remove", data=data, removed=removed)
        return ServiceResult(
            ok=True,
            op="remove",
            data={"data": data, "removed": removed},
            warnings=warnings,
        )

    def link(self, source: Any, target: Any) -> ServiceResult:
        linked = self._graph.link(source, target)
        log.debug("graph.link", source=source, target=target, linked=linked)
        return ServiceResult(
            ok=True,
            op="link",
            data={"source": source, "target": target, "linked": linked},
        )

    def unlink(self, source: Any, target: Any) -> ServiceResult:
        unlinked = self._graph.unlink(source, target)
        log.debug("graph.unlink", source=source, target=target, unlinked=unlinked)
        return ServiceResult(
            ok=True,
            op="unlink",
            data={"source": source, "target": target, "unlinked": unlinked},
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def are_linked(self, source: Any, target: Any) -> ServiceResult:
        return ServiceResult(
            ok=True,
            op="are_linked",
            data={
                "source": source,
                "target": target,
                "linked": self._graph.are_linked(source, target),
            },
        )

    def find(self, data: Any) -> ServiceResult:
        """Look up *data*; unreachable data is a NOT_FOUND error result."""
        node = self._graph.find_node(data)
        if node is None:
            return ServiceResult(
                ok=False,
                op="find",
                error=ServiceError(
                    code=ErrorCode.NOT_FOUND,
                    message=f"Node {data!r} not found in graph",
                ),
            )
        return ServiceResult(
            ok=True,
            op="find",
            data={"data": node.data, "neighbors": _neighbors(node)},
        )

    def nodes(self) -> ServiceResult:
        """List every reachable node with its neighbours, in walk order."""
        items = [{"data": node.data, "neighbors": _neighbors(node)} for node in self._graph]
        return ServiceResult(
            ok=True,
            op="nodes",
            data={"count": len(items), "items": items},
        )
