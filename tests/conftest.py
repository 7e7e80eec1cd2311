"""Shared pytest fixtures for linkgraph tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator

import pytest

from linkgraph.domain.graph import Graph


@pytest.fixture
def graph() -> Graph[str]:
    """An empty graph."""
    return Graph()


@pytest.fixture
def sample_graph() -> Graph[str]:
    """A rooted at A; B, C, D under A; E, F under D.

    ::

        A ── B
        ├─── C
        └─── D ── E
             └─── F
    """
    g: Graph[str] = Graph()
    g.insert("A")
    g.insert("B", parent="A")
    g.insert("C", parent="A")
    g.insert("D", parent="A")
    g.insert("E", parent="D")
    g.insert("F", parent="D")
    return g


@pytest.fixture
def _isolated_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove every LINKGRAPH_* env var so settings only see test inputs."""
    for name in list(os.environ):
        if name.startswith("LINKGRAPH_"):
            monkeypatch.delenv(name)


@pytest.fixture
def _restore_logging() -> Generator[None]:
    """Restore root logger state after a test that configures logging."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("linkgraph")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)

