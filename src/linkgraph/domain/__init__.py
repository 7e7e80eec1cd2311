"""Domain layer — nodes, edges, search, and the graph itself.

This layer depends only on the stdlib and :mod:`linkgraph.errors`.
It must never import from services or config at runtime.
"""
