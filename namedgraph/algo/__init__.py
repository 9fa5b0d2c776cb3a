# namedgraph/algo/__init__.py
"""Search algorithms over :class:`namedgraph.core.NamedGraph`."""

from __future__ import annotations

from namedgraph.algo.components import component_sizes, connected_components
from namedgraph.algo.paths import hop_path
from namedgraph.algo.shortest_path import Measure, dijkstra, shortest_path, shortest_path_length

__all__ = [
    "Measure",
    "component_sizes",
    "connected_components",
    "dijkstra",
    "hop_path",
    "shortest_path",
    "shortest_path_length",
]
