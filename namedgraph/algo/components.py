# namedgraph/algo/components.py
"""Connected components of undirected graphs."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List

from namedgraph.core.slotmap import Handle
from namedgraph.core.store import EdgeKind
from namedgraph.utils.logger import get_logger

if TYPE_CHECKING:
    from namedgraph.core.graph import NamedGraph

LOGGER = get_logger(__name__)


def connected_components(graph: NamedGraph) -> List[List[Any]]:
    """Member identifiers per component, via depth-first search.

    Components are listed in the order a full scan of the store first reaches
    them; members in visiting order.
    """
    if graph.kind is not EdgeKind.UNDIRECTED:
        raise ValueError("connected components require an undirected graph")
    store = graph.graph
    visited: set[Handle] = set()
    components: List[List[Any]] = []
    for node, _ in store.node_items():
        if node in visited:
            continue
        visited.add(node)
        stack = [node]
        component: List[Any] = []
        while stack:
            current = stack.pop()
            component.append(graph.identifier_of(current))
            for neighbour in store.neighbors(current):
                if neighbour not in visited:
                    visited.add(neighbour)
                    stack.append(neighbour)
        components.append(component)
    LOGGER.debug("Found {} connected components", len(components))
    return components


def component_sizes(graph: NamedGraph) -> List[int]:
    """Node count of each component; not sorted. Sums to ``graph.node_count()``."""
    return [len(component) for component in connected_components(graph)]


__all__ = ["component_sizes", "connected_components"]
