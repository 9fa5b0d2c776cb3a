# namedgraph/algo/paths.py
"""Unweighted path search."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Any, Deque, Dict, List, Optional

from namedgraph.core.slotmap import Handle

if TYPE_CHECKING:
    from namedgraph.core.graph import NamedGraph


def hop_path(graph: NamedGraph, source: Any, target: Any) -> Optional[List[Any]]:
    """Return a list of identifiers from source to target using BFS.

    Every edge costs one hop, so this is the fewest-edges path. Directed edges
    are followed one way. Returns None when either end is absent or no path
    exists; the path includes both ends.
    """
    start = graph.get_index(source)
    goal = graph.get_index(target)
    if start is None or goal is None:
        return None
    if start == goal:
        return [source]

    store = graph.graph
    previous: Dict[Handle, Handle] = {start: start}
    queue: Deque[Handle] = deque([start])
    while queue:
        node = queue.popleft()
        for neighbour in store.neighbors(node):
            if neighbour in previous:
                continue
            previous[neighbour] = node
            if neighbour == goal:
                path = [goal]
                while path[-1] != start:
                    path.append(previous[path[-1]])
                path.reverse()
                return [graph.identifier_of(handle) for handle in path]
            queue.append(neighbour)
    return None


__all__ = ["hop_path"]
