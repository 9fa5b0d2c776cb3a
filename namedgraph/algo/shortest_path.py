# namedgraph/algo/shortest_path.py
"""Dijkstra over a :class:`NamedGraph`, generic in the weight type.

Any *measure* works as a weight: a value supporting ``+`` and ``<`` (ints,
floats, ``Fraction``, ``Decimal``, ...). Weights must be non-negative; with
negative weights the result is undefined.
"""

from __future__ import annotations

import heapq
import itertools
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional, Protocol, Tuple, TypeVar

from namedgraph.core.slotmap import Handle
from namedgraph.utils.logger import get_logger

if TYPE_CHECKING:
    from namedgraph.core.graph import NamedGraph

LOGGER = get_logger(__name__)

M = TypeVar("M", bound="Measure")


class Measure(Protocol):
    """Weight type: closed under addition and totally ordered."""

    def __add__(self: M, other: M) -> M: ...

    def __lt__(self: M, other: M) -> bool: ...


_UNSET: Any = object()


def _search(
    graph: NamedGraph,
    start: Handle,
    goal: Optional[Handle],
    cost: Optional[Callable[[Any], Any]],
    zero: Any,
) -> Tuple[Dict[Handle, Any], Dict[Handle, Handle]]:
    """Greedy relaxation from ``start``; returns finalized distances and predecessors."""
    store = graph.graph
    tentative: Dict[Handle, Any] = {start: zero}
    finalized: Dict[Handle, Any] = {}
    previous: Dict[Handle, Handle] = {}
    # counter keeps heap entries comparable when distances tie
    counter = itertools.count()
    heap: List[Tuple[Any, int, Handle]] = [(zero, next(counter), start)]

    while heap:
        distance, _, node = heapq.heappop(heap)
        if node in finalized:
            continue
        finalized[node] = distance
        if node == goal:
            break
        for _, other, payload in store.edges(node):
            if other in finalized:
                continue
            candidate = distance + (payload if cost is None else cost(payload))
            best = tentative.get(other, _UNSET)
            if best is _UNSET or candidate < best:
                tentative[other] = candidate
                previous[other] = node
                heapq.heappush(heap, (candidate, next(counter), other))

    return finalized, previous


def dijkstra(
    graph: NamedGraph,
    source: Any,
    *,
    cost: Optional[Callable[[Any], Any]] = None,
    zero: Any = 0,
) -> Dict[Any, Any]:
    """Distances from ``source`` to every reachable identifier.

    Args:
        graph: Graph to search; directed edges are followed one way only.
        source: Start identifier.
        cost: Maps an edge payload to its weight; the payload itself by default.
        zero: Additive identity of the weight type.

    Returns:
        ``{identifier: distance}``; empty when ``source`` is absent.
    """
    start = graph.get_index(source)
    if start is None:
        return {}
    finalized, _ = _search(graph, start, None, cost, zero)
    LOGGER.debug("Dijkstra from {} reached {} nodes", source, len(finalized))
    return {graph.identifier_of(node): distance for node, distance in finalized.items()}


def shortest_path_length(
    graph: NamedGraph,
    source: Any,
    target: Any,
    *,
    cost: Optional[Callable[[Any], Any]] = None,
    zero: Any = 0,
) -> Optional[Any]:
    """Minimal total weight from ``source`` to ``target``.

    ``None`` when either identifier is absent or ``target`` is unreachable.
    The graph is only read.
    """
    start = graph.get_index(source)
    goal = graph.get_index(target)
    if start is None or goal is None:
        return None
    finalized, _ = _search(graph, start, goal, cost, zero)
    return finalized.get(goal)


def shortest_path(
    graph: NamedGraph,
    source: Any,
    target: Any,
    *,
    cost: Optional[Callable[[Any], Any]] = None,
    zero: Any = 0,
) -> Optional[Tuple[Any, List[Any]]]:
    """``(length, identifiers from source to target)`` or ``None``."""
    start = graph.get_index(source)
    goal = graph.get_index(target)
    if start is None or goal is None:
        return None
    finalized, previous = _search(graph, start, goal, cost, zero)
    if goal not in finalized:
        return None
    nodes = [goal]
    while nodes[-1] != start:
        nodes.append(previous[nodes[-1]])
    nodes.reverse()
    return finalized[goal], [graph.identifier_of(node) for node in nodes]


__all__ = ["Measure", "dijkstra", "shortest_path", "shortest_path_length"]
