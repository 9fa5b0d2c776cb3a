"""Tests for connected-component enumeration."""

from __future__ import annotations

import numpy as np
import pytest

from namedgraph import EdgeKind, NamedGraph, component_sizes, connected_components


def test_triangle_and_isolated_node(triangle: NamedGraph) -> None:
    assert component_sizes(triangle) == [3, 1]
    members = connected_components(triangle)
    assert sorted(members[0]) == ["a", "b", "c"]
    assert members[1] == ["d"]


def test_empty_graph() -> None:
    assert component_sizes(NamedGraph(kind=EdgeKind.UNDIRECTED)) == []


def test_order_follows_node_scan_not_size() -> None:
    graph: NamedGraph[int, None, None] = NamedGraph(kind=EdgeKind.UNDIRECTED)
    for ident in range(5):
        graph.insert(ident, None)
    graph.insert_edge(1, 2, None)
    graph.insert_edge(2, 3, None)

    assert component_sizes(graph) == [1, 3, 1]


@pytest.mark.parametrize("seed", range(5))
def test_sizes_sum_to_node_count(seed: int) -> None:
    rng = np.random.default_rng(seed)
    graph: NamedGraph[int, None, None] = NamedGraph(kind=EdgeKind.UNDIRECTED)
    count = 40
    for ident in range(count):
        graph.insert(ident, None)
    for a, b in rng.integers(0, count, size=(30, 2)).tolist():
        graph.insert_edge(a, b, None)
    for ident in rng.choice(count, size=8, replace=False).tolist():
        graph.remove(ident)

    sizes = component_sizes(graph)
    members = [m for component in connected_components(graph) for m in component]

    assert sum(sizes) == graph.node_count()
    assert sorted(members) == sorted(graph.identifiers())


def test_directed_graph_rejected() -> None:
    graph: NamedGraph[int, None, None] = NamedGraph(kind=EdgeKind.DIRECTED)
    graph.insert(0, None)

    with pytest.raises(ValueError, match="undirected"):
        component_sizes(graph)


def test_retention_splits_components(triangle: NamedGraph) -> None:
    triangle.insert("e", 0)
    triangle.insert_edge("e", "a", 0)
    triangle.retain_nodes(lambda ident, _h, _p: ident not in {"b", "c"})

    assert component_sizes(triangle) == [2, 1]
