# namedgraph/puzzles/basins.py
"""Height map: low points and flood-fill basins."""

from __future__ import annotations

import math
from typing import List, Tuple

from namedgraph.algo.components import component_sizes
from namedgraph.config import get_settings
from namedgraph.core.graph import NamedGraph
from namedgraph.core.store import EdgeKind
from namedgraph.puzzles.base import Solution
from namedgraph.puzzles.input import ProblemInput
from namedgraph.utils.logger import get_logger

LOGGER = get_logger(__name__)

Cell = Tuple[int, int]
HeightGraph = NamedGraph[Cell, int, None]


def build_height_graph(problem: ProblemInput) -> HeightGraph:
    """One node per ``(row, col)``, undirected edges to the four neighbours."""
    graph: HeightGraph = NamedGraph(kind=EdgeKind.UNDIRECTED)
    for row, values in enumerate(problem.digit_grid()):
        for col, value in enumerate(values):
            graph.insert((row, col), value)
            if col > 0:
                graph.insert_edge((row, col), (row, col - 1), None)
            if row > 0:
                graph.insert_edge((row, col), (row - 1, col), None)
    return graph


def low_points(graph: HeightGraph) -> List[Cell]:
    """Cells strictly lower than every neighbour."""
    return [
        cell
        for cell, _, height in graph.nodes_iter()
        if all(graph.get(other) > height for other in graph.neighbors(cell))
    ]


def basin_sizes(graph: HeightGraph, *, wall: int | None = None) -> List[int]:
    """Sizes of the regions left after removing ``wall`` cells, largest first.

    The graph is modified in place.
    """
    wall = get_settings().grid.basin_wall if wall is None else wall
    graph.retain_nodes(lambda _cell, _handle, height: height != wall)
    return sorted(component_sizes(graph), reverse=True)


class Basins(Solution):
    day = 9
    title = "Smoke Basin"

    def part1(self, problem: ProblemInput) -> str:
        graph = build_height_graph(problem)
        lows = low_points(graph)
        LOGGER.debug("Found {} low points", len(lows))
        return str(sum(1 + graph.get(cell) for cell in lows))

    def part2(self, problem: ProblemInput) -> str:
        count = get_settings().grid.basin_count
        sizes = basin_sizes(build_height_graph(problem))
        return str(math.prod(sizes[:count]))


__all__ = ["Basins", "basin_sizes", "build_height_graph", "low_points"]
