# namedgraph/puzzles/risk.py
"""Risk grid: lowest total risk from the top-left to the bottom-right cell."""

from __future__ import annotations

from typing import List, Tuple

from namedgraph.algo.shortest_path import shortest_path_length
from namedgraph.config import get_settings
from namedgraph.core.graph import NamedGraph
from namedgraph.core.store import EdgeKind
from namedgraph.puzzles.base import Solution
from namedgraph.puzzles.input import ProblemInput
from namedgraph.utils.logger import get_logger

LOGGER = get_logger(__name__)

Cell = Tuple[int, int]
RiskGraph = NamedGraph[Cell, int, int]


def parse_risk_grid(problem: ProblemInput) -> RiskGraph:
    """Nodes keyed by ``(x, y)`` holding the cell risk; no edges yet."""
    graph: RiskGraph = NamedGraph(kind=EdgeKind.DIRECTED)
    for y, values in enumerate(problem.digit_grid()):
        for x, risk in enumerate(values):
            graph.insert((x, y), risk)
    return graph


def tile_grid(graph: RiskGraph, factor: int, *, risk_max: int | None = None) -> RiskGraph:
    """Repeat the grid ``factor`` times each way; tile ``(tx, ty)`` adds ``tx + ty``.

    Risks above ``risk_max`` wrap back to 1. Nodes are added in place.
    """
    risk_max = get_settings().grid.risk_max if risk_max is None else risk_max
    width = graph.max_ident_by_key(lambda cell: cell[0])[0] + 1
    height = graph.max_ident_by_key(lambda cell: cell[1])[1] + 1
    base = [(cell, risk) for cell, _, risk in graph.nodes_iter()]
    for tx in range(factor):
        for ty in range(factor):
            if tx == 0 and ty == 0:
                continue
            for (x, y), risk in base:
                wrapped = (risk + tx + ty - 1) % risk_max + 1
                graph.insert((tx * width + x, ty * height + y), wrapped)
    LOGGER.debug("Tiled grid {}x{} by {} to {} cells", width, height, factor, graph.node_count())
    return graph


def add_neighbour_edges(graph: RiskGraph) -> None:
    """Edges both ways between axis-adjacent cells, weighted by the cell entered."""
    pending: List[Tuple[Cell, Cell, int]] = []
    for (x, y), _, risk in graph.nodes_iter():
        for other in ((x - 1, y), (x, y - 1)):
            other_risk = graph.get(other)
            if other_risk is None:
                continue
            pending.append(((x, y), other, other_risk))
            pending.append((other, (x, y), risk))
    for src, dst, weight in pending:
        graph.insert_edge(src, dst, weight)


def lowest_total_risk(graph: RiskGraph) -> int | None:
    return shortest_path_length(graph, graph.min_ident(), graph.max_ident())


class RiskGrid(Solution):
    day = 15
    title = "Chiton"

    def part1(self, problem: ProblemInput) -> str:
        graph = parse_risk_grid(problem)
        add_neighbour_edges(graph)
        return str(lowest_total_risk(graph))

    def part2(self, problem: ProblemInput) -> str:
        graph = tile_grid(parse_risk_grid(problem), get_settings().grid.tile_factor)
        add_neighbour_edges(graph)
        return str(lowest_total_risk(graph))


__all__ = ["RiskGrid", "add_neighbour_edges", "lowest_total_risk", "parse_risk_grid", "tile_grid"]
