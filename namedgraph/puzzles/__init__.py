# namedgraph/puzzles/__init__.py
"""Puzzle solutions built on the graph core."""

from __future__ import annotations

from typing import Dict

from namedgraph.puzzles.base import Solution
from namedgraph.puzzles.basins import Basins
from namedgraph.puzzles.input import ProblemInput
from namedgraph.puzzles.risk import RiskGrid
from namedgraph.puzzles.scanners import BeaconScanner

SOLUTIONS: Dict[int, Solution] = {
    solution.day: solution for solution in (Basins(), RiskGrid(), BeaconScanner())
}

__all__ = ["BeaconScanner", "Basins", "ProblemInput", "RiskGrid", "SOLUTIONS", "Solution"]
