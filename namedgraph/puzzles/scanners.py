# namedgraph/puzzles/scanners.py
"""Beacon scanners: align every scanner into scanner 0's frame."""

from __future__ import annotations

import itertools
import re
from dataclasses import dataclass
from typing import Dict

import numpy as np
import numpy.typing as npt

from namedgraph.config import get_settings
from namedgraph.errors import InputFormatError, NamedGraphError
from namedgraph.pose.pose_graph import build_pose_graph, locate_frames, merge_points, unlocated
from namedgraph.pose.transform import RigidTransform
from namedgraph.puzzles.base import Solution
from namedgraph.puzzles.input import ProblemInput
from namedgraph.utils.logger import get_logger

LOGGER = get_logger(__name__)

_HEADER = re.compile(r"^---\s*scanner\s+(\d+)\s*---$")


def parse_scanners(problem: ProblemInput) -> Dict[int, npt.NDArray[np.int64]]:
    """``{scanner id: (N, 3) beacon positions}`` from ``--- scanner N ---`` blocks."""
    scans: Dict[int, npt.NDArray[np.int64]] = {}
    for block in problem.blocks():
        match = _HEADER.match(block.lines[0].strip())
        if match is None:
            raise InputFormatError(f"expected scanner header, got {block.lines[0]!r}")
        rows = ProblemInput(block.lines[1:]).int_rows()
        if any(len(row) != 3 for row in rows):
            raise InputFormatError(f"scanner {match.group(1)}: beacons need three coordinates")
        scans[int(match.group(1))] = np.array(rows, dtype=np.int64).reshape(-1, 3)
    return scans


@dataclass(slots=True)
class ScannerMap:
    frames: Dict[int, RigidTransform]
    beacons: npt.NDArray[np.int64]

    def max_scanner_distance(self) -> int:
        """Largest Manhattan distance between two scanner positions."""
        origins = [frame.translation for frame in self.frames.values()]
        return max(
            (int(np.abs(a - b).sum()) for a, b in itertools.combinations(origins, 2)),
            default=0,
        )


def map_scanners(problem: ProblemInput, *, origin: int | None = None) -> ScannerMap:
    origin = get_settings().pose.origin_id if origin is None else origin
    graph = build_pose_graph(parse_scanners(problem))
    frames = locate_frames(graph, origin)
    missing = unlocated(graph, frames)
    if missing:
        raise NamedGraphError(f"scanners {missing} share no path with scanner {origin}")
    beacons = merge_points(graph, frames)
    LOGGER.debug("Aligned {} scanners, {} distinct beacons", len(frames), len(beacons))
    return ScannerMap(frames=frames, beacons=beacons)


class BeaconScanner(Solution):
    day = 19
    title = "Beacon Scanner"

    def part1(self, problem: ProblemInput) -> str:
        return str(len(map_scanners(problem).beacons))

    def part2(self, problem: ProblemInput) -> str:
        return str(map_scanners(problem).max_scanner_distance())


__all__ = ["BeaconScanner", "ScannerMap", "map_scanners", "parse_scanners"]
