"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Callable, Dict, List

import numpy as np
import numpy.typing as npt
import pytest

from namedgraph.core import EdgeKind, NamedGraph
from namedgraph.pose.overlap import rotation_bases
from namedgraph.pose.transform import RigidTransform

HEIGHT_SAMPLE = """\
2199943210
3987894921
9856789892
8767896789
9899965678
"""

RISK_SAMPLE = """\
1163751742
1381373672
2136511328
3694931569
7463417111
1319128137
1359912421
3125421639
1293138521
2311944581
"""


@pytest.fixture(autouse=True)
def _quiet_progress(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tqdm bars out of test output."""
    monkeypatch.setenv("NAMEDGRAPH_PROGRESS", "0")


@pytest.fixture
def height_sample() -> str:
    return HEIGHT_SAMPLE


@pytest.fixture
def risk_sample() -> str:
    return RISK_SAMPLE


@pytest.fixture
def triangle() -> NamedGraph[str, int, int]:
    """Undirected a-b-c triangle plus an isolated node d."""
    graph: NamedGraph[str, int, int] = NamedGraph(kind=EdgeKind.UNDIRECTED)
    for ident, payload in (("a", 1), ("b", 2), ("c", 3), ("d", 4)):
        graph.insert(ident, payload)
    graph.insert_edge("a", "b", 5)
    graph.insert_edge("b", "c", 6)
    graph.insert_edge("c", "a", 7)
    return graph


@pytest.fixture
def world_beacons() -> npt.NDArray[np.int64]:
    """60 distinct beacons in the global (scanner 0) frame."""
    rng = np.random.default_rng(7)
    points = np.unique(rng.integers(-1000, 1000, size=(200, 3)), axis=0)
    return points[rng.permutation(len(points))[:60]]


@pytest.fixture
def scanner_poses() -> Dict[int, RigidTransform]:
    """Scanner frame -> global frame, scanner 0 at the origin."""
    bases = rotation_bases()
    return {
        0: RigidTransform.identity(),
        1: RigidTransform(bases[5], [500, -300, 80]),
        2: RigidTransform(bases[17], [-250, 900, 40]),
    }


@pytest.fixture
def scanner_scans(
    world_beacons: npt.NDArray[np.int64], scanner_poses: Dict[int, RigidTransform]
) -> Dict[int, npt.NDArray[np.int64]]:
    """Scanner 0 sees beacons 0-29, scanner 1 sees 15-44, scanner 2 sees 30-59."""
    windows = {0: slice(0, 30), 1: slice(15, 45), 2: slice(30, 60)}
    return {
        ident: scanner_poses[ident].inverse().apply(world_beacons[window])
        for ident, window in windows.items()
    }


def _render_scans(scans: Dict[int, npt.NDArray[np.int64]]) -> str:
    blocks: List[str] = []
    for ident, points in scans.items():
        lines = [f"--- scanner {ident} ---"]
        lines += [",".join(str(int(v)) for v in point) for point in points]
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks) + "\n"


@pytest.fixture
def render_scans() -> Callable[[Dict[int, npt.NDArray[np.int64]]], str]:
    """Scanner report text in the ``--- scanner N ---`` format."""
    return _render_scans
