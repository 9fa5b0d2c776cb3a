# namedgraph/pose/pose_graph.py
"""Pose graphs: scans as nodes, rigid transforms as edges.

An edge ``(src, dst, T)`` stores the transform taking ``dst`` coordinates into
the ``src`` frame. Walking a path away from the origin and composing the
edges in path order expresses every frame in origin coordinates.
"""

from __future__ import annotations

import itertools
from typing import Dict, Hashable, List, Mapping, Sequence

import numpy as np
import numpy.typing as npt

from namedgraph.algo.paths import hop_path
from namedgraph.config import get_settings
from namedgraph.core.graph import NamedGraph
from namedgraph.core.store import EdgeKind
from namedgraph.errors import NamedGraphError
from namedgraph.pose.overlap import resolve_overlap
from namedgraph.pose.transform import RigidTransform
from namedgraph.utils.logger import get_logger
from namedgraph.utils.progress import track

LOGGER = get_logger(__name__)

PoseGraph = NamedGraph[Hashable, npt.NDArray[np.int64], RigidTransform]


def build_pose_graph(
    scans: Mapping[Hashable, npt.ArrayLike],
    *,
    threshold: int | None = None,
    show_progress: bool | None = None,
) -> PoseGraph:
    """Insert one node per scan and an edge each way for every overlapping pair."""
    cfg = get_settings().pose
    threshold = cfg.overlap_threshold if threshold is None else threshold
    show_progress = cfg.show_progress if show_progress is None else show_progress

    graph: PoseGraph = NamedGraph(kind=EdgeKind.DIRECTED)
    for ident, points in scans.items():
        graph.insert(ident, np.asarray(points, dtype=np.int64).reshape(-1, 3))

    nodes = list(graph.nodes_iter())
    pairs = list(itertools.combinations(nodes, 2))
    found = []
    for (i, _, p), (j, _, q) in track(
        pairs, description="overlap search", total=len(pairs), enabled=show_progress
    ):
        transform = resolve_overlap(p, q, threshold=threshold)
        if transform is not None:
            found.append((i, j, transform))

    for i, j, transform in found:
        graph.insert_edge(i, j, transform)
        graph.insert_edge(j, i, transform.inverse())
        LOGGER.debug("Scan {} sees scan {}: {}", i, j, transform.describe())

    LOGGER.debug(
        "Built pose graph with {} nodes and {} edges", graph.node_count(), graph.edge_count()
    )
    return graph


def compose_path(graph: PoseGraph, path: Sequence[Hashable]) -> RigidTransform:
    """Fold edge transforms along ``path``, starting from identity."""
    acc = RigidTransform.identity()
    for src, dst in zip(path, path[1:]):
        edge = graph.edge_between(src, dst)
        if edge is None:
            raise NamedGraphError(f"path step {src!r} -> {dst!r} has no edge")
        acc = acc.then(edge)
    return acc


def locate_frames(graph: PoseGraph, origin: Hashable) -> Dict[Hashable, RigidTransform]:
    """Transform of each node reachable from ``origin`` into the origin frame."""
    frames: Dict[Hashable, RigidTransform] = {}
    for ident, _, _ in graph.nodes_iter():
        path = hop_path(graph, origin, ident)
        if path is None:
            LOGGER.debug("Scan {} is not connected to origin {}", ident, origin)
            continue
        frames[ident] = compose_path(graph, path)
    return frames


def merge_points(
    graph: PoseGraph, frames: Mapping[Hashable, RigidTransform]
) -> npt.NDArray[np.int64]:
    """Distinct points of every located scan, in the origin frame, sorted by row."""
    clouds: List[npt.NDArray[np.int64]] = [
        frames[ident].apply(points) for ident, _, points in graph.nodes_iter() if ident in frames
    ]
    if not clouds:
        return np.empty((0, 3), dtype=np.int64)
    return np.unique(np.concatenate(clouds), axis=0)


def unlocated(graph: PoseGraph, frames: Mapping[Hashable, RigidTransform]) -> List[Hashable]:
    return [ident for ident, _, _ in graph.nodes_iter() if ident not in frames]


__all__ = [
    "PoseGraph",
    "build_pose_graph",
    "compose_path",
    "locate_frames",
    "merge_points",
    "unlocated",
]
