# namedgraph/pose/__init__.py
"""Pose-graph composition of integer rigid transforms."""

from __future__ import annotations

from namedgraph.pose.overlap import resolve_overlap, rotation_bases
from namedgraph.pose.pose_graph import (
    PoseGraph,
    build_pose_graph,
    compose_path,
    locate_frames,
    merge_points,
    unlocated,
)
from namedgraph.pose.transform import RigidTransform

__all__ = [
    "PoseGraph",
    "RigidTransform",
    "build_pose_graph",
    "compose_path",
    "locate_frames",
    "merge_points",
    "resolve_overlap",
    "rotation_bases",
    "unlocated",
]
