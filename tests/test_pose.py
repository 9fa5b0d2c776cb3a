"""Tests for rigid transforms, overlap search and pose graphs."""

from __future__ import annotations

from typing import Dict

import numpy as np
import numpy.typing as npt
import pytest

from namedgraph.errors import NamedGraphError
from namedgraph.pose import (
    RigidTransform,
    build_pose_graph,
    compose_path,
    locate_frames,
    merge_points,
    resolve_overlap,
    rotation_bases,
    unlocated,
)
from namedgraph.pose.angles import axis_angle_from_matrix, octahedral_group


def test_rotation_bases_are_the_cube_group() -> None:
    bases = rotation_bases()
    as_set = {tuple(b.reshape(-1).tolist()) for b in bases}
    group = {tuple(m.reshape(-1).tolist()) for m in octahedral_group()}

    assert len(bases) == 24
    assert as_set == group
    for basis in bases:
        assert round(np.linalg.det(basis)) == 1
        assert np.array_equal(basis @ basis.T, np.eye(3, dtype=np.int64))


def test_rotation_bases_are_read_only() -> None:
    with pytest.raises(ValueError):
        rotation_bases()[0][0, 0] = 5


def test_transform_rejects_bad_shapes() -> None:
    with pytest.raises(ValueError, match="rotation must be 3x3"):
        RigidTransform(np.eye(2), [0, 0, 0])
    with pytest.raises(ValueError, match="translation must be length 3"):
        RigidTransform(np.eye(3), [0, 0])


@pytest.mark.parametrize("index", range(24))
def test_transform_then_inverse_is_identity(index: int) -> None:
    """Composing an edge with its inverse returns every point unchanged."""
    transform = RigidTransform(rotation_bases()[index], [17, -4, 250])
    points = np.array([[0, 0, 0], [1, 2, 3], [-500, 12, 999]], dtype=np.int64)

    assert np.array_equal(transform.then(transform.inverse()).apply(points), points)
    assert np.array_equal(transform.inverse().then(transform).apply(points), points)
    assert transform.then(transform.inverse()) == RigidTransform.identity()


def test_composition_order_matters() -> None:
    bases = rotation_bases()
    a = RigidTransform(bases[3], [10, 0, 0])
    b = RigidTransform(bases[9], [0, 5, -2])
    q = np.array([1, 2, 3])

    assert np.array_equal(a.then(b).apply(q), a.apply(b.apply(q)))
    assert a.then(b) != b.then(a)


def test_apply_single_point_and_batch() -> None:
    transform = RigidTransform(rotation_bases()[7], [1, 2, 3])
    batch = np.array([[4, 5, 6], [-1, 0, 9]])

    single = np.stack([transform.apply(p) for p in batch])

    assert np.array_equal(transform.apply(batch), single)
    assert transform.matrix.shape == (4, 4)
    assert np.array_equal(transform.matrix[:3, 3], [1, 2, 3])


def test_describe_mentions_angle() -> None:
    angle, axis = axis_angle_from_matrix(np.array([[0, -1, 0], [1, 0, 0], [0, 0, 1]]))

    assert angle == pytest.approx(90.0)
    assert np.allclose(axis, [0, 0, 1])
    assert "90deg" in RigidTransform([[0, -1, 0], [1, 0, 0], [0, 0, 1]], [0, 0, 0]).describe()


def test_resolve_overlap_recovers_transform(
    scanner_scans: Dict[int, npt.NDArray[np.int64]],
    scanner_poses: Dict[int, RigidTransform],
) -> None:
    """The found transform maps scanner 1 coordinates into scanner 0's frame."""
    found = resolve_overlap(scanner_scans[0], scanner_scans[1])

    assert found == scanner_poses[1]


def test_resolve_overlap_threshold(scanner_scans: Dict[int, npt.NDArray[np.int64]]) -> None:
    # scanners 0 and 1 share 15 beacons
    assert resolve_overlap(scanner_scans[0], scanner_scans[1], threshold=15) is not None
    assert resolve_overlap(scanner_scans[0], scanner_scans[1], threshold=16) is None

    empty = np.empty((0, 3), dtype=np.int64)
    for threshold in (0, -3):
        with pytest.raises(ValueError, match="threshold"):
            resolve_overlap(empty, empty, threshold=threshold)


def test_unrelated_scans_do_not_overlap(scanner_scans: Dict[int, npt.NDArray[np.int64]]) -> None:
    assert resolve_overlap(scanner_scans[0], scanner_scans[2]) is None
    assert resolve_overlap(scanner_scans[0], np.empty((0, 3))) is None


def test_pose_graph_edges_come_in_inverse_pairs(
    scanner_scans: Dict[int, npt.NDArray[np.int64]],
) -> None:
    graph = build_pose_graph(scanner_scans, show_progress=False)

    assert graph.node_count() == 3
    assert graph.edge_count() == 4
    assert graph.edge_between(0, 2) is None
    assert graph.edge_between(1, 0) == graph.edge_between(0, 1).inverse()


def test_locate_frames_composes_along_path(
    scanner_scans: Dict[int, npt.NDArray[np.int64]],
    scanner_poses: Dict[int, RigidTransform],
    world_beacons: npt.NDArray[np.int64],
) -> None:
    graph = build_pose_graph(scanner_scans, show_progress=False)

    frames = locate_frames(graph, 0)

    assert frames == scanner_poses
    assert compose_path(graph, [0, 1, 2]) == scanner_poses[2]
    merged = merge_points(graph, frames)
    assert np.array_equal(merged, np.unique(world_beacons, axis=0))


def test_compose_path_requires_edges(scanner_scans: Dict[int, npt.NDArray[np.int64]]) -> None:
    graph = build_pose_graph(scanner_scans, show_progress=False)

    assert compose_path(graph, [1]) == RigidTransform.identity()
    with pytest.raises(NamedGraphError):
        compose_path(graph, [0, 2])


def test_disconnected_scan_is_unlocated(scanner_scans: Dict[int, npt.NDArray[np.int64]]) -> None:
    scans = dict(scanner_scans)
    scans[7] = np.arange(36, dtype=np.int64).reshape(12, 3) * 1000
    graph = build_pose_graph(scans, show_progress=False)

    frames = locate_frames(graph, 0)

    assert 7 not in frames
    assert unlocated(graph, frames) == [7]
