# namedgraph/pose/angles.py
"""Rotation matrix conversions used to describe poses."""

from __future__ import annotations

import numpy as np
import numpy.typing as npt
from scipy.spatial.transform import Rotation as SciRot


def axis_angle_from_matrix(R: npt.ArrayLike) -> tuple[float, npt.NDArray[np.float64]]:
    """Convert rotation matrix to axis-angle representation.

    Args:
        R: 3x3 rotation matrix

    Returns:
        Tuple of (angle_degrees, axis_unit_vector)
    """
    rot = SciRot.from_matrix(np.asarray(R, dtype=np.float64))
    rotvec = rot.as_rotvec()

    angle_rad = float(np.linalg.norm(rotvec))
    angle_deg = angle_rad * 180.0 / np.pi

    if angle_rad > 1e-12:
        axis = rotvec / angle_rad
    else:
        axis = np.array([0.0, 0.0, 1.0])  # arbitrary axis for zero rotation

    return angle_deg, axis


def octahedral_group() -> npt.NDArray[np.int64]:
    """The 24 proper rotations of the cube as integer matrices, shape (24, 3, 3)."""
    mats = SciRot.create_group("O").as_matrix()
    return np.rint(mats).astype(np.int64)


__all__ = ["axis_angle_from_matrix", "octahedral_group"]
