# namedgraph/pose/transform.py
"""Integer rigid transforms (axis-aligned rotation plus translation)."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from namedgraph.pose.angles import axis_angle_from_matrix
from namedgraph.utils.format import format_matrix, format_vector


@dataclass(frozen=True, eq=False)
class RigidTransform:
    """Maps points of a child frame into a parent frame: ``p = R @ q + t``.

    Attributes:
        rotation: 3x3 integer rotation matrix
        translation: 3-vector, child origin expressed in the parent frame
    """

    rotation: npt.NDArray[np.int64]
    translation: npt.NDArray[np.int64]

    def __post_init__(self) -> None:
        rotation = np.asarray(self.rotation, dtype=np.int64)
        translation = np.asarray(self.translation, dtype=np.int64).reshape(-1)
        if rotation.shape != (3, 3):
            raise ValueError(f"rotation must be 3x3, got {rotation.shape}")
        if translation.shape != (3,):
            raise ValueError(f"translation must be length 3, got {translation.shape}")
        object.__setattr__(self, "rotation", rotation)
        object.__setattr__(self, "translation", translation)

    @classmethod
    def identity(cls) -> RigidTransform:
        return cls(np.eye(3, dtype=np.int64), np.zeros(3, dtype=np.int64))

    def then(self, other: RigidTransform) -> RigidTransform:
        """Compose with a transform expressed in this transform's child frame.

        Order matters: ``a.then(b).apply(q) == a.apply(b.apply(q))``.
        """
        return RigidTransform(
            self.rotation @ other.rotation,
            self.translation + self.rotation @ other.translation,
        )

    def inverse(self) -> RigidTransform:
        rotation_t = self.rotation.T
        return RigidTransform(rotation_t, -(rotation_t @ self.translation))

    def apply(self, points: npt.ArrayLike) -> npt.NDArray[np.int64]:
        """Transform one point ``(3,)`` or a batch ``(N, 3)``."""
        pts = np.asarray(points, dtype=np.int64)
        if pts.ndim == 1:
            return self.rotation @ pts + self.translation
        return pts @ self.rotation.T + self.translation

    @property
    def matrix(self) -> npt.NDArray[np.int64]:
        """4x4 homogeneous form."""
        T = np.eye(4, dtype=np.int64)
        T[:3, :3] = self.rotation
        T[:3, 3] = self.translation
        return T

    def describe(self) -> str:
        angle, axis = axis_angle_from_matrix(self.rotation)
        return (
            f"rot {angle:.0f}deg about {format_matrix(axis, precision=2)} "
            f"then shift {format_vector(self.translation)}"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RigidTransform):
            return NotImplemented
        return bool(
            np.array_equal(self.rotation, other.rotation)
            and np.array_equal(self.translation, other.translation)
        )

    def __repr__(self) -> str:
        return (
            f"RigidTransform(rotation={self.rotation.tolist()}, "
            f"translation={self.translation.tolist()})"
        )


__all__ = ["RigidTransform"]
