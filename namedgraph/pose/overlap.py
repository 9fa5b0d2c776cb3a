# namedgraph/pose/overlap.py
"""Find the rigid transform relating two overlapping integer point sets."""

from __future__ import annotations

import itertools
from functools import lru_cache
from typing import Optional, Tuple

import numpy as np
import numpy.typing as npt

from namedgraph.config import POSE_OVERLAP_THRESHOLD
from namedgraph.pose.transform import RigidTransform

_SIGN_VECTORS = np.array(
    [
        [1, 0, 0],
        [0, 1, 0],
        [0, 0, 1],
        [-1, 0, 0],
        [0, -1, 0],
        [0, 0, -1],
    ],
    dtype=np.int64,
)


@lru_cache(maxsize=1)
def _bases() -> Tuple[npt.NDArray[np.int64], ...]:
    bases = []
    for a, b in itertools.permutations(_SIGN_VECTORS, 2):
        if int(a @ b) != 0:
            continue
        basis = np.stack([a, b, np.cross(a, b)])
        basis.setflags(write=False)
        bases.append(basis)
    return tuple(bases)


def rotation_bases() -> list[npt.NDArray[np.int64]]:
    """The 24 orientation-preserving axis-aligned rotations.

    Each is built from an ordered pair of orthogonal signed unit vectors
    ``(a, b)`` as the rows ``a, b, a x b``. Arrays are read-only.
    """
    return list(_bases())


def resolve_overlap(
    reference: npt.ArrayLike,
    candidate: npt.ArrayLike,
    *,
    threshold: int = POSE_OVERLAP_THRESHOLD,
) -> Optional[RigidTransform]:
    """Transform mapping ``candidate`` coordinates into the ``reference`` frame.

    For each basis ``B`` every pairwise delta ``r - B @ c`` is counted; the
    most common delta wins once it is shared by at least ``threshold`` pairs.
    Bases are tried in :func:`rotation_bases` order and the first hit is
    returned. ``None`` means the sets do not overlap enough, which is the
    normal answer for unrelated scans.
    """
    if threshold < 1:
        raise ValueError(f"threshold must be at least 1, got {threshold}")
    ref = np.asarray(reference, dtype=np.int64).reshape(-1, 3)
    cand = np.asarray(candidate, dtype=np.int64).reshape(-1, 3)
    if len(ref) < threshold or len(cand) < threshold:
        return None

    for basis in _bases():
        rotated = cand @ basis.T
        deltas = (ref[:, None, :] - rotated[None, :, :]).reshape(-1, 3)
        values, counts = np.unique(deltas, axis=0, return_counts=True)
        best = int(np.argmax(counts))
        if counts[best] >= threshold:
            return RigidTransform(np.array(basis), values[best])
    return None


__all__ = ["resolve_overlap", "rotation_bases"]
