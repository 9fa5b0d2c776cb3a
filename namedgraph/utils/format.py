# namedgraph/utils/format.py
"""Formatting helpers for NumPy outputs."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import numpy as np
import numpy.typing as npt


@contextmanager
def numpy_print_options(*, precision: int = 4, suppress: bool = True) -> Iterator[None]:
    original = np.get_printoptions()
    np.set_printoptions(precision=precision, suppress=suppress)
    try:
        yield
    finally:
        np.set_printoptions(**original)


def format_vector(arr: npt.ArrayLike) -> str:
    """Render a small vector on one line, e.g. ``(68, -1246, -43)``."""
    return "(" + ", ".join(str(int(v)) for v in np.asarray(arr).reshape(-1)) + ")"


def format_matrix(arr: npt.ArrayLike, precision: int = 6) -> str:
    """Format a NumPy array as a clean single-line string."""
    with numpy_print_options(precision=precision, suppress=True):
        return " ".join(str(np.asarray(arr)).split())


__all__ = ["format_matrix", "format_vector", "numpy_print_options"]
