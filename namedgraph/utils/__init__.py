# namedgraph/utils/__init__.py
"""Utility package re-exporting shared helpers for namedgraph."""

from namedgraph.utils.error_tracker import ErrorTracker
from namedgraph.utils.format import format_matrix, format_vector, numpy_print_options
from namedgraph.utils.logger import configure, get_logger
from namedgraph.utils.progress import track

__all__ = [
    "ErrorTracker",
    "configure",
    "format_matrix",
    "format_vector",
    "get_logger",
    "numpy_print_options",
    "track",
]
