# namedgraph/__init__.py
"""Identifier-addressed graphs with stable handles, plus the searches built on them."""

from __future__ import annotations

from namedgraph.algo import (
    component_sizes,
    connected_components,
    dijkstra,
    hop_path,
    shortest_path,
    shortest_path_length,
)
from namedgraph.config import Settings, get_settings
from namedgraph.core import EdgeKind, Handle, NamedGraph
from namedgraph.errors import InputFormatError, MissingNodeError, NamedGraphError

__version__ = "0.1.0"

__all__ = [
    "EdgeKind",
    "Handle",
    "InputFormatError",
    "MissingNodeError",
    "NamedGraph",
    "NamedGraphError",
    "Settings",
    "component_sizes",
    "connected_components",
    "dijkstra",
    "get_settings",
    "hop_path",
    "shortest_path",
    "shortest_path_length",
]
