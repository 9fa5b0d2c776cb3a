# namedgraph/core/__init__.py
"""Identifier-indexed graph container and its storage layers."""

from __future__ import annotations

from namedgraph.core.graph import NamedGraph
from namedgraph.core.slotmap import Handle, SlotMap
from namedgraph.core.store import EdgeEntry, EdgeKind, StableStore

__all__ = [
    "EdgeEntry",
    "EdgeKind",
    "Handle",
    "NamedGraph",
    "SlotMap",
    "StableStore",
]
