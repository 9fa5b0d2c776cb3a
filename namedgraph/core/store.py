# namedgraph/core/store.py
"""Node/edge storage with handles that survive unrelated removals."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Generic, Iterator, List, Optional, Tuple, TypeVar

from namedgraph.core.slotmap import Handle, SlotMap

N = TypeVar("N")
E = TypeVar("E")


class EdgeKind(str, Enum):
    """Edge interpretation, fixed per graph."""

    DIRECTED = "directed"
    UNDIRECTED = "undirected"


@dataclass(slots=True)
class EdgeEntry(Generic[E]):
    source: Handle
    target: Handle
    payload: E


class StableStore(Generic[N, E]):
    """Nodes and edges kept in slot maps plus per-node incidence lists.

    Removing a node drops every edge touching it, so the store never hands out
    an edge whose endpoint is gone.
    """

    def __init__(self, kind: EdgeKind = EdgeKind.DIRECTED) -> None:
        self.kind = EdgeKind(kind)
        self._nodes: SlotMap[N] = SlotMap()
        self._edges: SlotMap[EdgeEntry[E]] = SlotMap()
        self._outgoing: Dict[Handle, List[Handle]] = {}
        self._incoming: Dict[Handle, List[Handle]] = {}

    @property
    def is_directed(self) -> bool:
        return self.kind is EdgeKind.DIRECTED

    # ---------------------------------------------------------------- nodes

    def node_count(self) -> int:
        return len(self._nodes)

    def contains_node(self, node: Handle) -> bool:
        return node in self._nodes

    def add_node(self, payload: N) -> Handle:
        handle = self._nodes.insert(payload)
        self._outgoing[handle] = []
        self._incoming[handle] = []
        return handle

    def node_weight(self, node: Handle) -> Optional[N]:
        return self._nodes.get(node)

    def set_node_weight(self, node: Handle, payload: N) -> N:
        return self._nodes.replace(node, payload)

    def remove_node(self, node: Handle) -> Optional[N]:
        if node not in self._nodes:
            return None
        # a self-loop shows up in both lists
        incident = dict.fromkeys(self._outgoing[node] + self._incoming[node])
        for edge in incident:
            self.remove_edge(edge)
        del self._outgoing[node]
        del self._incoming[node]
        return self._nodes.remove(node)

    def node_items(self) -> Iterator[Tuple[Handle, N]]:
        return self._nodes.items()

    # ---------------------------------------------------------------- edges

    def edge_count(self) -> int:
        return len(self._edges)

    def add_edge(self, source: Handle, target: Handle, payload: E) -> Handle:
        for node in (source, target):
            if node not in self._nodes:
                raise KeyError(f"stale or unknown node handle {node!r}")
        edge = self._edges.insert(EdgeEntry(source, target, payload))
        self._outgoing[source].append(edge)
        self._incoming[target].append(edge)
        return edge

    def edge_weight(self, edge: Handle) -> Optional[E]:
        entry = self._edges.get(edge)
        return None if entry is None else entry.payload

    def remove_edge(self, edge: Handle) -> Optional[E]:
        entry = self._edges.remove(edge)
        if entry is None:
            return None
        self._outgoing[entry.source].remove(edge)
        self._incoming[entry.target].remove(edge)
        return entry.payload

    def edge_items(self) -> Iterator[Tuple[Handle, EdgeEntry[E]]]:
        return self._edges.items()

    def edges(self, node: Handle) -> Iterator[Tuple[Handle, Handle, E]]:
        """``(edge, other endpoint, payload)`` for edges leaving ``node``.

        Undirected graphs also report edges stored in the other direction.
        """
        for edge in self._outgoing.get(node, ()):
            entry = self._edges.get(edge)
            yield edge, entry.target, entry.payload  # type: ignore[union-attr]
        if not self.is_directed:
            for edge in self._incoming.get(node, ()):
                entry = self._edges.get(edge)
                if entry.source == entry.target:  # type: ignore[union-attr]
                    continue
                yield edge, entry.source, entry.payload  # type: ignore[union-attr]

    def neighbors(self, node: Handle) -> Iterator[Handle]:
        for _, other, _ in self.edges(node):
            yield other

    def neighbors_undirected(self, node: Handle) -> Iterator[Handle]:
        for edge in self._outgoing.get(node, ()):
            yield self._edges.get(edge).target  # type: ignore[union-attr]
        for edge in self._incoming.get(node, ()):
            entry = self._edges.get(edge)
            if entry.source != entry.target:  # type: ignore[union-attr]
                yield entry.source  # type: ignore[union-attr]

    def find_edge(self, source: Handle, target: Handle) -> Optional[Handle]:
        for edge, other, _ in self.edges(source):
            if other == target:
                return edge
        return None


__all__ = ["EdgeEntry", "EdgeKind", "StableStore"]
