# namedgraph/core/graph.py
"""Identifier-addressed graph facade over :class:`StableStore`.

Callers key nodes by their own identifiers (grid coordinates, scanner ids)
and never handle raw storage handles unless they ask for them.
"""

from __future__ import annotations

from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    Hashable,
    Iterator,
    List,
    Optional,
    Tuple,
    TypeVar,
)

from namedgraph.core.slotmap import Handle
from namedgraph.core.store import EdgeKind, StableStore
from namedgraph.errors import MissingNodeError
from namedgraph.utils.logger import get_logger

LOGGER = get_logger(__name__)

I = TypeVar("I", bound=Hashable)
N = TypeVar("N")
E = TypeVar("E")


class NamedGraph(Generic[I, N, E]):
    """Graph whose nodes are addressed by unique identifiers.

    Invariants:
        * at most one live node per identifier;
        * re-inserting an identifier swaps the payload and keeps handle and edges;
        * the identifier index and the store always describe the same nodes.

    Not thread-safe; a graph belongs to a single caller.
    """

    def __init__(self, kind: EdgeKind = EdgeKind.DIRECTED) -> None:
        self.graph: StableStore[N, E] = StableStore(kind)
        self._index: Dict[I, Handle] = {}
        self._idents: Dict[Handle, I] = {}

    def __repr__(self) -> str:
        return (
            f"NamedGraph(kind={self.kind.value}, nodes={self.node_count()}, "
            f"edges={self.edge_count()})"
        )

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, identifier: object) -> bool:
        try:
            return identifier in self._index
        except TypeError:
            return False

    @property
    def kind(self) -> EdgeKind:
        return self.graph.kind

    def node_count(self) -> int:
        return self.graph.node_count()

    def edge_count(self) -> int:
        return self.graph.edge_count()

    # ---------------------------------------------------------------- nodes

    def insert(self, identifier: I, payload: N) -> Handle:
        """Add a node, or replace the payload of an existing one in place."""
        handle = self._index.get(identifier)
        if handle is not None:
            self.graph.set_node_weight(handle, payload)
            return handle
        handle = self.graph.add_node(payload)
        self._index[identifier] = handle
        self._idents[handle] = identifier
        return handle

    def contains(self, identifier: I) -> bool:
        return identifier in self

    def get(self, identifier: I) -> Optional[N]:
        handle = self._index.get(identifier)
        return None if handle is None else self.graph.node_weight(handle)

    def get_mut(self, identifier: I) -> Optional[N]:
        """Live payload object for in-place mutation; see :meth:`update` for immutable payloads."""
        return self.get(identifier)

    def update(self, identifier: I, func: Callable[[N], N]) -> Optional[N]:
        """Replace the payload with ``func(payload)``; ``None`` when absent."""
        handle = self._index.get(identifier)
        if handle is None:
            return None
        payload = func(self.graph.node_weight(handle))  # type: ignore[arg-type]
        self.graph.set_node_weight(handle, payload)
        return payload

    def get_index(self, identifier: I) -> Optional[Handle]:
        return self._index.get(identifier)

    def identifier_of(self, handle: Handle) -> Optional[I]:
        return self._idents.get(handle)

    def remove(self, identifier: I) -> Optional[N]:
        """Drop the node and every incident edge; the identifier becomes free."""
        handle = self._index.pop(identifier, None)
        if handle is None:
            return None
        del self._idents[handle]
        return self.graph.remove_node(handle)

    def nodes_iter(self) -> Iterator[Tuple[I, Handle, N]]:
        """``(identifier, handle, payload)`` triples; do not mutate while iterating."""
        for identifier, handle in self._index.items():
            yield identifier, handle, self.graph.node_weight(handle)  # type: ignore[misc]

    def identifiers(self) -> List[I]:
        return list(self._index)

    def retain_nodes(self, predicate: Callable[[I, Handle, N], bool]) -> int:
        """Remove every node failing ``predicate``.

        The predicate sees the whole graph before anything is removed.
        Returns the number of removed nodes.
        """
        doomed = [
            identifier
            for identifier, handle, payload in list(self.nodes_iter())
            if not predicate(identifier, handle, payload)
        ]
        for identifier in doomed:
            self.remove(identifier)
        LOGGER.debug("Retained {} nodes, removed {}", self.node_count(), len(doomed))
        return len(doomed)

    def min_ident_by_key(self, key: Callable[[I], Any]) -> Optional[I]:
        """Identifier minimising ``key``; ties keep the earliest inserted one."""
        if not self._index:
            return None
        return min(self._index, key=key)

    def max_ident_by_key(self, key: Callable[[I], Any]) -> Optional[I]:
        """Identifier maximising ``key``; ties keep the earliest inserted one."""
        if not self._index:
            return None
        return max(self._index, key=key)

    def min_ident(self) -> Optional[I]:
        return self.min_ident_by_key(lambda identifier: identifier)

    def max_ident(self) -> Optional[I]:
        return self.max_ident_by_key(lambda identifier: identifier)

    # ---------------------------------------------------------------- edges

    def _require(self, identifier: I) -> Handle:
        handle = self._index.get(identifier)
        if handle is None:
            raise MissingNodeError(identifier)
        return handle

    def insert_edge(self, identifier1: I, identifier2: I, payload: E) -> Handle:
        """Connect two existing nodes.

        Both identifiers must already be inserted; otherwise
        :class:`MissingNodeError` is raised. That is a bug in the caller, not
        a condition to recover from.
        """
        source = self._require(identifier1)
        target = self._require(identifier2)
        return self.graph.add_edge(source, target, payload)

    def edge_between(self, identifier1: I, identifier2: I) -> Optional[E]:
        source = self._index.get(identifier1)
        target = self._index.get(identifier2)
        if source is None or target is None:
            return None
        edge = self.graph.find_edge(source, target)
        return None if edge is None else self.graph.edge_weight(edge)

    def edges_iter(self) -> Iterator[Tuple[I, I, E]]:
        for _, entry in self.graph.edge_items():
            yield self._idents[entry.source], self._idents[entry.target], entry.payload

    def edges_of(self, identifier: I) -> Iterator[Tuple[I, E]]:
        """``(neighbour, payload)`` for edges leaving ``identifier``."""
        handle = self._index.get(identifier)
        if handle is None:
            return
        for _, other, payload in self.graph.edges(handle):
            yield self._idents[other], payload

    def neighbors(self, identifier: I) -> Iterator[I]:
        for other, _ in self.edges_of(identifier):
            yield other

    def neighbors_undirected(self, identifier: I) -> Iterator[I]:
        handle = self._index.get(identifier)
        if handle is None:
            return
        for other in self.graph.neighbors_undirected(handle):
            yield self._idents[other]

    # ------------------------------------------------------------ searches

    def shortest_length_path(self, source: I, target: I, **kwargs: Any) -> Any:
        """Lowest total edge weight from ``source`` to ``target``, or ``None``."""
        from namedgraph.algo.shortest_path import shortest_path_length

        return shortest_path_length(self, source, target, **kwargs)


__all__ = ["NamedGraph"]
