# namedgraph/errors.py
"""Exception hierarchy for namedgraph."""

from __future__ import annotations

from typing import Hashable


class NamedGraphError(Exception):
    """Base class for all namedgraph errors."""


class MissingNodeError(NamedGraphError, LookupError):
    """An edge was requested between identifiers that are not both present.

    This is a caller bug: endpoints must be inserted before the edge.
    """

    def __init__(self, identifier: Hashable) -> None:
        super().__init__(f"no node with identifier {identifier!r}; insert it before adding edges")
        self.identifier = identifier


class InputFormatError(NamedGraphError, ValueError):
    """Puzzle input text does not have the expected shape."""


__all__ = ["InputFormatError", "MissingNodeError", "NamedGraphError"]
