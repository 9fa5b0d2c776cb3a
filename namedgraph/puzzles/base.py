# namedgraph/puzzles/base.py
"""Common shape of a puzzle solution."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from namedgraph.puzzles.input import ProblemInput


class Solution(ABC):
    """A puzzle with two parts; each part returns its answer as text."""

    day: ClassVar[int]
    title: ClassVar[str]

    @abstractmethod
    def part1(self, problem: ProblemInput) -> str: ...

    @abstractmethod
    def part2(self, problem: ProblemInput) -> str: ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(day={self.day}, title={self.title!r})"


__all__ = ["Solution"]
