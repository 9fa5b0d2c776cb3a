# namedgraph/puzzles/input.py
"""Puzzle input loading and the small parsers the solutions share."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List

from namedgraph.errors import InputFormatError
from namedgraph.utils.logger import get_logger

LOGGER = get_logger(__name__)


@dataclass(slots=True)
class ProblemInput:
    """Lines of one puzzle input, trailing blank lines dropped."""

    lines: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        lines = [line.rstrip("\r\n") for line in self.lines]
        while lines and not lines[-1].strip():
            lines.pop()
        self.lines = lines

    @classmethod
    def from_text(cls, text: str) -> ProblemInput:
        return cls(text.splitlines())

    @classmethod
    def from_path(cls, path: Path) -> ProblemInput:
        with path.open("r", encoding="utf-8") as handle:
            problem = cls(handle.read().splitlines())
        LOGGER.debug("Loaded {} lines from {}", len(problem), path)
        return problem

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines)

    def digit_grid(self) -> List[List[int]]:
        """Rectangular grid of single digits, one row per line."""
        rows: List[List[int]] = []
        for number, line in enumerate(self.lines, start=1):
            line = line.strip()
            if not line.isdigit():
                raise InputFormatError(f"line {number}: expected digits, got {line!r}")
            rows.append([int(c) for c in line])
        if not rows:
            raise InputFormatError("empty digit grid")
        width = len(rows[0])
        ragged = [i for i, row in enumerate(rows, start=1) if len(row) != width]
        if ragged:
            raise InputFormatError(f"rows {ragged} differ from width {width}")
        return rows

    def blocks(self) -> List[ProblemInput]:
        """Groups of lines separated by blank lines."""
        groups: List[List[str]] = [[]]
        for line in self.lines:
            if line.strip():
                groups[-1].append(line)
            elif groups[-1]:
                groups.append([])
        return [ProblemInput(group) for group in groups if group]

    def int_rows(self, sep: str = ",") -> List[List[int]]:
        try:
            return [[int(v) for v in line.split(sep)] for line in self.lines if line.strip()]
        except ValueError as exc:
            raise InputFormatError(f"non-integer field: {exc}") from exc


__all__ = ["ProblemInput"]
