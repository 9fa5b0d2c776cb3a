# namedgraph/cli/solve_runner.py
"""Puzzle runner CLI entry point.

Runs both parts of one puzzle, each on its own graph, in two worker threads
unless ``--serial`` is given.
"""

from __future__ import annotations

import argparse
import sys
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Dict, Optional, Sequence

from namedgraph.config import LogLevel, get_settings
from namedgraph.puzzles import SOLUTIONS, ProblemInput
from namedgraph.utils.error_tracker import ErrorTracker
from namedgraph.utils.logger import configure, get_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="namedgraph-solve", description=__doc__)
    parser.add_argument("day", type=int, help=f"puzzle day, one of {sorted(SOLUTIONS)}")
    parser.add_argument("--input", type=Path, default=None, help="input file (default: data/q<day>.txt)")
    parser.add_argument("--serial", action="store_true", help="run the parts one after another")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=[level.value for level in LogLevel],
        default=None,
        help="override NAMEDGRAPH_LOG_LEVEL",
    )
    return parser


def _run_part(
    name: str, part: Callable[[ProblemInput], str], path: Path, tracker: ErrorTracker
) -> Optional[str]:
    try:
        # each part parses its own copy of the input
        return part(ProblemInput.from_path(path))
    except Exception as exc:
        tracker.record_exception(name, exc)
        return None


def main(argv: Sequence[str] | None = None) -> int:
    """Solve one puzzle and print both answers.

    Returns:
        Exit code (0 for success, 1 when a part failed, 2 for an unknown day
        or missing input). Malformed arguments exit with 2 from argparse.
    """
    args = build_parser().parse_args(argv)
    if args.log_level:
        configure(level=args.log_level)
    logger = get_logger(__name__)

    solution = SOLUTIONS.get(args.day)
    if solution is None:
        logger.error(f"No solution for day {args.day}; known days: {sorted(SOLUTIONS)}")
        return 2

    path = args.input or get_settings().paths.input_path(args.day)
    if not path.is_file():
        logger.error(f"Input file not found: {path}")
        return 2

    logger.info(f"Day {solution.day}: {solution.title} ({path})")
    tracker = ErrorTracker(context="solve_runner")
    parts = {"part1": solution.part1, "part2": solution.part2}

    answers: Dict[str, Optional[str]]
    if args.serial:
        answers = {name: _run_part(name, part, path, tracker) for name, part in parts.items()}
    else:
        with ThreadPoolExecutor(max_workers=len(parts)) as pool:
            futures = {
                name: pool.submit(_run_part, name, part, path, tracker)
                for name, part in parts.items()
            }
            answers = {name: future.result() for name, future in futures.items()}

    print(f"Part 1: {answers['part1'] if answers['part1'] is not None else 'failed'}")
    print(f"Part 2: {answers['part2'] if answers['part2'] is not None else 'failed'}")

    tracker.summary()
    return 0 if tracker.ok else 1


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()


__all__ = ["build_parser", "main", "run"]
