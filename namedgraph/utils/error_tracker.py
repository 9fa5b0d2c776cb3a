# namedgraph/utils/error_tracker.py
"""Centralised error tracking for puzzle runs."""

from __future__ import annotations

import traceback
from dataclasses import dataclass, field

from namedgraph.utils.logger import get_logger


@dataclass(slots=True)
class ErrorTracker:
    """Collect exceptions and contextual information during execution."""

    context: str = "ErrorTracker"
    errors: dict[str, list[str]] = field(default_factory=dict)

    def record(self, key: str, message: str) -> None:
        logger = get_logger(self.context)
        logger.error(f"{key}: {message}")
        self.errors.setdefault(key, []).append(message)

    def record_exception(self, key: str, exc: BaseException) -> None:
        """Store ``exc`` under ``key``; the traceback goes to the debug log."""
        logger = get_logger(self.context)
        logger.debug(
            "Traceback for {}:\n{}",
            key,
            "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
        )
        self.record(key, f"{type(exc).__name__}: {exc}")

    @property
    def ok(self) -> bool:
        return not self.errors

    def summary(self) -> dict[str, list[str]]:
        logger = get_logger(self.context)
        if not self.errors:
            logger.info("No errors recorded")
            return {}
        for key, messages in self.errors.items():
            logger.warning(f"Encountered {len(messages)} issues for {key}")
        return dict(self.errors)


__all__ = ["ErrorTracker"]
