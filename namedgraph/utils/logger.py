# namedgraph/utils/logger.py
"""Single-source Loguru setup: console sink plus an optional file sink."""

from __future__ import annotations

import inspect
from datetime import datetime
from typing import Optional, TextIO

from loguru import logger as _root_logger

from namedgraph.config import LOG_FILE_PREFIX, get_settings

_CONFIGURED = False
_LOG_HANDLE: Optional[TextIO] = None


def _console_sink(msg) -> None:
    r = msg.record
    module = r["extra"].get("module", r.get("name", "unknown"))
    print(f"{r['time']:%H:%M:%S} | {r['level'].name: <3.3} | {module} | {r['message']}")


def _make_file_sink(fh: TextIO):
    def _file_sink(msg) -> None:
        r = msg.record
        module = r["extra"].get("module", r.get("name", "unknown"))
        fh.write(f"{r['time'].isoformat()} | {r['level'].name} | {module} | {r['message']}\n")
        fh.flush()

    return _file_sink


def _configure_logger(level: str | None = None, to_file: bool | None = None) -> None:
    global _CONFIGURED, _LOG_HANDLE

    settings = get_settings()
    level = (level or settings.logging.level).upper()
    to_file = settings.logging.to_file if to_file is None else to_file

    _root_logger.remove()
    if _LOG_HANDLE is not None:
        _LOG_HANDLE.close()
        _LOG_HANDLE = None

    def _inject_extras(record):
        record["extra"].setdefault("module", record.get("name", "unknown"))

    logger = _root_logger.patch(_inject_extras)
    logger.add(_console_sink, level=level, catch=True)

    if to_file:
        log_dir = settings.paths.logs_root
        log_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_path = log_dir / f"{LOG_FILE_PREFIX}_{timestamp}.log"
        _LOG_HANDLE = log_path.open("a", encoding="utf-8")
        logger.add(_make_file_sink(_LOG_HANDLE), level=level, catch=True)

    globals()["_LOGGER"] = logger
    _CONFIGURED = True


def get_logger(name: str | None = None):
    if not _CONFIGURED:
        _configure_logger()

    frame = inspect.currentframe()
    module_name = name
    if module_name is None and frame is not None:
        caller_frame = frame.f_back
        if caller_frame is not None:
            module = inspect.getmodule(caller_frame)
            if module is not None and module.__name__ != "__main__":
                module_name = module.__name__

    bound = globals()["_LOGGER"].bind(module=module_name or "unknown")

    def _tag(label: str, msg: str | None = None, *args, level: str = "info") -> None:
        text = f"[{label}] " + (msg or "")
        if args:
            try:
                text = text.format(*args)
            except (IndexError, KeyError, ValueError):
                pass
        getattr(bound, level, bound.info)(text)

    setattr(bound, "tag", _tag)
    return bound


def configure(level: str | None = None, to_file: bool | None = None) -> None:
    _configure_logger(level=level, to_file=to_file)


__all__ = ["configure", "get_logger"]
