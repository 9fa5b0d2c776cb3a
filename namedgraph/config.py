# namedgraph/config.py
"""Centralized configuration for the namedgraph toolkit.

All constants, settings, and configuration dataclasses are defined here.
Modules should import from this single source of truth.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Final

# ============================================================================
# PROJECT PATHS
# ============================================================================

BASE_DIR: Final[Path] = Path(__file__).resolve().parent.parent


def _env_path(key: str, default: Path) -> Path:
    """Resolve path from environment variable with fallback."""
    value = os.getenv(key)
    return Path(value).expanduser() if value else default


def _env_str(key: str, default: str) -> str:
    """Resolve string from environment variable with fallback."""
    value = os.getenv(key)
    return value if value is not None else default


def _env_int(key: str, default: int) -> int:
    """Resolve integer from environment variable with fallback."""
    value = os.getenv(key)
    return int(value) if value is not None else default


def _env_bool(key: str, default: bool) -> bool:
    """Resolve boolean flag ("1", "true", "yes") from environment variable."""
    value = os.getenv(key)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


# ============================================================================
# POSE GRAPH CONSTANTS
# ============================================================================

POSE_OVERLAP_THRESHOLD: Final[int] = 12
POSE_ORIGIN_ID: Final[int] = 0

# ============================================================================
# GRID CONSTANTS
# ============================================================================

GRID_TILE_FACTOR: Final[int] = 5
GRID_RISK_MAX: Final[int] = 9
GRID_BASIN_WALL: Final[int] = 9
GRID_BASIN_COUNT: Final[int] = 3

# ============================================================================
# LOGGING CONSTANTS
# ============================================================================

LOG_DEFAULT_LEVEL: Final[str] = "INFO"
LOG_FILE_PREFIX: Final[str] = "namedgraph"

# ============================================================================
# FILE NAMING CONSTANTS
# ============================================================================

FILENAME_INPUT_TEMPLATE: Final[str] = "q{day}.txt"

# ============================================================================
# ENUMS
# ============================================================================


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


# ============================================================================
# DATACLASSES - Configuration Sections
# ============================================================================


@dataclass(frozen=True)
class PathsConfig:
    """File system paths configuration."""

    data_root: Path
    logs_root: Path

    def input_path(self, day: int) -> Path:
        """Default input file for a puzzle day."""
        return self.data_root / FILENAME_INPUT_TEMPLATE.format(day=day)


@dataclass(frozen=True)
class LoggingConfig:
    """Loguru sink configuration."""

    level: str = LOG_DEFAULT_LEVEL
    to_file: bool = False


@dataclass(frozen=True)
class PoseConfig:
    """Pose graph construction parameters."""

    overlap_threshold: int = POSE_OVERLAP_THRESHOLD
    origin_id: int = POSE_ORIGIN_ID
    show_progress: bool = True

    def __post_init__(self) -> None:
        if self.overlap_threshold < 1:
            raise ValueError(f"overlap_threshold must be at least 1, got {self.overlap_threshold}")


@dataclass(frozen=True)
class GridConfig:
    """Grid puzzle parameters."""

    tile_factor: int = GRID_TILE_FACTOR
    risk_max: int = GRID_RISK_MAX
    basin_wall: int = GRID_BASIN_WALL
    basin_count: int = GRID_BASIN_COUNT


# ============================================================================
# MAIN CONFIGURATION
# ============================================================================


@dataclass(frozen=True)
class Settings:
    """Main application configuration.

    All subsystem configurations are aggregated here.
    Instances are immutable (frozen=True) to prevent accidental mutation.
    """

    paths: PathsConfig
    logging: LoggingConfig
    pose: PoseConfig
    grid: GridConfig


def get_settings() -> Settings:
    """Factory function to create Settings with environment variable overrides.

    Environment variables:
        NAMEDGRAPH_DATA_ROOT: Directory holding puzzle inputs
        NAMEDGRAPH_LOGS_ROOT: Directory for log files
        NAMEDGRAPH_LOG_LEVEL: Logging level
        NAMEDGRAPH_LOG_FILE: Enable the file sink ("1"/"true")
        NAMEDGRAPH_OVERLAP_THRESHOLD: Matching points needed for a pose edge
        NAMEDGRAPH_TILE_FACTOR: Risk grid expansion factor
        NAMEDGRAPH_PROGRESS: Show progress bars ("1"/"true")
    """
    data_root = _env_path("NAMEDGRAPH_DATA_ROOT", BASE_DIR / "data")
    logs_root = _env_path("NAMEDGRAPH_LOGS_ROOT", BASE_DIR / "logs")

    paths = PathsConfig(data_root=data_root, logs_root=logs_root)

    logging = LoggingConfig(
        level=_env_str("NAMEDGRAPH_LOG_LEVEL", LOG_DEFAULT_LEVEL).upper(),
        to_file=_env_bool("NAMEDGRAPH_LOG_FILE", False),
    )

    pose = PoseConfig(
        overlap_threshold=_env_int("NAMEDGRAPH_OVERLAP_THRESHOLD", POSE_OVERLAP_THRESHOLD),
        show_progress=_env_bool("NAMEDGRAPH_PROGRESS", True),
    )

    grid = GridConfig(tile_factor=_env_int("NAMEDGRAPH_TILE_FACTOR", GRID_TILE_FACTOR))

    return Settings(paths=paths, logging=logging, pose=pose, grid=grid)


__all__ = [
    "BASE_DIR",
    "FILENAME_INPUT_TEMPLATE",
    "GRID_BASIN_COUNT",
    "GRID_BASIN_WALL",
    "GRID_RISK_MAX",
    "GRID_TILE_FACTOR",
    "LOG_DEFAULT_LEVEL",
    "LOG_FILE_PREFIX",
    "POSE_ORIGIN_ID",
    "POSE_OVERLAP_THRESHOLD",
    "GridConfig",
    "LogLevel",
    "LoggingConfig",
    "PathsConfig",
    "PoseConfig",
    "Settings",
    "get_settings",
]
