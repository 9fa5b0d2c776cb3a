"""Tests for the puzzle runner CLI and error tracking."""

from __future__ import annotations

from pathlib import Path

import pytest

from namedgraph.cli.solve_runner import build_parser, main
from namedgraph.utils.error_tracker import ErrorTracker


@pytest.fixture
def risk_file(tmp_path: Path, risk_sample: str) -> Path:
    path = tmp_path / "q15.txt"
    path.write_text(risk_sample, encoding="utf-8")
    return path


def test_parser_defaults() -> None:
    args = build_parser().parse_args(["9"])

    assert args.day == 9
    assert args.input is None
    assert args.serial is False


def test_runs_both_parts_in_threads(risk_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["15", "--input", str(risk_file)]) == 0

    out = capsys.readouterr().out
    assert "Part 1: 40" in out
    assert "Part 2: 315" in out


def test_serial_run_uses_data_root(
    tmp_path: Path,
    height_sample: str,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    (tmp_path / "q9.txt").write_text(height_sample, encoding="utf-8")
    monkeypatch.setenv("NAMEDGRAPH_DATA_ROOT", str(tmp_path))

    assert main(["9", "--serial"]) == 0

    out = capsys.readouterr().out
    assert "Part 1: 15" in out
    assert "Part 2: 1134" in out


def test_unknown_day_and_missing_input(tmp_path: Path) -> None:
    assert main(["4"]) == 2
    assert main(["9", "--input", str(tmp_path / "missing.txt")]) == 2


def test_log_level_is_validated(risk_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert build_parser().parse_args(["15", "--log-level", "debug"]).log_level == "DEBUG"

    with pytest.raises(SystemExit) as excinfo:
        main(["15", "--input", str(risk_file), "--log-level", "loud"])

    assert excinfo.value.code == 2
    assert "invalid choice" in capsys.readouterr().err


def test_failed_part_sets_exit_code(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "bad.txt"
    path.write_text("12a\n", encoding="utf-8")

    assert main(["9", "--input", str(path), "--serial"]) == 1
    assert "Part 1: failed" in capsys.readouterr().out


def test_error_tracker_collects_messages() -> None:
    tracker = ErrorTracker(context="test")
    assert tracker.ok
    assert tracker.summary() == {}

    tracker.record("part1", "boom")
    tracker.record_exception("part1", ValueError("bad digit"))

    assert not tracker.ok
    assert tracker.summary() == {"part1": ["boom", "ValueError: bad digit"]}
