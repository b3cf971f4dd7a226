"""Shared fixture path helpers for tests."""

from __future__ import annotations

from pathlib import Path


def fixture_path(relative_path: str) -> Path:
    """Resolve a fixture path relative to tests/fixtures.

    Args:
        relative_path: Path under fixtures root.

    Returns:
        Absolute fixture path.
    """
    tests_root = Path(__file__).resolve().parent
    return tests_root / "fixtures" / relative_path


def write_bed(directory: Path, lines: list[str], name: str = "input.bed") -> Path:
    """Write tab-separated BED lines into a temporary file."""
    bed_path = directory / name
    bed_path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    return bed_path
