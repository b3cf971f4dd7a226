"""Shared typed models.

This module defines immutable data models passed between the reader,
value selector, writer, and CLI layers to keep interfaces explicit.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from core.constants import DEFAULT_VALUE_COLUMN


@dataclass(frozen=True)
class BedRecord:
    """One parsed line of a BED-like input file.

    Attributes:
        chrom: Chromosome name, kept verbatim.
        start: Interval start coordinate.
        end: Interval end coordinate.
        name: Interval name, kept verbatim.
        score: Parsed score, ``0.0`` when the field is not numeric.
        values: Raw fields after the score column, in input order.
    """

    chrom: str
    start: int
    end: int
    name: str
    score: float
    values: tuple[str, ...] = ()


@dataclass(frozen=True)
class BedGraphRecord:
    """One output line of a bedGraph track."""

    chrom: str
    start: int
    end: int
    value: float


@dataclass(frozen=True)
class ScoreColumn:
    """Selects the dedicated score field."""


@dataclass(frozen=True)
class ValueIndexColumn:
    """Selects a 0-based position among the fields after the score column."""

    index: int


ValueColumn = ScoreColumn | ValueIndexColumn


@dataclass(frozen=True)
class ConversionOptions:
    """User-facing options for a conversion run.

    Attributes:
        input_path: BED-like source file.
        output_path: Destination file, or ``None`` for standard output.
        value_column: ``score`` or a string-encoded column index.
    """

    input_path: Path
    output_path: Path | None = None
    value_column: str = DEFAULT_VALUE_COLUMN


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of a completed conversion run."""

    records_written: int
    output_path: Path | None
