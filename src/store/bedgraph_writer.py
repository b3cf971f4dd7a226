"""bedGraph track writer.

This module serializes interval values into bedGraph text lines.
It owns the output sink lifecycle for files and standard output.
"""

from __future__ import annotations

import math
import sys
from contextlib import contextmanager
from decimal import Decimal
from pathlib import Path
from typing import Iterator, TextIO

from core.constants import BEDGRAPH_HEADER, FIELD_SEPARATOR, INPUT_ENCODING, LINE_TERMINATOR
from core.errors import BedGraphIOError
from core.types import BedGraphRecord


class BedGraphWriter:
    """Line writer for a bedGraph track.

    The ``track type=bedGraph`` header is written on construction,
    before any record.
    """

    def __init__(self, sink: TextIO) -> None:
        self._sink = sink
        self._write_line(BEDGRAPH_HEADER)

    def write(self, record: BedGraphRecord) -> None:
        """Write one ``chrom start end value`` line.

        Args:
            record: Output record to serialize.

        Raises:
            BedGraphIOError: If the sink rejects the write.
        """
        self._write_line(
            FIELD_SEPARATOR.join(
                (record.chrom, str(record.start), str(record.end), format_value(record.value))
            )
        )

    def _write_line(self, line: str) -> None:
        try:
            self._sink.write(line + LINE_TERMINATOR)
        except OSError as error:
            raise BedGraphIOError(f"Failed to write bedGraph output: {error}.") from error


def format_value(value: float) -> str:
    """Render a value as plain decimal text.

    Uses the shortest representation that round-trips, without an
    exponent, and drops the fractional part of integral values.

    Args:
        value: Value to render.

    Returns:
        Text such as ``5``, ``7.5``, ``0.0001``, ``NaN`` or ``-inf``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


@contextmanager
def open_bedgraph_writer(output_path: str | Path | None = None) -> Iterator[BedGraphWriter]:
    """Open a bedGraph writer on a file or standard output.

    The sink is flushed on every exit path. A file sink is closed on exit;
    standard output is left open. When the block raises, a failing flush
    or close is not reported so the original error propagates unchanged.

    Args:
        output_path: Destination file, or ``None`` for standard output.

    Yields:
        Writer with the header already written.

    Raises:
        BedGraphIOError: If the destination cannot be opened or written.
    """
    if output_path is None:
        sink, owns_sink = sys.stdout, False
    else:
        sink, owns_sink = _open_output_file(Path(output_path).expanduser()), True
    try:
        yield BedGraphWriter(sink)
    except BaseException:
        _release_sink(sink, owns_sink, report_errors=False)
        raise
    _release_sink(sink, owns_sink, report_errors=True)


def _open_output_file(path: Path) -> TextIO:
    try:
        return path.open("w", encoding=INPUT_ENCODING, newline="")
    except OSError as error:
        raise BedGraphIOError(
            f"Failed to open output at {path}: {error.strerror}. "
            "Check that the parent directory exists and is writable."
        ) from error


def _release_sink(sink: TextIO, owns_sink: bool, report_errors: bool) -> None:
    """Flush the sink and close it when this module opened it.

    Raises:
        BedGraphIOError: If flushing or closing fails and ``report_errors``.
    """
    try:
        try:
            sink.flush()
        finally:
            if owns_sink:
                sink.close()
    except OSError as error:
        if report_errors:
            raise BedGraphIOError(f"Failed to flush bedGraph output: {error}.") from error
