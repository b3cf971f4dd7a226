"""BED-like record reader.

This module streams tab-separated interval lines from a local file.
It normalizes each line into a typed ``BedRecord`` for value selection.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, TextIO

from core.constants import (
    DEFAULT_SCORE,
    FIELD_SEPARATOR,
    INPUT_ENCODING,
    MAX_COORDINATE,
    REQUIRED_FIELD_NAMES,
    VALUE_FIELDS_OFFSET,
)
from core.errors import BedGraphIOError, BedGraphParseError, MalformedRecordError
from core.number_parsing import parse_decimal, parse_unsigned
from core.types import BedRecord


class BedRecordReader:
    """Lazy, restartable sequence of records from a BED-like file.

    Each call to ``iter()`` reopens the file and yields records from the
    first line. A single iteration holds one line at a time.
    """

    def __init__(self, input_path: str | Path) -> None:
        self._input_path = Path(input_path).expanduser()
        if not self._input_path.is_file():
            raise BedGraphIOError(
                f"Failed to open input at {self._input_path}: path does not exist "
                "or is not a regular file. Provide an existing BED file."
            )

    @property
    def input_path(self) -> Path:
        return self._input_path

    def __iter__(self) -> Iterator[BedRecord]:
        try:
            handle = self._input_path.open("r", encoding=INPUT_ENCODING, newline="")
        except OSError as error:
            raise BedGraphIOError(
                f"Failed to open input at {self._input_path}: {error.strerror}."
            ) from error
        with handle:
            line_number = 1
            line = self._read_line(handle, line_number)
            while line:
                yield parse_bed_line(line, line_number)
                line_number += 1
                line = self._read_line(handle, line_number)

    def _read_line(self, handle: TextIO, line_number: int) -> str:
        """Read the next raw line, or ``""`` at end of input.

        Raises:
            BedGraphParseError: If the bytes are not valid UTF-8.
            BedGraphIOError: If the file cannot be read.
        """
        try:
            return handle.readline()
        except UnicodeDecodeError as error:
            raise BedGraphParseError(
                f"Could not decode {self._input_path} near line {line_number}: "
                f"{error.reason} at byte offset {error.start}. "
                f"Input must be {INPUT_ENCODING} text."
            ) from error
        except OSError as error:
            raise BedGraphIOError(
                f"Failed to read input at {self._input_path} near line {line_number}: "
                f"{error.strerror}."
            ) from error


def parse_bed_line(line: str, line_number: int | None = None) -> BedRecord:
    """Parse one tab-separated line into a record.

    Args:
        line: Raw line, with or without its line terminator.
        line_number: One-based line number used in error messages.

    Returns:
        Parsed record with raw trailing value fields.

    Raises:
        MalformedRecordError: If a required field is missing.
        BedGraphParseError: If start or end is not an unsigned 32-bit integer.
    """
    fields = line.rstrip("\r\n").split(FIELD_SEPARATOR)
    if len(fields) < VALUE_FIELDS_OFFSET:
        missing_field = REQUIRED_FIELD_NAMES[len(fields)]
        raise MalformedRecordError(
            f"Malformed record{_location(line_number)}: missing required field "
            f"'{missing_field}'. Expected at least {VALUE_FIELDS_OFFSET} "
            "tab-separated fields: chrom, start, end, name, score."
        )
    return BedRecord(
        chrom=fields[0],
        start=_parse_coordinate(fields[1], "start", line_number),
        end=_parse_coordinate(fields[2], "end", line_number),
        name=fields[3],
        score=_parse_score(fields[4]),
        values=tuple(fields[VALUE_FIELDS_OFFSET:]),
    )


def _parse_coordinate(text: str, field_name: str, line_number: int | None) -> int:
    """Parse an unsigned 32-bit coordinate.

    Raises:
        BedGraphParseError: If text is not a number in ``[0, 2**32 - 1]``.
    """
    try:
        value = parse_unsigned(text)
    except ValueError as error:
        raise BedGraphParseError(
            f"Could not parse {field_name}{_location(line_number)}: "
            f"expected an unsigned integer, got '{text}'."
        ) from error
    if value > MAX_COORDINATE:
        raise BedGraphParseError(
            f"Could not parse {field_name}{_location(line_number)}: "
            f"'{text}' exceeds the maximum coordinate {MAX_COORDINATE}."
        )
    return value


def _parse_score(text: str) -> float:
    # Unlike coordinates, an unparsable score is not an error.
    try:
        return parse_decimal(text)
    except ValueError:
        return DEFAULT_SCORE


def _location(line_number: int | None) -> str:
    """Return an ``at line N`` suffix when a line number is known."""
    if line_number is None:
        return ""
    return f" at line {line_number}"
