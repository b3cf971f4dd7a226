"""Value column selection transform.

This module resolves the configured column token into a typed selector
and extracts one numeric value per record for the bedGraph writer.
"""

from __future__ import annotations

from core.constants import SCORE_COLUMN_KEYWORD
from core.errors import BedGraphConfigError, BedGraphParseError, ColumnOutOfRangeError
from core.number_parsing import parse_decimal, parse_integer
from core.types import BedRecord, ScoreColumn, ValueColumn, ValueIndexColumn


def parse_value_column(token: str) -> ValueColumn:
    """Build a column selector from its command-line token.

    Args:
        token: ``score`` or a non-negative integer index.

    Returns:
        Score selector or value-index selector.

    Raises:
        BedGraphParseError: If the token is neither ``score`` nor an integer.
        BedGraphConfigError: If the index is negative.
    """
    if token == SCORE_COLUMN_KEYWORD:
        return ScoreColumn()
    try:
        index = parse_integer(token)
    except ValueError as error:
        raise BedGraphParseError(
            f"Could not parse column index '{token}': expected "
            f"'{SCORE_COLUMN_KEYWORD}' or a non-negative integer."
        ) from error
    if index < 0:
        raise BedGraphConfigError(
            f"Invalid column index {index}: indexes are 0-based and must not be "
            f"negative. Use '{SCORE_COLUMN_KEYWORD}' to select the score field."
        )
    return ValueIndexColumn(index=index)


def check_first_record(record: BedRecord, column: ValueColumn) -> None:
    """Validate that the selected column exists in the first record.

    Later records are assumed to share the first record's shape.

    Raises:
        ColumnOutOfRangeError: If the index is past the last value field.
    """
    if isinstance(column, ValueIndexColumn) and column.index >= len(record.values):
        raise ColumnOutOfRangeError(
            f"Could not find column index {column.index} in record. Remember that "
            "the index is 0-based and the first value is after the score column."
        )


def select_value(
    record: BedRecord,
    column: ValueColumn,
    line_number: int | None = None,
) -> float:
    """Extract the configured numeric value from a record.

    Args:
        record: Parsed input record.
        column: Score or value-index selector.
        line_number: One-based line number used in error messages.

    Returns:
        Selected value as a float.

    Raises:
        BedGraphParseError: If the selected value field is not numeric.
        ColumnOutOfRangeError: If the record has fewer value fields.
    """
    if isinstance(column, ScoreColumn):
        return record.score
    location = "" if line_number is None else f" at line {line_number}"
    if column.index >= len(record.values):
        raise ColumnOutOfRangeError(
            f"Record{location} has {len(record.values)} value fields; "
            f"column index {column.index} is out of range."
        )
    raw_value = record.values[column.index]
    try:
        return parse_decimal(raw_value)
    except ValueError as error:
        raise BedGraphParseError(
            f"Could not parse value{location} in column {column.index}: "
            f"expected a number, got '{raw_value}'."
        ) from error
