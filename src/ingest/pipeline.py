"""BED to bedGraph conversion orchestration.

This module wires the record reader, value selector and bedGraph writer
into a single streaming pass with one record in flight at a time.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from core.errors import ColumnOutOfRangeError
from core.logging_config import get_logger
from core.types import (
    BedGraphRecord,
    BedRecord,
    ConversionOptions,
    ConversionResult,
    ValueColumn,
)
from ingest.bed_reader import BedRecordReader
from store.bedgraph_writer import open_bedgraph_writer
from transforms.value_selection import check_first_record, parse_value_column, select_value

_LOGGER = get_logger(__name__)


def iter_bedgraph_records(
    records: Iterable[BedRecord],
    column: ValueColumn,
) -> Iterator[BedGraphRecord]:
    """Pair each record's coordinates with its selected value.

    The column is checked against the first record only.

    Args:
        records: Parsed input records in file order.
        column: Score or value-index selector.

    Yields:
        Output records in input order.

    Raises:
        ColumnOutOfRangeError: If the first record lacks the selected column.
        BedGraphParseError: If a selected value is not numeric.
    """
    record_iter = iter(records)
    first_record = next(record_iter, None)
    if first_record is None:
        return
    check_first_record(first_record, column)
    yield _to_bedgraph_record(first_record, column, 1)
    for line_number, record in enumerate(record_iter, 2):
        yield _to_bedgraph_record(record, column, line_number)


def convert_bed_to_bedgraph(options: ConversionOptions) -> ConversionResult:
    """Convert a BED-like file into a bedGraph track.

    Records written before a failure are kept in the output.

    Args:
        options: Input, output and value column options.

    Returns:
        Number of records written and the destination.

    Raises:
        BedGraphError: For any configuration, I/O or parse failure.
    """
    column = parse_value_column(options.value_column)
    reader = BedRecordReader(options.input_path)
    _LOGGER.info(
        "bedgraph_conversion_started",
        input_path=str(reader.input_path),
        output_path=str(options.output_path) if options.output_path else "-",
        value_column=options.value_column,
    )
    records_written = 0
    with open_bedgraph_writer(options.output_path) as writer:
        try:
            for bedgraph_record in iter_bedgraph_records(reader, column):
                writer.write(bedgraph_record)
                records_written += 1
        except ColumnOutOfRangeError as error:
            _LOGGER.error(
                "bedgraph_column_out_of_range",
                value_column=options.value_column,
                records_written=records_written,
                detail=str(error),
            )
            raise
    _LOGGER.info("bedgraph_conversion_completed", records_written=records_written)
    return ConversionResult(records_written=records_written, output_path=options.output_path)


def _to_bedgraph_record(record: BedRecord, column: ValueColumn, line_number: int) -> BedGraphRecord:
    return BedGraphRecord(
        chrom=record.chrom,
        start=record.start,
        end=record.end,
        value=select_value(record, column, line_number),
    )
