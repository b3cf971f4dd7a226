"""Public SDK surface for bed2bedgraph.

This module provides a stable import path for library users.
It re-exports the conversion entry points and typed models.
"""

from __future__ import annotations

from core.errors import (
    BedGraphConfigError,
    BedGraphError,
    BedGraphIOError,
    BedGraphParseError,
    ColumnOutOfRangeError,
    MalformedRecordError,
)
from core.types import (
    BedGraphRecord,
    BedRecord,
    ConversionOptions,
    ConversionResult,
    ScoreColumn,
    ValueColumn,
    ValueIndexColumn,
)
from ingest.bed_reader import BedRecordReader, parse_bed_line
from ingest.pipeline import convert_bed_to_bedgraph, iter_bedgraph_records
from store.bedgraph_writer import BedGraphWriter, format_value, open_bedgraph_writer
from transforms.value_selection import check_first_record, parse_value_column, select_value

__all__ = [
    "BedGraphConfigError",
    "BedGraphError",
    "BedGraphIOError",
    "BedGraphParseError",
    "BedGraphRecord",
    "BedGraphWriter",
    "BedRecord",
    "BedRecordReader",
    "ColumnOutOfRangeError",
    "ConversionOptions",
    "ConversionResult",
    "MalformedRecordError",
    "ScoreColumn",
    "ValueColumn",
    "ValueIndexColumn",
    "check_first_record",
    "convert_bed_to_bedgraph",
    "format_value",
    "iter_bedgraph_records",
    "open_bedgraph_writer",
    "parse_bed_line",
    "parse_value_column",
    "select_value",
]
