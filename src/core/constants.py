"""Core constants used across bed2bedgraph modules.

This module centralizes format literals and defaults.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

BEDGRAPH_HEADER = "track type=bedGraph"
FIELD_SEPARATOR = "\t"
LINE_TERMINATOR = "\n"
SCORE_COLUMN_KEYWORD = "score"
DEFAULT_VALUE_COLUMN = "0"
DEFAULT_SCORE = 0.0
REQUIRED_FIELD_NAMES = ("chrom", "start", "end", "name", "score")
VALUE_FIELDS_OFFSET = len(REQUIRED_FIELD_NAMES)
MAX_COORDINATE = 2**32 - 1
INPUT_ENCODING = "utf-8"
DEFAULT_LOG_LEVEL = "WARNING"
SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
PROGRAM_NAME = "bed2bedgraph"
PROGRAM_VERSION = "0.1.0"
