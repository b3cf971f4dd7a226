"""bed2bedgraph exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each stage of the conversion raises a specific error type.
"""

from __future__ import annotations


class BedGraphError(Exception):
    """Base exception for all bed2bedgraph failures."""


class BedGraphConfigError(BedGraphError):
    """Raised for invalid runtime configuration."""


class BedGraphIOError(BedGraphError):
    """Raised when the input cannot be opened or the output cannot be written."""


class BedGraphParseError(BedGraphError):
    """Raised for non-numeric coordinates, selected values, or column tokens."""


class MalformedRecordError(BedGraphError):
    """Raised when a line lacks one of the required BED fields."""


class ColumnOutOfRangeError(BedGraphError):
    """Raised when the selected value column does not exist in a record."""
