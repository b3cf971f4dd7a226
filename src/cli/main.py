"""bed2bedgraph CLI entry points.
This module exposes the BED to bedGraph conversion command.
It maps argparse options onto the conversion SDK call.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from core.config import BedGraphConfig
from core.constants import DEFAULT_VALUE_COLUMN, PROGRAM_NAME, PROGRAM_VERSION
from core.errors import BedGraphError
from core.logging_config import configure_logging
from core.types import ConversionOptions
from ingest.pipeline import convert_bed_to_bedgraph


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description="Convert a BED-like interval file into a bedGraph track",
    )
    parser.add_argument("-i", "--input", required=True, help="The input BED file")
    parser.add_argument(
        "-o",
        "--output",
        help="The output bedGraph file. If not provided, the output is printed to stdout",
    )
    parser.add_argument(
        "-v",
        "--value-column",
        default=DEFAULT_VALUE_COLUMN,
        help=(
            "Column holding the value to graph: 'score' or a 0-based index "
            "into the fields after the score column"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {PROGRAM_VERSION}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the bed2bedgraph CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        configure_logging(BedGraphConfig.from_env().log_level)
        convert_bed_to_bedgraph(_build_options(args))
    except BedGraphError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


def _build_options(args: argparse.Namespace) -> ConversionOptions:
    """Map parsed CLI args onto conversion options.

    Args:
        args: Parsed CLI args.

    Returns:
        Conversion options.
    """
    return ConversionOptions(
        input_path=Path(args.input),
        output_path=Path(args.output) if args.output else None,
        value_column=args.value_column,
    )
