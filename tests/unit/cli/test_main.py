"""Unit tests for CLI command handling."""

from __future__ import annotations

from pathlib import Path

import pytest

from cli.main import build_parser, main
from tests.fixture_paths import fixture_path, write_bed


def test_cli_writes_bedgraph_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    """CLI without --output should print the track to stdout."""
    args = ["--input", str(fixture_path("bed/values.bed"))]

    exit_code = main(args)
    output = capsys.readouterr().out.splitlines()

    assert exit_code == 0
    assert output[:2] == ["track type=bedGraph", "chrom1\t10\t20\t7.5"]


def test_cli_writes_output_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Short flags should select the output file and score column."""
    output_path = tmp_path / "out.bedgraph"
    args = ["-i", str(fixture_path("bed/score_only.bed")), "-o", str(output_path), "-v", "score"]

    exit_code = main(args)

    assert exit_code == 0 and capsys.readouterr().out == ""
    assert output_path.read_text(encoding="utf-8").splitlines()[1] == "chrom1\t10\t20\t5"


def test_cli_reports_out_of_range_column(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """An index past the value fields should print guidance and fail."""
    output_path = tmp_path / "out.bedgraph"
    input_path = write_bed(tmp_path, ["chrom1\t10\t20\tnameA\t5.0\t7.5\t9.0"])

    exit_code = main(["-i", str(input_path), "-o", str(output_path), "-v", "2"])
    error_output = capsys.readouterr().err

    assert exit_code == 1
    assert "column index 2" in error_output and "0-based" in error_output
    assert output_path.read_text(encoding="utf-8") == "track type=bedGraph\n"


def test_cli_reports_missing_input(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """An unopenable input should fail with a diagnostic."""
    exit_code = main(["--input", str(tmp_path / "missing.bed")])

    assert exit_code == 1
    assert capsys.readouterr().err.startswith("error: Failed to open input")


def test_cli_rejects_non_integer_column(capsys: pytest.CaptureFixture[str]) -> None:
    """An unparsable column token should fail before any output."""
    exit_code = main(["-i", str(fixture_path("bed/values.bed")), "-v", "second"])
    captured = capsys.readouterr()

    assert exit_code == 1 and captured.out == ""
    assert "second" in captured.err


def test_cli_requires_input() -> None:
    """argparse should reject a missing --input."""
    with pytest.raises(SystemExit) as exit_info:
        build_parser().parse_args([])

    assert exit_info.value.code == 2


def test_cli_default_value_column_is_zero() -> None:
    """The value column should default to the first value field."""
    args = build_parser().parse_args(["-i", "input.bed"])

    assert args.value_column == "0" and args.output is None


def test_cli_reports_undecodable_input(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Invalid UTF-8 input should fail with a diagnostic instead of a traceback."""
    input_path = tmp_path / "binary.bed"
    input_path.write_bytes(b"chr\xff\t10\t20\tnameA\t5.0\n")

    exit_code = main(["-i", str(input_path), "-o", str(tmp_path / "out.bedgraph")])

    assert exit_code == 1
    assert "error: Could not decode" in capsys.readouterr().err
