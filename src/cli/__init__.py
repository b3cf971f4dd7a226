"""Command-line interface for bed2bedgraph."""
