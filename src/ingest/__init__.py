"""BED input layer.

This package streams BED-like interval lines into typed records
and drives the conversion pass that feeds the bedGraph writer.
"""
