"""Shared constants, errors, configuration, logging and typed models."""
