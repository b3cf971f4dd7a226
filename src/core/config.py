"""Runtime configuration model for bed2bedgraph.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import DEFAULT_LOG_LEVEL, SUPPORTED_LOG_LEVELS
from core.errors import BedGraphConfigError


@dataclass(frozen=True)
class BedGraphConfig:
    """Validated runtime configuration.

    Attributes:
        log_level: Minimum level for structured log events on stderr.
    """

    log_level: str

    @classmethod
    def from_env(cls) -> "BedGraphConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            BedGraphConfigError: If environment values are invalid.
        """
        log_level_value = os.getenv("BEDGRAPH_LOG_LEVEL", DEFAULT_LOG_LEVEL)
        return cls(log_level=_parse_log_level(log_level_value))


def _parse_log_level(raw_value: str) -> str:
    """Parse the log level environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Upper-cased level name.

    Raises:
        BedGraphConfigError: If the level is not supported.
    """
    level = raw_value.strip().upper()
    if level not in SUPPORTED_LOG_LEVELS:
        raise BedGraphConfigError(
            "Invalid BEDGRAPH_LOG_LEVEL value: "
            f"expected one of {SUPPORTED_LOG_LEVELS}, got '{raw_value}'. "
            "Set BEDGRAPH_LOG_LEVEL to a supported level name."
        )
    return level
