"""Utility functions for gfont.

This module provides utility functions including:

- Logging setup and configuration
- Run statistics helpers
"""

from gfont.utils.logging import (
    RunLogger,
    RunStats,
    configure_logging,
)

__all__ = [
    "RunLogger",
    "RunStats",
    "configure_logging",
]
