"""Utility functions for vectorpath.

This module provides utility functions including:

- Logging setup and configuration
- Per-path progress and statistics tracking
"""

from vectorpath.utils.logging import (
    ParseLogger,
    ParseStats,
    configure_logging,
)

__all__ = [
    "ParseLogger",
    "ParseStats",
    "configure_logging",
]
