"""Utility functions for gen-front.

This module provides utility functions including:

- Logging setup and configuration
- Run statistics for progress reporting
"""

from genfront.utils.logging import GenerationStats, configure_logging

__all__ = [
    "GenerationStats",
    "configure_logging",
]
