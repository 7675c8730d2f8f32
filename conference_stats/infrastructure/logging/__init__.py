"""Logging adapters.

Usage:
    from conference_stats.infrastructure.logging import ConsoleAdapter
"""

from conference_stats.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
