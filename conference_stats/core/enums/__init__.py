"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from conference_stats.core.enums import ErrorCode, Environment
"""

from conference_stats.core.enums.environment import Environment
from conference_stats.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
