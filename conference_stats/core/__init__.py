"""Core shared kernel.

This module provides foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Base error class for data-carried errors
- Settings and the dependency container

The core module has NO dependencies on the application or presentation layers.
"""

from conference_stats.core.enums import ErrorCode
from conference_stats.core.errors import DomainError
from conference_stats.core.result import Failure, Result, Success

__all__ = ["DomainError", "ErrorCode", "Failure", "Result", "Success"]
