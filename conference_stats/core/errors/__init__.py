"""Core errors package.

Usage:
    from conference_stats.core.errors import DomainError
"""

from conference_stats.core.errors.domain_error import DomainError

__all__ = ["DomainError"]
