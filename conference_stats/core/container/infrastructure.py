"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (structlog console adapter)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from conference_stats.core.config import get_settings

if TYPE_CHECKING:
    from conference_stats.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from conference_stats.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    use_json = not settings.is_development
    return ConsoleAdapter(use_json=use_json, level=settings.log_level)
