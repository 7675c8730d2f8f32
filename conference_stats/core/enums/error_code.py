"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*, VALIDATION_*)
- Session statistics errors (SESSION_*, CONFERENCE_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    INVALID_INPUT = "invalid_input"

    # Session statistics errors
    SESSION_KIND_MISSING = "session_kind_missing"
    SESSION_KIND_UNRECOGNIZED = "session_kind_unrecognized"
    CONFERENCE_REGISTRY_UNAVAILABLE = "conference_registry_unavailable"
