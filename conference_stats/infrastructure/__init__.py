"""Infrastructure adapters.

Concrete implementations of the domain ports:
- events/: in-memory event bus and logging event handler
- logging/: structlog console adapter
- registry/: in-memory conference registry
"""
