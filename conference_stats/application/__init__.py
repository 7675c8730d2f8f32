"""Application layer - Use cases and orchestration.

Structure:
- event_handlers/: Reactive aggregation over domain events (stats aggregator)
- queries/: Query dataclasses and handlers (read operations)
- services/: Pure helpers shared by handlers (session counting)
"""
