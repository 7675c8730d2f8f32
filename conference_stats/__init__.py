"""Conference session statistics service.

Aggregates "failed to start" counters for SIP call, recording and live
streaming sessions and merges them with live active/pending counts read from
the conference registry.
"""
