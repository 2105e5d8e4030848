"""Infrastructure Layer — concrete stores, clocks and cross-cutting concerns.

Invariants:
    - Infrastructure implements core/repository_protocols.py, never the reverse
    - All state is in memory and lost on restart

Design Decisions:
    - One small class per protocol (store, log, clock) for easy substitution in tests
"""
