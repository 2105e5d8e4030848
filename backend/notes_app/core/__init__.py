"""Core Layer — pure domain logic, no IO, no framework imports.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - Validation functions are pure and deterministic

Design Decisions:
    - Functional core separated from the service shell that owns state
"""
