"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate types at the system boundary; emptiness rules live in core/validation.py
    - Responses use the public camelCase field names (lastModified)

Design Decisions:
    - Separate from core records: schemas are API contracts, records are domain state
"""
