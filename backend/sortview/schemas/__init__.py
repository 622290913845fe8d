"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, API responses)
    - JSON field names follow the client contract (camelCase)

Design Decisions:
    - Separate from core: schemas are API contracts, core types are domain values
"""
