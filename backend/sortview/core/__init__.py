"""Core Layer — pure domain logic, no IO, no async, no FastAPI.

Invariants:
    - No module in core/ imports from api/, schemas/ or infrastructure/
    - Reads are deterministic: same state and arguments, same view

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
