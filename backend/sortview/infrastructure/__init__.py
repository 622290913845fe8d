"""Infrastructure Layer — process-wide state lifecycle and cross-cutting concerns.

Invariants:
    - Infrastructure wires core objects together; it holds no domain rules itself
"""
