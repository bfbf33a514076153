"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Infrastructure never leaks driver exceptions past its boundary
    - Storage outcomes are returned as core domain types

Design Decisions:
    - Thin wrappers over SQLAlchemy (ADR: ExMA single responsibility)
"""
