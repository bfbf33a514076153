"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate shape and types at the system boundary (user input, API responses)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence (ADR: DDD boundary)
"""
