"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (editing UI and persistence consumers)
    - Wire names are camelCase; Python attributes are snake_case

Design Decisions:
    - Separate from core dataclasses: schemas are API contracts, core types are the domain (ADR: DDD boundary)
"""
