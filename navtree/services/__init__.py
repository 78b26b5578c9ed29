"""Services Layer — orchestration of the pure core for the API.

Invariants:
    - Services never contain tree algebra (delegate to core/)
    - Services own logging for the operations they orchestrate

Design Decisions:
    - One service class per resource for locality (ADR: no god objects)
"""
