"""Core Layer — pure tree transforms, no IO, no async, no logging.

Invariants:
    - No module in core/ imports from services/, api/, schemas/, or infrastructure/
    - All functions are pure: inputs are never mutated, outputs never alias them

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
    - Frozen dataclasses + tuples: a new tree per edit, prior versions stay readable
"""
