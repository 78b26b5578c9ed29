"""Infrastructure Layer — cross-cutting concerns for the shell.

Invariants:
    - Infrastructure never imports from core/ domain logic

Design Decisions:
    - Observability isolated here so core stays free of logging configuration
"""
