"""Boundary Protocols — contracts between core and its collaborators.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Impure collaborators (id generation) reach core through Protocol types

Design Decisions:
    - Protocol over ABC: structural subtyping, a plain function satisfies it
    - id_factory injected per call: deterministic factories make tree tests reproducible
"""

from typing import Protocol


class ViewIdFactory(Protocol):
    """Produces a new, globally unique view id on every call."""
    def __call__(self) -> str: ...
