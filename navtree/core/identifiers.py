"""Identifiers — view id generation, generated-id detection, legacy id parsing.

Invariants:
    - new_view_id returns a canonical lowercase UUID4 string
    - is_generated_id accepts only the canonical hyphenated UUID form
    - parse_identifier mirrors leading-integer parsing: "12" -> 12, "12abc" -> 12, "abc" -> None

Design Decisions:
    - uuid from stdlib: the generated format is UUID, nothing else is needed
    - Canonical-form check over UUID() acceptance: UUID() also accepts braces, urn: and bare hex
"""

import re
import uuid
from typing import Any

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def new_view_id() -> str:
    """Default ViewIdFactory."""
    return str(uuid.uuid4())


def is_generated_id(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        return str(uuid.UUID(value)) == value.lower()
    except ValueError:
        return False


def parse_identifier(value: Any) -> Any:
    """Generated ids pass through, other strings parse as int, non-strings unchanged.

    Returns None for strings without a leading integer.
    """
    if not isinstance(value, str):
        return value
    if is_generated_id(value):
        return value
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else None
