"""Related Item Label — human-readable label for a resolved relation."""

from typing import Any, Mapping, Sequence


def extract_related_item_label(
    item: Mapping[str, Any] | None,
    fields: Mapping[str, Sequence[str]] | None = None,
) -> str:
    """First non-empty candidate field of the item, by its collection's field list.

    Falls back to fields["default"] when the collection has no entry; "" when
    nothing matches.
    """
    item = item or {}
    fields = fields or {}
    candidates = fields.get(item.get("__collectionName"), fields.get("default", ()))
    for name in candidates:
        value = item.get(name)
        if value:
            return value
    return ""
