"""Sibling Reordering — normalizes `order` within one sibling list.

Invariants:
    - Output order values are exactly 1..N
    - Stable: equal (or equally missing) orders keep their input position
    - Missing order sorts after every present order
    - updated is set when order changes, and never cleared
    - Idempotent: reorder_items(reorder_items(x)) == reorder_items(x)
"""

from dataclasses import replace
from typing import Sequence

from navtree.core.navigation_item import NavigationItem


def _order_key(item: NavigationItem) -> tuple[bool, int]:
    return (item.order is None, item.order or 0)


def reorder_items(items: Sequence[NavigationItem]) -> tuple[NavigationItem, ...]:
    """Sort siblings by order and renumber them 1..N. Pure."""
    return tuple(
        replace(
            item,
            order=position,
            updated=item.updated or position != item.order,
        )
        for position, item in enumerate(sorted(items, key=_order_key), start=1)
    )
