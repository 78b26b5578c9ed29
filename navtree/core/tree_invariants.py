"""Tree Invariants — structural checks over a view tree.

Invariants:
    - find_tree_violations is PURE: returns error descriptors, never raises
    - Empty list means the tree is valid
    - Checked per node: unique view_id, view_parent_id == parent's view_id
    - Checked per sibling list: order values are exactly 1..N

Design Decisions:
    - Descriptor dicts over exceptions: callers (service logging, tests) want
      every violation at once, not the first one
    - Variant field exclusivity is not checked here: the dataclass variants make
      it unrepresentable
"""

from typing import Sequence

from navtree.core.navigation_item import NavigationItem


def _violation(error_code: str, message: str, view_id: str | None) -> dict:
    return {
        "status": "error",
        "error_code": error_code,
        "message": message,
        "view_id": view_id,
    }


def _check_level(
    items: Sequence[NavigationItem],
    parent_view_id: str | None,
    seen: set[str],
    violations: list[dict],
) -> None:
    orders = sorted(item.order for item in items if item.order is not None)
    if len(orders) != len(items) or orders != list(range(1, len(items) + 1)):
        violations.append(_violation(
            "NON_CONTIGUOUS_ORDER",
            f"Sibling orders under {parent_view_id or 'root'} are not 1..{len(items)}",
            parent_view_id,
        ))

    for item in items:
        if item.view_id in seen:
            violations.append(_violation(
                "DUPLICATE_VIEW_ID",
                f"viewId '{item.view_id}' appears more than once",
                item.view_id,
            ))
        elif item.view_id is not None:
            seen.add(item.view_id)

        if item.view_parent_id != parent_view_id:
            violations.append(_violation(
                "ORPHANED_VIEW_PARENT",
                f"viewParentId '{item.view_parent_id}' does not match "
                f"parent '{parent_view_id}'",
                item.view_id,
            ))
        _check_level(item.items, item.view_id, seen, violations)


def find_tree_violations(items: Sequence[NavigationItem]) -> list[dict]:
    """Walk the whole tree and collect every structural violation."""
    violations: list[dict] = []
    _check_level(items, None, set(), violations)
    return violations
