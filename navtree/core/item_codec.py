"""Item Codec — view-payload dicts <-> NavigationItem dataclasses.

Invariants:
    - item_to_dict produces a JSON-safe dict (no tuples, no Enums, no RelationRef)
    - Every wire dict carries both variant field groups; the non-applicable group is null
    - item_from_dict drops fields that do not belong to the item's variant
    - Missing keys fall back to dataclass defaults (forward-compatible)

Design Decisions:
    - Explicit field mapping tables keep the camelCase <-> snake_case seam in one place
    - Relation classification delegated to classify_relation (single classification step)
"""

from typing import Any, Iterable, Mapping

from navtree.core.domain_types import (
    NavigationItemType,
    RawGeneratedId,
    RawNumericId,
    RelationRef,
    ResolvedEntity,
)
from navtree.core.errors import ItemValidationError
from navtree.core.navigation_item import ExternalItem, InternalItem, NavigationItem
from navtree.core.relation_linker import classify_relation

# wire key -> dataclass attribute
_COMMON_FIELDS: dict[str, str] = {
    "id": "id",
    "viewId": "view_id",
    "viewParentId": "view_parent_id",
    "uiRouterKey": "ui_router_key",
}
_FLAG_FIELDS: dict[str, str] = {
    "updated": "updated",
    "removed": "removed",
    "menuAttached": "menu_attached",
}


def _parse_type(data: Mapping[str, Any]) -> NavigationItemType:
    raw = data.get("type") or NavigationItemType.INTERNAL.value
    try:
        return NavigationItemType(raw)
    except ValueError:
        raise ItemValidationError(
            f"Unknown navigation item type {raw!r}", "type",
        ) from None


def _parse_order(data: Mapping[str, Any]) -> int | None:
    order = data.get("order")
    if order is None:
        return None
    if isinstance(order, bool) or not isinstance(order, int):
        raise ItemValidationError(f"order must be an integer, got {order!r}", "order")
    return order


def item_from_dict(data: Mapping[str, Any], *, with_children: bool = True) -> NavigationItem:
    """Parse one view-payload dict. Pure, recursive unless with_children=False."""
    if not isinstance(data, Mapping):
        raise ItemValidationError("Navigation item must be an object", "items")

    fields: dict[str, Any] = {attr: data.get(key) for key, attr in _COMMON_FIELDS.items()}
    fields.update({attr: bool(data.get(key, False)) for key, attr in _FLAG_FIELDS.items()})
    fields["title"] = data.get("title")
    fields["order"] = _parse_order(data)
    fields["audience"] = tuple(data.get("audience") or ())
    fields["items"] = items_from_dicts(data.get("items") or ()) if with_children else ()

    if _parse_type(data) is NavigationItemType.EXTERNAL:
        return ExternalItem(external_path=data.get("externalPath"), **fields)

    related_ref = data.get("relatedRef")
    return InternalItem(
        path=data.get("path"),
        related=classify_relation(data.get("related")),
        related_ref=dict(related_ref) if related_ref else None,
        related_type=data.get("relatedType"),
        **fields,
    )


def items_from_dicts(items: Iterable[Mapping[str, Any]]) -> tuple[NavigationItem, ...]:
    return tuple(item_from_dict(item) for item in items)


def relation_to_raw(relation: RelationRef | None) -> Any:
    """Serialize a RelationRef back to its wire form."""
    if isinstance(relation, (RawNumericId, RawGeneratedId)):
        return relation.value
    if isinstance(relation, ResolvedEntity):
        return dict(relation.record)
    return None


def item_to_dict(item: NavigationItem) -> dict:
    """Serialize one item (and its subtree) to the view-payload shape. Pure."""
    data: dict[str, Any] = {
        key: getattr(item, attr) for key, attr in _COMMON_FIELDS.items()
    }
    data.update({key: getattr(item, attr) for key, attr in _FLAG_FIELDS.items()})
    data["title"] = item.title
    data["type"] = item.kind.value
    data["order"] = item.order
    data["audience"] = list(item.audience)

    if isinstance(item, InternalItem):
        data.update({
            "path": item.path,
            "externalPath": None,
            "related": relation_to_raw(item.related),
            "relatedRef": dict(item.related_ref) if item.related_ref else None,
            "relatedType": item.related_type,
        })
    else:
        data.update({
            "path": None,
            "externalPath": item.external_path,
            "related": None,
            "relatedRef": None,
            "relatedType": None,
        })

    data["items"] = items_to_dicts(item.items)
    return data


def items_to_dicts(items: Iterable[NavigationItem]) -> list[dict]:
    return [item_to_dict(item) for item in items]
