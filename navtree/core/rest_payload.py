"""REST Payload — serializes the view tree into the nested persistence shape.

Invariants:
    - viewId / viewParentId never appear in the output
    - parent is the persisted id of the owning node (None at root); master is the navigation id
    - audience entities flatten to their ids
    - External: path and related are null, externalPath kept
    - Internal: externalPath is null, related is [{refId, ref, field}] or [] without a relation
    - Unmatched registry lookups fall back to the raw related_type (never raise)

Design Decisions:
    - Lookups fall back instead of raising: the tree was already validated by the
      relation linker when it was built, so a miss here is a stale registry, not bad input
"""

from typing import Any, Mapping

from navtree.core.domain_types import RelationConfig, relation_identifier
from navtree.core.identifiers import parse_identifier
from navtree.core.navigation_item import InternalItem, NavigationItem

RELATION_FIELD = "navigation"


def _flatten_audience(audience: tuple[Any, ...]) -> list:
    return [
        entry.get("id") if isinstance(entry, Mapping) else entry
        for entry in audience
    ]


def _related_descriptor(item: InternalItem, config: RelationConfig) -> list[dict]:
    """Polymorphic relation descriptor as stored by the persistence layer."""
    if item.related is None:
        return []
    ref_id = parse_identifier(relation_identifier(item.related))
    collection_name = item.related_type
    if not collection_name:
        content_type_item = config.find_content_type_item(ref_id)
        collection_name = (
            content_type_item.get("__collectionName") if content_type_item else None
        )
    content_type = config.find_content_type_by_collection(collection_name)
    return [{
        "refId": ref_id,
        "ref": content_type.ref_name if content_type else item.related_type,
        "field": RELATION_FIELD,
    }]


def transform_item_to_rest_payload(
    item: NavigationItem,
    parent_id: Any = None,
    master_id: Any = None,
    config: RelationConfig = RelationConfig(),
) -> dict:
    """Serialize one item and its subtree. Pure."""
    is_internal = isinstance(item, InternalItem)
    return {
        "id": item.id,
        "parent": parent_id,
        "master": master_id,
        "title": item.title,
        "type": item.kind.value,
        "updated": item.updated,
        "removed": item.removed,
        "order": item.order,
        "uiRouterKey": item.ui_router_key,
        "menuAttached": item.menu_attached,
        "audience": _flatten_audience(item.audience),
        "path": item.path if is_internal else None,
        "externalPath": None if is_internal else item.external_path,
        "related": _related_descriptor(item, config) if is_internal else None,
        "items": [
            transform_item_to_rest_payload(child, item.id, master_id, config)
            for child in item.items
        ],
    }


def transform_to_rest_payload(
    payload: Mapping[str, Any], config: RelationConfig = RelationConfig(),
) -> dict:
    """Serialize a whole navigation: {id, name, visible, items} with items as NavigationItem."""
    navigation_id = payload.get("id")
    return {
        "id": navigation_id,
        "name": payload.get("name"),
        "visible": payload.get("visible"),
        "items": [
            transform_item_to_rest_payload(item, None, navigation_id, config)
            for item in payload.get("items") or ()
        ],
    }
