"""Tree Preparation — builds the editable view tree from persisted items.

Invariants:
    - Every node gets a fresh view_id; any viewId in the input is ignored
    - view_parent_id is the caller-supplied parent (None at root level)
    - Missing (or zero) order defaults to position + 1; missing order marks the node updated
    - Children are prepared with their parent's new view_id
"""

from dataclasses import replace
from typing import Any, Iterable, Mapping

from navtree.core.boundary_protocols import ViewIdFactory
from navtree.core.domain_types import RelationConfig
from navtree.core.identifiers import new_view_id
from navtree.core.item_codec import item_from_dict
from navtree.core.navigation_item import NavigationItem
from navtree.core.relation_linker import link_relations


def prepare_items_to_view_payload(
    raw_items: Iterable[Mapping[str, Any]] | None,
    view_parent_id: str | None = None,
    config: RelationConfig = RelationConfig(),
    id_factory: ViewIdFactory = new_view_id,
) -> tuple[NavigationItem, ...]:
    """Assign view ids, default orders and resolve relations, recursively. Pure."""
    prepared = []
    for position, raw in enumerate(raw_items or (), start=1):
        item = item_from_dict(raw, with_children=False)
        view_id = id_factory()
        item = link_relations(
            replace(
                item,
                view_id=view_id,
                view_parent_id=view_parent_id,
                order=item.order or position,
                updated=item.updated or item.order is None,
            ),
            config,
        )
        children = prepare_items_to_view_payload(
            raw.get("items"), view_id, config, id_factory,
        )
        prepared.append(replace(item, items=children))
    return tuple(prepared)
