"""View Tree Editing — inserts or replaces one node anywhere in the view tree.

Invariants:
    - The target is addressed by (view_parent_id, view_id): view_id must be a
      child of view_parent_id, or a root when view_parent_id is empty
    - Target without view_id is new: fresh view_id, order = sibling count + 1, appended
    - Target with view_id replaces the sibling carrying that view_id
    - Inserted and replaced nodes are relation-linked and flagged updated
    - Every level walked is renormalized; the input tree is never mutated

Design Decisions:
    - Structural recursion rebuilding the path bottom-up over in-place graph
      mutation (ADR: new tree per edit keeps prior versions safe to read)
"""

from dataclasses import replace
from typing import Sequence

from navtree.core.boundary_protocols import ViewIdFactory
from navtree.core.domain_types import RelationConfig, ViewId
from navtree.core.identifiers import new_view_id
from navtree.core.navigation_item import NavigationItem
from navtree.core.relation_linker import link_relations
from navtree.core.reorder import reorder_items


def _link_edited(target: NavigationItem, config: RelationConfig) -> NavigationItem:
    return link_relations(replace(target, updated=True), config)


def _link_new(
    target: NavigationItem,
    order: int,
    config: RelationConfig,
    id_factory: ViewIdFactory,
) -> NavigationItem:
    return _link_edited(replace(target, order=order, view_id=id_factory()), config)


def _replace_matching(
    items: Sequence[NavigationItem], target: NavigationItem, config: RelationConfig,
) -> tuple[NavigationItem, ...]:
    return tuple(
        _link_edited(target, config) if item.view_id == target.view_id else item
        for item in items
    )


def _edit_branch(
    item: NavigationItem,
    target: NavigationItem,
    config: RelationConfig,
    id_factory: ViewIdFactory,
) -> NavigationItem:
    """Apply the edit to the addressed branch, or descend into this node's children."""
    if item.view_id != target.view_parent_id:
        return replace(
            item,
            items=transform_item_to_view_payload(target, item.items, config, id_factory),
        )
    if not target.view_id:
        new_item = _link_new(target, len(item.items) + 1, config, id_factory)
        return replace(item, items=(*reorder_items(item.items), new_item))
    return replace(
        item, items=reorder_items(_replace_matching(item.items, target, config)),
    )


def transform_item_to_view_payload(
    target: NavigationItem,
    items: Sequence[NavigationItem],
    config: RelationConfig = RelationConfig(),
    id_factory: ViewIdFactory = new_view_id,
) -> tuple[NavigationItem, ...]:
    """Return a new tree with the target inserted or replaced. Pure."""
    if not target.view_parent_id:
        if target.view_id:
            return reorder_items(_replace_matching(items, target, config))
        new_item = _link_new(target, len(items) + 1, config, id_factory)
        return (*reorder_items(items), new_item)

    return reorder_items(
        tuple(_edit_branch(item, target, config, id_factory) for item in items)
    )


def find_view_item(
    items: Sequence[NavigationItem], view_id: ViewId,
) -> NavigationItem | None:
    """Depth-first lookup by view_id."""
    for item in items:
        if item.view_id == view_id:
            return item
        found = find_view_item(item.items, view_id)
        if found is not None:
            return found
    return None


def find_sibling_items(
    items: Sequence[NavigationItem], view_parent_id: ViewId | None,
) -> tuple[NavigationItem, ...] | None:
    """Sibling list an edit addressed at view_parent_id lands in.

    The root list when view_parent_id is empty, the parent's children otherwise,
    None when the parent is not in the tree.
    """
    if not view_parent_id:
        return tuple(items)
    parent = find_view_item(items, view_parent_id)
    return parent.items if parent is not None else None
