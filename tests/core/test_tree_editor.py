"""View Tree Editing — tests for insert/replace at arbitrary depth.

Tests cover:
    - Root append: fresh view id, order = count + 1
    - Root replace: only the matching root changes
    - Branch append and replace addressed by (view_parent_id, view_id)
    - Deep edits leave unrelated levels structurally unchanged
    - Edited nodes are relation-linked and flagged updated
    - Input tree never mutated; find_view_item and find_sibling_items lookups
"""

from dataclasses import replace

import pytest

from navtree.core.domain_types import RawNumericId
from navtree.core.errors import ContentTypeItemNotFoundError
from navtree.core.navigation_item import ExternalItem, InternalItem
from navtree.core.tree_editor import (
    find_sibling_items,
    find_view_item,
    transform_item_to_view_payload,
)
from navtree.core.tree_invariants import find_tree_violations


@pytest.fixture
def tree():
    """Two roots; the first has two children, the second child has one grandchild."""
    return (
        InternalItem(
            view_id="r1", title="Home", order=1,
            items=(
                InternalItem(view_id="c1", view_parent_id="r1", title="Team", order=1),
                InternalItem(
                    view_id="c2", view_parent_id="r1", title="Careers", order=2,
                    items=(
                        ExternalItem(
                            view_id="g1", view_parent_id="c2", title="Jobs board",
                            order=1, external_path="https://jobs.example.com",
                        ),
                    ),
                ),
            ),
        ),
        InternalItem(view_id="r2", title="About", order=2),
    )


# ─── root level ──────────────────────────────────────────────────

def test_new_root_item_is_appended(tree, relation_config, view_ids):
    target = InternalItem(title="Blog")
    result = transform_item_to_view_payload(target, tree, relation_config, view_ids)
    assert len(result) == 3
    assert result[2].title == "Blog"
    assert result[2].order == 3
    assert result[2].view_id == "view-1"
    assert result[2].updated is True
    assert result[:2] == tree


def test_new_root_item_renormalizes_existing_roots(relation_config, view_ids):
    roots = (
        InternalItem(view_id="a", order=4),
        InternalItem(view_id="b", order=2),
    )
    result = transform_item_to_view_payload(InternalItem(title="n"), roots, relation_config, view_ids)
    assert [item.view_id for item in result] == ["b", "a", "view-1"]
    assert [item.order for item in result] == [1, 2, 3]


def test_root_item_is_replaced_in_place(tree, relation_config, view_ids):
    target = replace(tree[1], title="About us")
    result = transform_item_to_view_payload(target, tree, relation_config, view_ids)
    assert result[1].title == "About us"
    assert result[1].updated is True
    assert result[0] == tree[0]


def test_root_replace_can_change_variant(tree, relation_config, view_ids):
    target = ExternalItem(view_id="r2", title="About", order=2, external_path="https://about.me")
    result = transform_item_to_view_payload(target, tree, relation_config, view_ids)
    assert isinstance(result[1], ExternalItem)
    assert result[1].external_path == "https://about.me"


def test_root_reorder_when_edit_moves_order(tree, relation_config, view_ids):
    target = replace(tree[1], order=0)
    result = transform_item_to_view_payload(target, tree, relation_config, view_ids)
    assert [item.view_id for item in result] == ["r2", "r1"]
    assert [item.order for item in result] == [1, 2]


# ─── nested levels ───────────────────────────────────────────────

def test_new_child_is_appended_to_addressed_branch(tree, relation_config, view_ids):
    target = InternalItem(view_parent_id="r1", title="Press")
    result = transform_item_to_view_payload(target, tree, relation_config, view_ids)
    children = result[0].items
    assert [child.title for child in children] == ["Team", "Careers", "Press"]
    assert children[2].order == 3
    assert children[2].view_id == "view-1"
    assert children[2].view_parent_id == "r1"
    assert result[1] == tree[1]


def test_leaf_edit_replaces_only_that_leaf(tree, relation_config, view_ids):
    target = replace(tree[0].items[0], title="Our team")
    result = transform_item_to_view_payload(target, tree, relation_config, view_ids)
    team, careers = result[0].items
    assert team.title == "Our team"
    assert careers == tree[0].items[1]
    assert result[1] == tree[1]
    assert replace(result[0], items=()) == replace(tree[0], items=())


def test_grandchild_edit_at_depth_three(tree, relation_config, view_ids):
    grandchild = tree[0].items[1].items[0]
    target = replace(grandchild, external_path="https://careers.example.com")
    result = transform_item_to_view_payload(target, tree, relation_config, view_ids)
    edited = result[0].items[1].items[0]
    assert edited.external_path == "https://careers.example.com"
    assert result[0].items[0] == tree[0].items[0]


def test_new_grandchild_is_appended(tree, relation_config, view_ids):
    target = InternalItem(view_parent_id="c1", title="Leadership")
    result = transform_item_to_view_payload(target, tree, relation_config, view_ids)
    team = result[0].items[0]
    assert [child.title for child in team.items] == ["Leadership"]
    assert team.items[0].order == 1


def test_unknown_parent_leaves_tree_unchanged(tree, relation_config, view_ids):
    target = InternalItem(view_parent_id="missing", title="Lost")
    result = transform_item_to_view_payload(target, tree, relation_config, view_ids)
    assert result == tree


def test_edited_item_relation_is_linked(tree, relation_config, view_ids):
    target = replace(tree[0].items[0], related=RawNumericId(2), related_type="pages")
    result = transform_item_to_view_payload(target, tree, relation_config, view_ids)
    assert result[0].items[0].related_ref["title"] == "About"


def test_edited_item_with_unknown_relation_raises(tree, relation_config, view_ids):
    target = replace(tree[1], related=RawNumericId(404), related_type="pages")
    with pytest.raises(ContentTypeItemNotFoundError):
        transform_item_to_view_payload(target, tree, relation_config, view_ids)


def test_edits_keep_tree_invariants(tree, relation_config, view_ids):
    result = transform_item_to_view_payload(
        InternalItem(view_parent_id="c2", title="Internships"), tree, relation_config, view_ids,
    )
    result = transform_item_to_view_payload(InternalItem(title="Blog"), result, relation_config, view_ids)
    assert find_tree_violations(result) == []


def test_input_tree_is_not_mutated(tree, relation_config, view_ids):
    before = tree
    transform_item_to_view_payload(
        InternalItem(view_parent_id="r1", title="Press"), tree, relation_config, view_ids,
    )
    assert tree is before
    assert len(tree[0].items) == 2


# ─── find_view_item ──────────────────────────────────────────────

def test_find_view_item_at_any_depth(tree):
    assert find_view_item(tree, "r2").title == "About"
    assert find_view_item(tree, "g1").title == "Jobs board"


def test_find_view_item_missing_returns_none(tree):
    assert find_view_item(tree, "nope") is None
    assert find_view_item((), "r1") is None


# ─── find_sibling_items ──────────────────────────────────────────

def test_sibling_items_of_root_address_is_root_list(tree):
    assert find_sibling_items(tree, None) == tree


def test_sibling_items_of_nested_parent_are_its_children(tree):
    assert [item.view_id for item in find_sibling_items(tree, "c2")] == ["g1"]


def test_sibling_items_of_missing_parent_is_none(tree):
    assert find_sibling_items(tree, "nope") is None
