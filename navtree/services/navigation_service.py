"""Navigation Service — orchestrates the pure tree transforms for the API.

Invariants:
    - Every method is codec in -> core transform -> codec out; no state between calls
    - An edit whose viewParentId is missing, or whose viewId is not a direct child
      of it (a root when viewParentId is empty), raises ViewItemNotFoundError
    - NavigationError context is stamped with the navigation_id / view_id in play
    - Structural violations after an edit are logged, never silently dropped
    - NavigationError from core propagates unchanged to the API error handler

Design Decisions:
    - Service holds only per-request collaborators (config, id_factory), built per call
    - Logging lives here, not in core (ADR: impureim sandwich)
"""

import logging
from typing import Any, Mapping, Sequence

from navtree.core.boundary_protocols import ViewIdFactory
from navtree.core.domain_types import RelationConfig, ViewId
from navtree.core.identifiers import new_view_id
from navtree.core.item_codec import item_from_dict, items_from_dicts, items_to_dicts
from navtree.core.errors import NavigationError, ViewItemNotFoundError
from navtree.core.related_label import extract_related_item_label
from navtree.core.rest_payload import transform_to_rest_payload
from navtree.core.tree_editor import find_sibling_items, transform_item_to_view_payload
from navtree.core.tree_invariants import find_tree_violations
from navtree.core.tree_preparer import prepare_items_to_view_payload

logger = logging.getLogger(__name__)


class NavigationService:
    """View tree preparation, editing and REST serialization."""

    def __init__(
        self,
        config: RelationConfig | None = None,
        id_factory: ViewIdFactory = new_view_id,
    ):
        self.config = config or RelationConfig()
        self.id_factory = id_factory

    def prepare_view_tree(self, raw_items: Sequence[Mapping[str, Any]]) -> list[dict]:
        """Persisted items -> editable view tree."""
        tree = prepare_items_to_view_payload(
            raw_items, None, self.config, self.id_factory,
        )
        logger.info(
            "Prepared view tree", extra={"item_count": len(tree)},
        )
        return items_to_dicts(tree)

    def edit_view_tree(
        self, target: Mapping[str, Any], items: Sequence[Mapping[str, Any]],
    ) -> list[dict]:
        """Insert or replace one item in the view tree."""
        item = item_from_dict(target)
        tree = items_from_dicts(items)
        self._check_address(item.view_parent_id, item.view_id, tree)

        try:
            edited = transform_item_to_view_payload(
                item, tree, self.config, self.id_factory,
            )
        except NavigationError as exc:
            exc.context.view_id = exc.context.view_id or item.view_id
            raise
        for violation in find_tree_violations(edited):
            logger.warning(
                violation["message"],
                extra={
                    "error_code": violation["error_code"],
                    "view_id": violation["view_id"],
                },
            )
        logger.info(
            "Applied view tree edit",
            extra={"view_id": item.view_id, "item_count": len(edited)},
        )
        return items_to_dicts(edited)

    def to_rest_payload(self, navigation: Mapping[str, Any]) -> dict:
        """View-shaped navigation -> persistence payload."""
        try:
            tree = items_from_dicts(navigation.get("items") or ())
            payload = transform_to_rest_payload(
                {**navigation, "items": tree}, self.config,
            )
        except NavigationError as exc:
            exc.context.navigation_id = navigation.get("id")
            raise
        logger.info(
            "Serialized navigation to REST payload",
            extra={"navigation_id": payload["id"], "item_count": len(tree)},
        )
        return payload

    @staticmethod
    def related_label(
        item: Mapping[str, Any], fields: Mapping[str, Sequence[str]],
    ) -> str:
        return extract_related_item_label(item, fields)

    @staticmethod
    def _check_address(
        view_parent_id: ViewId | None, view_id: ViewId | None, tree: Sequence,
    ) -> None:
        """Parent must exist; an existing view_id must sit directly under it."""
        siblings = find_sibling_items(tree, view_parent_id)
        if siblings is None:
            raise ViewItemNotFoundError(view_parent_id)
        if view_id and all(sibling.view_id != view_id for sibling in siblings):
            raise ViewItemNotFoundError(view_id)
