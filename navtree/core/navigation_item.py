"""Navigation Item — the view-tree node as a closed sum type.

Invariants:
    - NavigationItem is InternalItem | ExternalItem, nothing else
    - InternalItem has path + relation fields and no external_path
    - ExternalItem has external_path and no path or relation fields
    - items is a tuple: a node exclusively owns its subtree

Design Decisions:
    - Frozen dataclasses: edits go through dataclasses.replace, never in-place
    - Variant-specific fields live only on their variant, so clearing the
      non-applicable field is structural rather than a runtime rule
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar, Mapping

from navtree.core.domain_types import NavigationItemType, RelationRef, ViewId


@dataclass(frozen=True)
class _NavigationItemBase:
    """Fields shared by both variants."""
    id: Any = None
    view_id: ViewId | None = None
    view_parent_id: ViewId | None = None
    title: str | None = None
    order: int | None = None
    updated: bool = False
    removed: bool = False
    audience: tuple[Any, ...] = field(default_factory=tuple)
    ui_router_key: str | None = None
    menu_attached: bool = False
    items: tuple["NavigationItem", ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class InternalItem(_NavigationItemBase):
    """Item pointing at a content entity inside the site."""
    kind: ClassVar[NavigationItemType] = NavigationItemType.INTERNAL

    path: str | None = None
    related: RelationRef | None = None
    related_ref: Mapping[str, Any] | None = None
    related_type: str | None = None


@dataclass(frozen=True)
class ExternalItem(_NavigationItemBase):
    """Item pointing at an absolute external URL."""
    kind: ClassVar[NavigationItemType] = NavigationItemType.EXTERNAL

    external_path: str | None = None


NavigationItem = InternalItem | ExternalItem
