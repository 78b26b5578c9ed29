"""Navigation Schemas — Pydantic models for the navigation transform API.

Invariants:
    - NavigationItemSchema accepts both the persisted and the view shape
      (viewId / viewParentId optional, related any raw form)
    - type is validated against the closed INTERNAL / EXTERNAL set
    - RelationConfigSchema.to_domain() yields the read-only core RelationConfig

Design Decisions:
    - alias_generator=to_camel + populate_by_name: camelCase on the wire,
      snake_case in Python, both accepted on input
    - related kept as Any: classification is a core concern (relation_linker),
      validating it twice would split the rules across layers
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from navtree.core.domain_types import ContentType, RelationConfig


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ContentTypeSchema(_CamelModel):
    """Relatable content type descriptor from the registry."""
    content_type_name: str = Field(min_length=1)
    collection_name: str = Field(min_length=1)
    label_singular: str = ""
    name: str | None = None

    def to_domain(self) -> ContentType:
        return ContentType(
            content_type_name=self.content_type_name,
            collection_name=self.collection_name,
            label_singular=self.label_singular,
            name=self.name,
        )


class RelationConfigSchema(_CamelModel):
    """Lookup tables supplied with every request."""
    content_types: list[ContentTypeSchema] = []
    content_type_items: list[dict[str, Any]] = []

    def to_domain(self) -> RelationConfig:
        return RelationConfig(
            content_type_items=tuple(self.content_type_items),
            content_types=tuple(ct.to_domain() for ct in self.content_types),
        )


class NavigationItemSchema(_CamelModel):
    """A navigation item in either persisted or view shape, recursive."""
    id: int | str | None = None
    view_id: str | None = None
    view_parent_id: str | None = None
    title: str | None = None
    type: Literal["INTERNAL", "EXTERNAL"] = "INTERNAL"
    path: str | None = None
    external_path: str | None = None
    ui_router_key: str | None = None
    menu_attached: bool = False
    related: Any = None
    related_ref: dict[str, Any] | None = None
    related_type: str | None = None
    audience: list[Any] = []
    order: int | None = None
    updated: bool = False
    removed: bool = False
    items: list["NavigationItemSchema"] = []

    def to_wire(self) -> dict:
        """camelCase dict consumed by the core item codec."""
        return self.model_dump(by_alias=True)


class NavigationPayloadSchema(_CamelModel):
    """A whole navigation with its root-level items."""
    id: int | str | None = None
    name: str = ""
    visible: bool = True
    items: list[NavigationItemSchema] = []


# ─── Requests ────────────────────────────────────────────────────

class ViewTreePrepareRequest(_CamelModel):
    """Persisted items to turn into an editable view tree."""
    items: list[NavigationItemSchema] = []
    config: RelationConfigSchema = RelationConfigSchema()


class ViewTreeEditRequest(_CamelModel):
    """One edited or new item plus the current view tree."""
    item: NavigationItemSchema
    items: list[NavigationItemSchema] = []
    config: RelationConfigSchema = RelationConfigSchema()


class RestPayloadRequest(_CamelModel):
    """View tree to serialize into the persistence shape."""
    navigation: NavigationPayloadSchema
    config: RelationConfigSchema = RelationConfigSchema()


class RelatedLabelRequest(_CamelModel):
    """Resolved related entity and optional per-collection label fields."""
    item: dict[str, Any]
    fields: dict[str, list[str]] | None = None


# ─── Responses ───────────────────────────────────────────────────

class ViewTreeResponse(BaseModel):
    items: list[dict[str, Any]]


class RestPayloadResponse(BaseModel):
    id: int | str | None = None
    name: str
    visible: bool
    items: list[dict[str, Any]]


class RelatedLabelResponse(BaseModel):
    label: str
