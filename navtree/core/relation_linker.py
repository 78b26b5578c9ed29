"""Relation Linker — resolves or clears an item's relation to a content entity.

Invariants:
    - External items and Internal items without a relation end with
      related, related_ref and related_type all cleared
    - An unchanged relation (related_ref id == relation id) returns the item as-is
    - A resolved entity is linked via its content type name (case-insensitive)
    - A bare identifier is linked via related_type (case-insensitive on collectionName)
    - A lookup miss raises a configuration error; nothing is half-resolved

Design Decisions:
    - classify_relation is the single place raw wire values become RelationRef
      (ADR: tagged union over ad hoc isinstance checks spread across callers)
    - Raising over returning the item unchanged: a silent pass-through hides
      registry mismatches until the REST payload is written
"""

from dataclasses import replace
from typing import Any, Mapping

from navtree.core.domain_types import (
    RawGeneratedId,
    RawNumericId,
    RelationConfig,
    RelationRef,
    ResolvedEntity,
    relation_identifier,
)
from navtree.core.errors import (
    ContentTypeItemNotFoundError,
    ContentTypeNotFoundError,
    UnresolvableRelationError,
)
from navtree.core.identifiers import is_generated_id, parse_identifier
from navtree.core.navigation_item import InternalItem, NavigationItem


def classify_relation(raw: Any) -> RelationRef | None:
    """Turn a raw `related` wire value into a RelationRef. None means no relation.

    Lists contribute their first element (the API returns relations as
    arrays, the edit form sends a single value).
    """
    if isinstance(raw, (list, tuple)):
        if not raw:
            return None
        raw = raw[0]
    if raw is None or raw == "":
        return None
    if isinstance(raw, (RawNumericId, RawGeneratedId, ResolvedEntity)):
        return raw
    if isinstance(raw, Mapping):
        if not raw:
            return None
        if raw.get("__contentType"):
            return ResolvedEntity(dict(raw))
        if raw.get("id") is not None:
            return classify_relation(raw["id"])
        raise UnresolvableRelationError(raw)
    if isinstance(raw, bool):
        raise UnresolvableRelationError(raw)
    if isinstance(raw, int):
        return RawNumericId(raw)
    if isinstance(raw, str):
        if is_generated_id(raw):
            return RawGeneratedId(raw)
        parsed = parse_identifier(raw)
        if parsed is None:
            raise UnresolvableRelationError(raw)
        return RawNumericId(parsed)
    raise UnresolvableRelationError(raw)


def _clear_relation(item: InternalItem) -> InternalItem:
    return replace(item, related=None, related_ref=None, related_type=None)


def _link_resolved_entity(
    item: InternalItem, entity: ResolvedEntity, config: RelationConfig,
) -> InternalItem:
    """Entity already carries its content type: denormalize the registry labels."""
    content_type = config.find_content_type_by_name(entity.content_type)
    if content_type is None:
        raise ContentTypeNotFoundError("contentTypeName", entity.content_type)
    return replace(
        item,
        related=classify_relation(entity.identifier) or entity,
        related_ref={
            "__collectionName": content_type.collection_name,
            "labelSingular": content_type.label_singular,
            **entity.record,
        },
        related_type=content_type.collection_name,
    )


def _link_bare_identifier(
    item: InternalItem, identifier: Any, config: RelationConfig,
) -> InternalItem:
    """Bare id: find the entity record and its content type by related_type."""
    content_type = config.find_content_type_by_collection(item.related_type)
    if content_type is None:
        raise ContentTypeNotFoundError("collectionName", item.related_type)
    content_type_item = config.find_content_type_item(
        identifier, content_type.collection_name,
    )
    if content_type_item is None:
        raise ContentTypeItemNotFoundError(identifier)
    return replace(
        item,
        related_ref={
            "__collectionName": item.related_type,
            "__contentType": content_type.content_type_name,
            "labelSingular": content_type.label_singular,
            **content_type_item,
        },
    )


def link_relations(item: NavigationItem, config: RelationConfig) -> NavigationItem:
    """Resolve or clear the relation of a single item. Pure, non-recursive."""
    if not isinstance(item, InternalItem):
        return item
    relation = classify_relation(item.related)
    if relation is None:
        return _clear_relation(item)

    identifier = relation_identifier(relation)
    if item.related_ref is not None and item.related_ref.get("id") == identifier:
        return item

    if isinstance(relation, ResolvedEntity):
        return _link_resolved_entity(item, relation, config)
    return _link_bare_identifier(replace(item, related=relation), identifier, config)
