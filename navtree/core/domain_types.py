"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - NavigationItemType is closed: INTERNAL or EXTERNAL, nothing else
    - RelationRef is a closed tagged union: numeric id, generated id, or resolved entity
    - ContentType and RelationConfig are read-only, supplied per call

Design Decisions:
    - NewType for ViewId: zero runtime cost, full type-checker support
    - str Enum for item type: serializes to the wire value without custom encoders
    - Lookup helpers on RelationConfig return None; callers decide whether a miss is an error
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, NewType


# ─── Identity Types ──────────────────────────────────────────────

ViewId = NewType("ViewId", str)


# ─── Enums ───────────────────────────────────────────────────────

class NavigationItemType(str, Enum):
    """Navigation item variants — maps to the `type` wire field."""
    INTERNAL = "INTERNAL"
    EXTERNAL = "EXTERNAL"


# ─── Relation Reference (tagged union) ───────────────────────────

@dataclass(frozen=True)
class RawNumericId:
    """Legacy numeric reference to a content entity."""
    value: int


@dataclass(frozen=True)
class RawGeneratedId:
    """Generated-identifier (UUID string) reference to a content entity."""
    value: str


@dataclass(frozen=True)
class ResolvedEntity:
    """Entity object carrying its own `__contentType` tag."""
    record: Mapping[str, Any]

    @property
    def content_type(self) -> str:
        return self.record["__contentType"]

    @property
    def identifier(self) -> Any:
        return self.record.get("id")


RelationRef = RawNumericId | RawGeneratedId | ResolvedEntity


def relation_identifier(ref: RelationRef) -> Any:
    """Identifier carried by any relation variant."""
    if isinstance(ref, ResolvedEntity):
        return ref.identifier
    return ref.value


# ─── Content Type Registry ───────────────────────────────────────

@dataclass(frozen=True)
class ContentType:
    """External schema descriptor for a relatable content type."""
    content_type_name: str
    collection_name: str
    label_singular: str = ""
    name: str | None = None

    @property
    def ref_name(self) -> str:
        """Model name used as the polymorphic `ref` in REST payloads."""
        return self.name or self.content_type_name


@dataclass(frozen=True)
class RelationConfig:
    """Read-only lookup tables used to resolve relations."""
    content_type_items: tuple[Mapping[str, Any], ...] = field(default_factory=tuple)
    content_types: tuple[ContentType, ...] = field(default_factory=tuple)

    def find_content_type_item(
        self, identifier: Any, collection_name: str | None = None,
    ) -> Mapping[str, Any] | None:
        """Match on id, and on __collectionName (case-insensitive) when given.

        Ids repeat across collections, so callers that know the collection pass it.
        """
        wanted = collection_name.lower() if collection_name else None
        for item in self.content_type_items:
            if item.get("id") != identifier:
                continue
            if wanted is None or str(item.get("__collectionName", "")).lower() == wanted:
                return item
        return None

    def find_content_type_by_name(self, name: str | None) -> ContentType | None:
        """Case-insensitive match on contentTypeName."""
        if not name:
            return None
        wanted = name.lower()
        for content_type in self.content_types:
            if content_type.content_type_name.lower() == wanted:
                return content_type
        return None

    def find_content_type_by_collection(
        self, collection_name: str | None,
    ) -> ContentType | None:
        """Case-insensitive match on collectionName."""
        if not collection_name:
            return None
        wanted = collection_name.lower()
        for content_type in self.content_types:
            if content_type.collection_name.lower() == wanted:
                return content_type
        return None
