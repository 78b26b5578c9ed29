"""Navigation Routes — stateless view/REST transforms over the navigation tree.

Invariants:
    - Every request carries its own relation config; nothing is cached between calls
    - Core NavigationError subclasses propagate to the global error handler
    - related-label falls back to settings.related_label_fields when fields are omitted

Design Decisions:
    - POST for every transform: inputs are whole trees, too large for query strings
    - Service built per request from the request's config (no shared mutable state)
"""

import logging

from fastapi import APIRouter, Depends

from navtree.config import Settings, get_settings
from navtree.schemas.navigation import (
    RelatedLabelRequest,
    RelatedLabelResponse,
    RestPayloadRequest,
    RestPayloadResponse,
    ViewTreeEditRequest,
    ViewTreePrepareRequest,
    ViewTreeResponse,
)
from navtree.services.navigation_service import NavigationService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/navigation", tags=["navigation"])


@router.post("/view", response_model=ViewTreeResponse)
async def prepare_view_tree(body: ViewTreePrepareRequest):
    """Turn persisted items into an editable view tree."""
    service = NavigationService(body.config.to_domain())
    items = service.prepare_view_tree([item.to_wire() for item in body.items])
    return ViewTreeResponse(items=items)


@router.post("/view/items", response_model=ViewTreeResponse)
async def edit_view_tree(body: ViewTreeEditRequest):
    """Insert a new item or replace an edited one anywhere in the view tree."""
    service = NavigationService(body.config.to_domain())
    items = service.edit_view_tree(
        body.item.to_wire(), [item.to_wire() for item in body.items],
    )
    return ViewTreeResponse(items=items)


@router.post("/rest", response_model=RestPayloadResponse)
async def to_rest_payload(body: RestPayloadRequest):
    """Serialize a view tree into the persistence payload."""
    service = NavigationService(body.config.to_domain())
    navigation = body.navigation
    payload = service.to_rest_payload({
        "id": navigation.id,
        "name": navigation.name,
        "visible": navigation.visible,
        "items": [item.to_wire() for item in navigation.items],
    })
    return RestPayloadResponse(**payload)


@router.post("/related-label", response_model=RelatedLabelResponse)
async def related_label(
    body: RelatedLabelRequest, settings: Settings = Depends(get_settings),
):
    """Human-readable label of a resolved related entity."""
    fields = body.fields if body.fields is not None else settings.related_label_fields
    return RelatedLabelResponse(label=NavigationService.related_label(body.item, fields))
