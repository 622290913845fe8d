"""Ordering Routes — custom order replacement, single drag-and-drop moves, resets.

Invariants:
    - Orders are keyed by normalized search term; "" is the unfiltered view
    - A rejected write (400) leaves every stored order unchanged
    - Reset without a body clears only the unfiltered view's order

Design Decisions:
    - /save-order accepts both the full-list and the draggedId/targetId shape
      (older clients resend the list, newer ones send one move per drop)
    - /move-item is the explicit single-move endpoint
"""

import logging

from fastapi import APIRouter, Depends

from sortview.core.domain_types import ResetScope
from sortview.core.filtering import normalize_filter_term
from sortview.core.view_engine import ViewEngine
from sortview.infrastructure.view_state import get_view_engine
from sortview.schemas.items import (
    MessageResponse,
    MoveItemRequest,
    ResetOrderRequest,
    SaveOrderRequest,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["ordering"])


def _move(engine: ViewEngine, search_term: str, dragged_id: int, target_id: int) -> None:
    key = normalize_filter_term(search_term)
    order = engine.store.move_item(key, dragged_id, target_id)
    logger.info(
        f"Moved item {dragged_id} before {target_id} for search term '{key}'",
        extra={
            "filter_key": key, "dragged_id": dragged_id,
            "target_id": target_id, "item_count": len(order),
        },
    )


@router.post("/save-order", response_model=MessageResponse)
async def save_order(
    body: SaveOrderRequest, engine: ViewEngine = Depends(get_view_engine),
):
    """Replace a search term's order, or apply a single move."""
    if body.is_move:
        _move(engine, body.search_term, body.dragged_id, body.target_id)
        return MessageResponse(message="Item order saved successfully.")

    key = normalize_filter_term(body.search_term)
    order = engine.store.set_order(key, body.order)
    logger.info(
        f"Item order saved for search term '{key}': {list(order[:50])} ...",
        extra={"filter_key": key, "item_count": len(order)},
    )
    return MessageResponse(message="Item order saved successfully.")


@router.post("/move-item", response_model=MessageResponse)
async def move_item(
    body: MoveItemRequest, engine: ViewEngine = Depends(get_view_engine),
):
    """Move draggedId to immediately before targetId."""
    _move(engine, body.search_term, body.dragged_id, body.target_id)
    return MessageResponse(message="Item moved successfully.")


@router.post("/reset-sort-order", response_model=MessageResponse)
async def reset_sort_order(
    body: ResetOrderRequest | None = None,
    engine: ViewEngine = Depends(get_view_engine),
):
    """Reset the unfiltered order (default), one search term's order, or all orders."""
    body = body or ResetOrderRequest()
    if body.reset_all:
        cleared = engine.store.reset(ResetScope.ALL)
        logger.info(f"All sort orders reset ({cleared} contexts).")
        return MessageResponse(message="All sort orders reset successfully.")

    key = normalize_filter_term(body.search_term)
    engine.store.reset(key)
    logger.info(f"Sort order reset for search term '{key}'.", extra={"filter_key": key})
    if key:
        return MessageResponse(message="Sort order reset successfully.")
    return MessageResponse(message="Global sort order reset successfully.")
