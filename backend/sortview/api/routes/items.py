"""Item View Routes — paginated reads, initial bootstrap state, active search term.

Invariants:
    - GET /api/items never fails on malformed page/limit (permissive defaults)
    - GET /api/items never changes the remembered active search term
    - Only POST /api/set-active-search-term updates lastActiveSearchTerm

Design Decisions:
    - page/limit declared as raw strings: parsing is core policy (parse_paging),
      FastAPI's int coercion would reject "abc" with a 4xx
"""

import logging

from fastapi import APIRouter, Depends, Query

from sortview.core.view_engine import ViewEngine
from sortview.infrastructure.view_state import get_view_engine
from sortview.schemas.items import (
    InitialStateResponse,
    ItemOut,
    ItemPageResponse,
    MessageResponse,
    SetActiveSearchTermRequest,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["items"])


@router.get("/items", response_model=ItemPageResponse)
async def list_items(
    page: str | None = Query(None),
    limit: str | None = Query(None),
    search: str = Query(""),
    engine: ViewEngine = Depends(get_view_engine),
):
    """One page of the filtered, custom-ordered view."""
    view = engine.query(page, limit, search)
    logger.debug(
        f"Served page {view.page} for search '{view.filter_key}'",
        extra={
            "filter_key": view.filter_key, "page": view.page,
            "limit": view.limit, "item_count": len(view.items),
        },
    )
    return ItemPageResponse(
        items=[ItemOut(id=item.id, value=item.value) for item in view.items],
        total=view.total,
        has_more=view.has_more,
    )


@router.get("/initial-state", response_model=InitialStateResponse)
async def get_initial_state(engine: ViewEngine = Depends(get_view_engine)):
    """First page under the last active search term, plus the saved selection."""
    state = engine.initial_state()
    return InitialStateResponse(
        selected_item_ids=state.selected_ids,
        initial_items=[
            ItemOut(id=item.id, value=item.value) for item in state.page.items
        ],
        last_active_search_term=state.last_active_filter,
        total=state.page.total,
        has_more=state.page.has_more,
    )


@router.post("/set-active-search-term", response_model=MessageResponse)
async def set_active_search_term(
    body: SetActiveSearchTermRequest,
    engine: ViewEngine = Depends(get_view_engine),
):
    key = engine.set_active_filter(body.search_term)
    logger.info(
        f"Last active search term set to: '{key}'", extra={"filter_key": key},
    )
    return MessageResponse(message="Last active search term updated.")
