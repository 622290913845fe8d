"""Selection Routes — wholesale replace and read-back of the selection set."""

import logging

from fastapi import APIRouter, Depends

from sortview.core.view_engine import ViewEngine
from sortview.infrastructure.view_state import get_view_engine
from sortview.schemas.items import (
    MessageResponse,
    SaveSelectionRequest,
    SelectionResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["selection"])


@router.post("/save-selection", response_model=MessageResponse)
async def save_selection(
    body: SaveSelectionRequest, engine: ViewEngine = Depends(get_view_engine),
):
    engine.selection.replace(body.selected_ids)
    logger.info(
        f"Selected items saved: {len(engine.selection)}",
        extra={"item_count": len(engine.selection)},
    )
    return MessageResponse(message="Selected items saved successfully.")


@router.get("/selection", response_model=SelectionResponse)
async def get_selection(engine: ViewEngine = Depends(get_view_engine)):
    return SelectionResponse(selected_item_ids=engine.selection.ids())
