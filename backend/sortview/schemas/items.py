"""Item View Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - Ids are StrictInt: "3", 3.0 and true are rejected, never coerced
    - searchTerm is StrictStr: a number is not a search term
    - Flags are StrictBool: "yes" and 1 are not booleans
    - SaveOrderRequest is exactly one shape: full order, or draggedId + targetId
    - Field names on the wire are camelCase (client contract); Python side is snake_case

Design Decisions:
    - Aliases + populate_by_name: tests and internal callers may use either name
    - model_validator for cross-field shape checks (mirrors UserInput-style validation)
"""

from pydantic import (
    BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, model_validator,
)


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# --- Requests -----------------------------------------------------------------

class SetActiveSearchTermRequest(_WireModel):
    """Remember the client's current search term for the next initial-state."""
    search_term: StrictStr = Field(alias="searchTerm", max_length=100)


class SaveSelectionRequest(_WireModel):
    """Wholesale replacement of the selection set."""
    selected_ids: list[StrictInt] = Field(alias="selectedIds")


class MoveItemRequest(_WireModel):
    """Single drag-and-drop: move draggedId to just before targetId."""
    dragged_id: StrictInt = Field(alias="draggedId")
    target_id: StrictInt = Field(alias="targetId")
    search_term: StrictStr = Field("", alias="searchTerm", max_length=100)


class SaveOrderRequest(_WireModel):
    """Either a full order for a search term, or a single move."""
    order: list[StrictInt] | None = None
    search_term: StrictStr = Field("", alias="searchTerm", max_length=100)
    dragged_id: StrictInt | None = Field(None, alias="draggedId")
    target_id: StrictInt | None = Field(None, alias="targetId")

    @model_validator(mode="after")
    def validate_shape(self):
        is_move = self.dragged_id is not None or self.target_id is not None
        if self.order is not None and is_move:
            raise ValueError("send either order or draggedId/targetId, not both")
        if self.order is None and not is_move:
            raise ValueError("order or draggedId/targetId is required")
        if is_move and (self.dragged_id is None or self.target_id is None):
            raise ValueError("a move requires both draggedId and targetId")
        return self

    @property
    def is_move(self) -> bool:
        return self.order is None


class ResetOrderRequest(_WireModel):
    """Reset one search term's order (default: the unfiltered view) or all of them."""
    search_term: StrictStr = Field("", alias="searchTerm", max_length=100)
    reset_all: StrictBool = Field(False, alias="all")


# --- Responses ----------------------------------------------------------------

class ItemOut(BaseModel):
    id: int
    value: int


class ItemPageResponse(_WireModel):
    items: list[ItemOut]
    total: int
    has_more: bool = Field(alias="hasMore")


class InitialStateResponse(_WireModel):
    selected_item_ids: list[int] = Field(alias="selectedItemIds")
    initial_items: list[ItemOut] = Field(alias="initialItems")
    last_active_search_term: str = Field(alias="lastActiveSearchTerm")
    total: int
    has_more: bool = Field(alias="hasMore")


class SelectionResponse(_WireModel):
    selected_item_ids: list[int] = Field(alias="selectedItemIds")


class MessageResponse(BaseModel):
    message: str
