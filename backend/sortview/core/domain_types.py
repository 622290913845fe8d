"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ItemId is a positive int; an item's id always equals its value
    - FilterKey is a normalized (stripped, lowercased) search term; "" means no filter
    - Item is immutable once the universe is generated

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - ResetScope as a plain Enum (not str): "all" must never collide with a real filter key
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ItemId = NewType("ItemId", int)
FilterKey = NewType("FilterKey", str)

NO_FILTER = FilterKey("")


# ─── Paging Defaults ─────────────────────────────────────────────

DEFAULT_PAGE = 0
DEFAULT_LIMIT = 20


# ─── Value Types ─────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class Item:
    """One record of the universe — id and value are equal by construction."""
    id: ItemId
    value: int


# ─── Enums ───────────────────────────────────────────────────────

class ResetScope(Enum):
    """Reset target that is not a single filter key."""
    ALL = "all"
