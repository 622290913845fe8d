"""View State Manager — process-wide universe, order store and selection, injected into routes.

Invariants:
    - Universe generated exactly once per process, on startup
    - All request handlers share one ViewEngine through the get_view_engine dependency
    - Nothing is persisted: a restart returns every view to canonical order

Design Decisions:
    - Singleton view_state initialized on startup: FastAPI lifespan manages lifecycle
      (ADR: no global import side effects; generating 1M items must not happen at import)
    - Routes depend on get_view_engine, never on the module global: tests override it
"""

import logging

from sortview.core.errors import StateNotInitializedError
from sortview.core.order_store import OrderStore
from sortview.core.selection import SelectionSet
from sortview.core.universe import Universe
from sortview.core.view_engine import ViewEngine

logger = logging.getLogger(__name__)


class ViewStateManager:
    """Owns the in-memory state behind every view."""

    def __init__(
        self,
        universe_size: int,
        filter_cache_size: int = 128,
        default_page_limit: int = 20,
        initial_page_limit: int = 20,
    ):
        self.universe = Universe(universe_size, filter_cache_size=filter_cache_size)
        self.store = OrderStore(self.universe)
        self.selection = SelectionSet()
        self.engine = ViewEngine(
            self.universe, self.store, self.selection,
            default_limit=default_page_limit,
            initial_limit=initial_page_limit,
        )
        logger.info(
            f"Generated {len(self.universe)} items",
            extra={"item_count": len(self.universe)},
        )

    def health_check(self) -> bool:
        """Readiness: universe populated and canonical lookup intact."""
        first = self.universe.get(1)
        return first is not None and first.value == 1


# Singleton (initialized on startup)
view_state: ViewStateManager | None = None


def init_view_state(universe_size: int, **kwargs) -> ViewStateManager:
    global view_state
    view_state = ViewStateManager(universe_size, **kwargs)
    return view_state


def get_view_engine() -> ViewEngine:
    """FastAPI dependency for the shared view engine."""
    if not view_state:
        raise StateNotInitializedError()
    return view_state.engine
