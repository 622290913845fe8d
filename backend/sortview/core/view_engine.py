"""View Engine — filtered, custom-ordered, paginated reads over the universe.

Invariants:
    - query() never mutates state (polling/prefetching cannot perturb "last active")
    - Pagination is over the merged filtered sequence, never the raw universe
    - Malformed page/limit degrade to defaults; pages past the end are empty
    - last_active_filter changes only through set_active_filter()

Design Decisions:
    - Universe, OrderStore and SelectionSet injected: no ambient singleton in core
    - initial_state() composes query() with the remembered filter, so a client can
      bootstrap without knowing the server's last active term
"""

from dataclasses import dataclass

from sortview.core.domain_types import DEFAULT_LIMIT, FilterKey, Item, ItemId, NO_FILTER
from sortview.core.filtering import normalize_filter_term
from sortview.core.merge import paginate, parse_paging, stable_merge
from sortview.core.order_store import OrderStore
from sortview.core.selection import SelectionSet
from sortview.core.universe import Universe


@dataclass(frozen=True)
class ViewPage:
    """One page of the merged view."""
    items: list[Item]
    total: int
    has_more: bool
    page: int
    limit: int
    filter_key: FilterKey


@dataclass(frozen=True)
class InitialState:
    """First page under the last active filter plus the current selection."""
    page: ViewPage
    selected_ids: list[ItemId]
    last_active_filter: FilterKey


class ViewEngine:
    """Combines universe, filter, custom order and paging into one consistent view."""

    def __init__(
        self,
        universe: Universe,
        store: OrderStore,
        selection: SelectionSet,
        default_limit: int = DEFAULT_LIMIT,
        initial_limit: int = DEFAULT_LIMIT,
    ):
        self.universe = universe
        self.store = store
        self.selection = selection
        self._default_limit = default_limit
        self._initial_limit = initial_limit
        self._last_active_filter: FilterKey = NO_FILTER

    @property
    def last_active_filter(self) -> FilterKey:
        return self._last_active_filter

    def set_active_filter(self, filter_term: str | None) -> FilterKey:
        self._last_active_filter = normalize_filter_term(filter_term)
        return self._last_active_filter

    def merged_ids(self, filter_term: str | None) -> list[ItemId]:
        """Full merged sequence for a filter term (filtered, then custom-ordered)."""
        key = normalize_filter_term(filter_term)
        return list(stable_merge(self.universe.filter_ids(key), self.store.get_order(key)))

    def query(self, page: object, limit: object, filter_term: str | None) -> ViewPage:
        page_num, page_size = parse_paging(page, limit, self._default_limit)
        key = normalize_filter_term(filter_term)
        merged = stable_merge(self.universe.filter_ids(key), self.store.get_order(key))
        window = paginate(merged, page_num, page_size)
        return ViewPage(
            items=self.universe.items_for(window.ids),
            total=window.total,
            has_more=window.has_more,
            page=page_num,
            limit=page_size,
            filter_key=key,
        )

    def initial_state(self) -> InitialState:
        return InitialState(
            page=self.query(0, self._initial_limit, self._last_active_filter),
            selected_ids=self.selection.ids(),
            last_active_filter=self._last_active_filter,
        )
