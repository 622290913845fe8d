"""Order Store — per-filter partial custom orders with wholesale replace and single moves.

Invariants:
    - Every filter key owns an independent, possibly partial, duplicate-free order
    - Unknown keys read as an empty order (never an error)
    - A rejected mutation (InvalidInputError) leaves state unchanged
    - Only malformed or out-of-universe ids are rejected; ids hidden by the filter are inert
    - Stored orders are immutable tuples: readers never observe a half-applied write
    - Resetting one key never touches another; ResetScope.ALL is the only combined reset

Design Decisions:
    - One threading.Lock per filter key: read-modify-write on a key is a critical section,
      writes on different keys never wait on each other
    - move_item stores the view prefix up to the later of the two positions plus the
      leftover stored ids: same merged result as storing the full list, without
      materializing all N ids on every drag
"""

import threading
from typing import Sequence

from sortview.core.domain_types import FilterKey, ItemId, ResetScope
from sortview.core.errors import ErrorContext, InvalidInputError
from sortview.core.filtering import normalize_filter_term
from sortview.core.merge import contains_sorted, iter_stable_merge
from sortview.core.universe import Universe, is_item_id


class OrderStore:
    """Custom ordering state keyed by filter context."""

    def __init__(self, universe: Universe):
        self._universe = universe
        self._orders: dict[FilterKey, tuple[ItemId, ...]] = {}
        self._locks: dict[FilterKey, threading.Lock] = {}
        self._registry_lock = threading.Lock()

    def _get_lock(self, key: FilterKey) -> threading.Lock:
        with self._registry_lock:
            lock = self._locks.get(key)
            if lock is None:
                lock = self._locks[key] = threading.Lock()
            return lock

    # -- reads --

    def get_order(self, filter_key: str) -> tuple[ItemId, ...]:
        return self._orders.get(normalize_filter_term(filter_key), ())

    def contexts(self) -> list[FilterKey]:
        """Filter keys currently holding a custom order."""
        return sorted(self._orders)

    # -- writes --

    def set_order(self, filter_key: str, ids: Sequence[int]) -> tuple[ItemId, ...]:
        """Replace the stored order for a key. Duplicates collapse to first occurrence."""
        key = normalize_filter_term(filter_key)
        if isinstance(ids, (str, bytes)) or not isinstance(ids, Sequence):
            raise InvalidInputError(
                "Order must be a list of item ids",
                field="order", context=ErrorContext(filter_key=key),
            )
        bad = next((i for i in ids if not is_item_id(i)), None)
        if bad is not None:
            raise InvalidInputError(
                f"Order contains a non-integer id: {bad!r}",
                field="order", context=ErrorContext(filter_key=key),
            )
        order = tuple(dict.fromkeys(ItemId(i) for i in ids))
        with self._get_lock(key):
            if order:
                self._orders[key] = order
            else:
                self._orders.pop(key, None)
        return order

    def move_item(
        self, filter_key: str, dragged_id: int, target_id: int,
    ) -> tuple[ItemId, ...]:
        """Move dragged_id to immediately before target_id in this key's view."""
        key = normalize_filter_term(filter_key)
        for name, item_id in (("draggedId", dragged_id), ("targetId", target_id)):
            if item_id not in self._universe:
                raise InvalidInputError(
                    f"{name} {item_id!r} is not a known item id",
                    field=name,
                    context=ErrorContext(
                        filter_key=key,
                        item_id=item_id if is_item_id(item_id) else None,
                    ),
                )
        dragged, target = ItemId(dragged_id), ItemId(target_id)

        with self._get_lock(key):
            current = self._orders.get(key, ())
            if dragged == target:
                return current
            filtered = self._universe.filter_ids(key)
            dragged_visible = contains_sorted(filtered, dragged)
            if not contains_sorted(filtered, target):
                return self._anchor_hidden_target(key, current, dragged, target, dragged_visible)

            prefix: list[ItemId] = []
            dragged_at: int | None = None
            target_found = False
            for pos, item_id in enumerate(iter_stable_merge(filtered, current)):
                prefix.append(item_id)
                if item_id == dragged:
                    dragged_at = pos
                elif item_id == target:
                    target_found = True
                if target_found and (dragged_at is not None or not dragged_visible):
                    break

            if dragged_at is not None:
                del prefix[dragged_at]
            prefix.insert(prefix.index(target), dragged)

            placed = set(prefix)
            order = tuple(prefix) + tuple(i for i in current if i not in placed)
            self._orders[key] = order
            return order

    def _anchor_hidden_target(
        self,
        key: FilterKey,
        current: tuple[ItemId, ...],
        dragged: ItemId,
        target: ItemId,
        dragged_visible: bool,
    ) -> tuple[ItemId, ...]:
        """Target filtered out of this view: record the move without changing the view.

        Caller holds the key lock. A visible dragged id cannot be placed next to an
        invisible anchor without surfacing it in the listed prefix, so that case
        leaves the stored order as is.
        """
        if dragged_visible:
            return current
        order = tuple(i for i in current if i != dragged)
        if target in order:
            at = order.index(target)
            order = order[:at] + (dragged,) + order[at:]
        else:
            order = order + (dragged, target)
        self._orders[key] = order
        return order

    def reset(self, scope: str | ResetScope) -> int:
        """Clear one key's order, or every key's with ResetScope.ALL. Returns contexts cleared."""
        if scope is ResetScope.ALL:
            with self._registry_lock:
                locks = list(self._locks.values())
            for lock in locks:
                lock.acquire()
            try:
                cleared = len(self._orders)
                self._orders.clear()
            finally:
                for lock in locks:
                    lock.release()
            return cleared

        key = normalize_filter_term(scope)
        with self._get_lock(key):
            return 1 if self._orders.pop(key, None) is not None else 0
