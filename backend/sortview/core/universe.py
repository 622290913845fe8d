"""Universe — the fixed, immutable item collection every view is built from.

Invariants:
    - Exactly `size` items, item i has id == value == i (1-indexed)
    - Never mutated after construction; safe to share across requests
    - get() is O(1); iteration is by ascending id
    - filter_ids() returns ascending ids and is cached per filter key (bounded LRU)

Design Decisions:
    - Tuple of frozen Items: O(1) positional lookup, no dict overhead for 1M entries
    - Per-instance lru_cache over the scan: universe is immutable so cached results never go stale
"""

from functools import lru_cache
from typing import Iterable, Iterator

from sortview.core.domain_types import FilterKey, Item, ItemId
from sortview.core.errors import InvalidInputError
from sortview.core.filtering import matches_filter


def is_item_id(value: object) -> bool:
    """True for real ints (bool excluded) — shape check only, not membership."""
    return isinstance(value, int) and not isinstance(value, bool)


class Universe:
    """Read-only collection of `size` items with O(1) id lookup."""

    def __init__(self, size: int, filter_cache_size: int = 128):
        if not is_item_id(size) or size < 1:
            raise InvalidInputError(
                f"Universe size must be a positive integer, got {size!r}",
                field="universe_size",
            )
        self._items: tuple[Item, ...] = tuple(
            Item(id=ItemId(i), value=i) for i in range(1, size + 1)
        )
        self._filter_ids = lru_cache(maxsize=filter_cache_size)(self._scan)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def __contains__(self, item_id: object) -> bool:
        return is_item_id(item_id) and 1 <= item_id <= len(self._items)

    def get(self, item_id: int) -> Item | None:
        if item_id in self:
            return self._items[item_id - 1]
        return None

    def items_for(self, ids: Iterable[ItemId]) -> list[Item]:
        """Materialize items for ids, in the given order. Unknown ids are skipped."""
        return [item for item in (self.get(i) for i in ids) if item is not None]

    def filter_ids(self, key: FilterKey) -> tuple[ItemId, ...]:
        """Ascending ids of all items whose value contains key."""
        return self._filter_ids(key)

    def _scan(self, key: FilterKey) -> tuple[ItemId, ...]:
        return tuple(
            item.id for item in self._items if matches_filter(item.value, key)
        )
