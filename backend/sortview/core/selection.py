"""Selection Set — process-wide set of selected item ids.

Invariants:
    - Replaced wholesale on every save; never merged
    - Independent of filter and order: survives filter changes and reorders
    - May hold ids not visible under the active filter (or not in the universe at all)
"""

from typing import Iterable

from sortview.core.domain_types import ItemId
from sortview.core.errors import InvalidInputError
from sortview.core.universe import is_item_id


class SelectionSet:
    """Selected item ids. Membership is preserved regardless of visibility."""

    def __init__(self):
        self._ids: frozenset[ItemId] = frozenset()

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def ids(self) -> list[ItemId]:
        return sorted(self._ids)

    def replace(self, ids: Iterable[int]) -> None:
        if isinstance(ids, (str, bytes)):
            raise InvalidInputError(
                "Selected ids must be a list of item ids", field="selectedIds",
            )
        try:
            candidates = list(ids)
        except TypeError:
            raise InvalidInputError(
                "Selected ids must be a list of item ids", field="selectedIds",
            ) from None
        bad = next((i for i in candidates if not is_item_id(i)), None)
        if bad is not None:
            raise InvalidInputError(
                f"Selected ids contain a non-integer id: {bad!r}",
                field="selectedIds",
            )
        self._ids = frozenset(ItemId(i) for i in candidates)
