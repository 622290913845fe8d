"""Stable Merge & Pagination — pure functions combining filter, custom order and paging.

Invariants:
    - Merge totality: output is a permutation of `filtered` (no loss, no duplication)
    - Order respect: ids listed in `order` keep their listed relative order
    - Stability: unlisted ids keep ascending canonical order and follow all listed ids
    - Ids in `order` that are not in `filtered` (stale / out-of-filter) are skipped
    - Pages past the end are empty, never an error

Design Decisions:
    - Membership via bisect on the ascending `filtered` tuple: no per-query set over N ids
    - Generator form (iter_stable_merge) lets move_item stop at the first positions it needs
    - parse_paging is permissive: a user-facing paginator never hard-fails on a query string
"""

from bisect import bisect_left
from dataclasses import dataclass
from typing import Iterator, Sequence

from sortview.core.domain_types import DEFAULT_LIMIT, DEFAULT_PAGE, ItemId


@dataclass(frozen=True)
class PageWindow:
    """One page slice of a merged sequence."""
    ids: list[ItemId]
    total: int
    has_more: bool


def contains_sorted(sorted_ids: Sequence[ItemId], item_id: ItemId) -> bool:
    """Membership test on an ascending sequence."""
    i = bisect_left(sorted_ids, item_id)
    return i < len(sorted_ids) and sorted_ids[i] == item_id


def iter_stable_merge(
    filtered: Sequence[ItemId], order: Sequence[ItemId],
) -> Iterator[ItemId]:
    """Yield listed ids visible in `filtered`, then the rest of `filtered` ascending.

    `filtered` must be ascending by id.
    """
    emitted: set[ItemId] = set()
    for item_id in order:
        if item_id in emitted or not contains_sorted(filtered, item_id):
            continue
        emitted.add(item_id)
        yield item_id
    for item_id in filtered:
        if item_id not in emitted:
            yield item_id


def stable_merge(
    filtered: Sequence[ItemId], order: Sequence[ItemId],
) -> Sequence[ItemId]:
    """Materialize the merged sequence. Empty order returns `filtered` as-is."""
    if not order:
        return filtered
    return list(iter_stable_merge(filtered, order))


def _parse_int(raw: object) -> int | None:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        try:
            return int(raw.strip())
        except ValueError:
            return None
    return None


def parse_paging(
    page: object, limit: object, default_limit: int = DEFAULT_LIMIT,
) -> tuple[int, int]:
    """Normalize raw page/limit: bad or negative page → 0, bad or non-positive limit → default."""
    parsed_page = _parse_int(page)
    parsed_limit = _parse_int(limit)
    if parsed_page is None or parsed_page < 0:
        parsed_page = DEFAULT_PAGE
    if parsed_limit is None or parsed_limit <= 0:
        parsed_limit = default_limit
    return parsed_page, parsed_limit


def paginate(merged: Sequence[ItemId], page: int, limit: int) -> PageWindow:
    """Slice [page*limit, page*limit+limit) out of the merged sequence."""
    start = page * limit
    end = start + limit
    total = len(merged)
    return PageWindow(
        ids=list(merged[start:end]),
        total=total,
        has_more=end < total,
    )
