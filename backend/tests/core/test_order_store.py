"""Order Store — per-filter partial orders, wholesale replace, single moves, resets.

Tests cover:
    - Unknown keys read as empty; keys are normalized
    - set_order collapses duplicates, accepts unknown ids, rejects non-integer shapes
    - move_item places dragged immediately before target in the key's view
    - move_item rejects unknown ids without changing state; filtered-out ids are inert
    - reset clears one key independently; ResetScope.ALL clears every key
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from sortview.core.domain_types import ResetScope
from sortview.core.errors import InvalidInputError
from sortview.core.merge import stable_merge
from sortview.core.order_store import OrderStore
from sortview.core.universe import Universe


def _store(size: int = 5) -> OrderStore:
    return OrderStore(Universe(size))


def _view(store: OrderStore, universe: Universe, key: str) -> list[int]:
    return list(stable_merge(universe.filter_ids(key), store.get_order(key)))


# ─── get_order / set_order ───────────────────────────────────────

def test_unknown_key_reads_as_empty():
    assert _store().get_order("nothing here") == ()


def test_set_order_replaces_wholesale():
    store = _store()
    store.set_order("", [3, 1])
    store.set_order("", [2])
    assert store.get_order("") == (2,)


def test_set_order_collapses_duplicates_first_wins():
    store = _store()
    assert store.set_order("", [3, 1, 3, 2, 1]) == (3, 1, 2)


def test_set_order_accepts_unknown_ids():
    store = _store()
    store.set_order("", [999, 2])
    assert store.get_order("") == (999, 2)


def test_set_order_lowercases_key_but_keeps_whitespace():
    store = _store()
    store.set_order("AB", [1])
    store.set_order(" 2", [2])
    assert store.get_order("ab") == (1,)
    assert store.get_order("2") == ()
    assert store.get_order(" 2") == (2,)


def test_set_order_empty_list_clears_key():
    store = _store()
    store.set_order("", [2, 1])
    store.set_order("", [])
    assert store.get_order("") == ()
    assert store.contexts() == []


@pytest.mark.parametrize("bad", ["123", [1, "2"], [1, True], [1.0], 5, None])
def test_set_order_rejects_non_integer_shapes_without_change(bad):
    store = _store()
    store.set_order("", [4, 5])
    with pytest.raises(InvalidInputError) as exc_info:
        store.set_order("", bad)
    assert exc_info.value.field == "order"
    assert store.get_order("") == (4, 5)


# ─── move_item ───────────────────────────────────────────────────

def test_move_item_later_item_before_earlier_target():
    universe = Universe(5)
    store = OrderStore(universe)
    store.move_item("", 5, 2)
    assert _view(store, universe, "") == [1, 5, 2, 3, 4]


def test_move_item_earlier_item_before_later_target():
    universe = Universe(5)
    store = OrderStore(universe)
    assert store.move_item("", 2, 4) == (1, 3, 2, 4)
    assert _view(store, universe, "") == [1, 3, 2, 4, 5]


def test_consecutive_moves_build_on_previous_view():
    universe = Universe(5)
    store = OrderStore(universe)
    store.move_item("", 5, 2)
    store.move_item("", 1, 4)
    assert _view(store, universe, "") == [5, 2, 3, 1, 4]


def test_move_item_keeps_leftover_stored_ids():
    universe = Universe(5)
    store = OrderStore(universe)
    store.set_order("", [5, 4, 3])
    assert store.move_item("", 4, 5) == (4, 5, 3)
    assert _view(store, universe, "") == [4, 5, 3, 1, 2]


def test_move_item_matches_full_list_semantics():
    universe = Universe(40)
    store = OrderStore(universe)
    store.set_order("", [30, 10, 20])
    full = _view(store, universe, "")
    full.remove(35)
    full.insert(full.index(10), 35)

    store.move_item("", 35, 10)

    assert _view(store, universe, "") == full


def test_move_item_same_id_is_noop():
    store = _store()
    store.set_order("", [3, 2])
    assert store.move_item("", 2, 2) == (3, 2)
    assert store.get_order("") == (3, 2)


def test_move_item_under_filter_only_touches_that_key():
    universe = Universe(30)
    store = OrderStore(universe)
    store.move_item("2", 25, 12)
    assert _view(store, universe, "2") == [
        2, 25, 12, 20, 21, 22, 23, 24, 26, 27, 28, 29,
    ]
    assert store.get_order("") == ()


def test_move_item_dragged_outside_filter_leaves_view_unchanged():
    universe = Universe(30)
    store = OrderStore(universe)
    store.move_item("2", 3, 12)
    assert _view(store, universe, "2") == list(universe.filter_ids("2"))


def test_move_item_target_outside_filter_leaves_view_unchanged():
    universe = Universe(30)
    store = OrderStore(universe)
    store.set_order("2", [22])
    before = _view(store, universe, "2")
    assert store.move_item("2", 12, 3) == (22,)
    assert _view(store, universe, "2") == before


def test_move_item_both_outside_filter_is_recorded_but_inert():
    universe = Universe(30)
    store = OrderStore(universe)
    store.set_order("2", [22, 5])
    assert store.move_item("2", 3, 5) == (22, 3, 5)
    assert store.move_item("2", 7, 9) == (22, 3, 5, 7, 9)
    assert _view(store, universe, "2") == [
        22, 2, 12, 20, 21, 23, 24, 25, 26, 27, 28, 29,
    ]


@pytest.mark.parametrize("dragged,target,field", [
    (0, 2, "draggedId"),
    (6, 2, "draggedId"),
    ("1", 2, "draggedId"),
    (1, 99, "targetId"),
    (1, True, "targetId"),
])
def test_move_item_rejects_unresolvable_ids_without_change(dragged, target, field):
    store = _store()
    store.set_order("", [3])
    with pytest.raises(InvalidInputError) as exc_info:
        store.move_item("", dragged, target)
    assert exc_info.value.field == field
    assert store.get_order("") == (3,)


def test_concurrent_moves_keep_orders_duplicate_free():
    universe = Universe(50)
    store = OrderStore(universe)

    def drag(i: int) -> None:
        key = "" if i % 2 else "1"
        view = _view(store, universe, key)
        store.move_item(key, view[-1], view[0])

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(drag, range(200)))

    for key in ("", "1"):
        order = store.get_order(key)
        assert len(order) == len(set(order))
        assert sorted(_view(store, universe, key)) == list(universe.filter_ids(key))


# ─── reset ───────────────────────────────────────────────────────

def test_reset_single_key_is_independent():
    store = _store()
    store.set_order("", [5])
    store.set_order("2", [2])
    assert store.reset("2") == 1
    assert store.get_order("2") == ()
    assert store.get_order("") == (5,)


def test_reset_unknown_key_is_noop():
    assert _store().reset("nope") == 0


def test_reset_all_clears_every_key():
    store = _store()
    store.set_order("", [5])
    store.set_order("3", [3])
    assert store.reset(ResetScope.ALL) == 2
    assert store.contexts() == []


def test_reset_string_all_is_a_filter_key_not_reset_all():
    store = _store()
    store.set_order("", [5])
    store.reset("all")
    assert store.get_order("") == (5,)


def test_contexts_lists_keys_with_orders():
    store = _store()
    store.set_order("3", [3])
    store.set_order("", [1])
    assert store.contexts() == ["", "3"]
