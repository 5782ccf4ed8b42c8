"""Tests for the selection search (core/search.py).

Every test is a pure function call.  These tests exercise:

* Selected-wins-ties: a matching selected element is never moved
* Left-to-right scan of ``before`` then ``after`` otherwise
* Reconstruction of ``before`` / ``after`` around the new selection
* No-op when nothing matches
* Predicate call discipline
"""

from __future__ import annotations

import pytest

from selectlist.core.operations import from_lists, singleton, to_list
from selectlist.core.search import select


# ---------------------------------------------------------------------------
# Reference cases
# ---------------------------------------------------------------------------

class TestSelectReferenceCases:
    def test_first_match_in_before(self) -> None:
        z = from_lists([1, 2, 3], 4, [5, 2, 1])
        assert select(lambda x: x > 1, z) == from_lists([1], 2, [3, 4, 5, 2, 1])

    def test_match_deep_in_after(self) -> None:
        z = from_lists([1, 2, 3], 4, [5, 2, 5, 6, 1, 6, 7])
        assert select(lambda x: x > 6, z) == from_lists(
            [1, 2, 3, 4, 5, 2, 5, 6, 1, 6], 7, [],
        )

    def test_match_in_before_next_to_selection(self) -> None:
        z = from_lists([1, 2, 3], 4, [5, 2, 1])
        assert select(lambda x: x > 2, z) == from_lists([1, 2], 3, [4, 5, 2, 1])


# ---------------------------------------------------------------------------
# No-op cases
# ---------------------------------------------------------------------------

class TestSelectNoOp:
    def test_selected_wins_ties_over_before(self) -> None:
        z = from_lists([5, 6], 7, [8])
        assert select(lambda x: x > 4, z) == z

    def test_selected_wins_ties_over_after(self) -> None:
        z = from_lists([1], 7, [8, 9])
        assert select(lambda x: x > 4, z) == z

    def test_no_match_returns_unchanged(self) -> None:
        z = from_lists([1, 2, 3], 4, [5, 2, 1])
        assert select(lambda x: x > 100, z) == z

    def test_singleton_without_match(self) -> None:
        assert select(lambda x: x == 2, singleton(1)) == singleton(1)

    def test_singleton_with_match(self) -> None:
        assert select(lambda x: x == 1, singleton(1)) == singleton(1)


# ---------------------------------------------------------------------------
# Relocation
# ---------------------------------------------------------------------------

class TestSelectRelocation:
    def test_first_element_of_before(self) -> None:
        z = from_lists(["a", "b"], "c", ["d"])
        assert select(lambda s: s == "a", z) == from_lists([], "a", ["b", "c", "d"])

    def test_first_element_of_after(self) -> None:
        z = from_lists(["a"], "b", ["c", "d"])
        assert select(lambda s: s == "c", z) == from_lists(["a", "b"], "c", ["d"])

    def test_before_preferred_over_after(self) -> None:
        z = from_lists([1, 9], 0, [9])
        assert select(lambda x: x == 9, z) == from_lists([1], 9, [0, 9])

    def test_duplicate_of_pivot_not_selected_when_pivot_fails(self) -> None:
        z = from_lists([], 3, [3, 4])
        # Pivot 3 fails `x > 3`; the only match is 4.
        assert select(lambda x: x > 3, z) == from_lists([3, 3], 4, [])

    @pytest.mark.parametrize("target", list(range(7)))
    def test_flattened_order_preserved(self, target: int) -> None:
        z = from_lists([0, 1, 2], 3, [4, 5, 6])
        result = select(lambda x: x == target, z)
        assert to_list(result) == list(range(7))
        assert result.selected == target
        assert len(result.before) == target

    def test_does_not_modify_original(self) -> None:
        z = from_lists([1, 2], 3, [4])
        select(lambda x: x == 1, z)
        assert z == from_lists([1, 2], 3, [4])


# ---------------------------------------------------------------------------
# Predicate calls
# ---------------------------------------------------------------------------

class TestSelectPredicateCalls:
    def test_selected_tested_first(self) -> None:
        seen: list[int] = []

        def record(x: int) -> bool:
            seen.append(x)
            return x == 3

        select(record, from_lists([1, 2], 3, [4]))
        assert seen == [3]

    def test_each_element_tested_once_without_match(self) -> None:
        seen: list[int] = []

        def record(x: int) -> bool:
            seen.append(x)
            return False

        select(record, from_lists([1, 2], 3, [4, 5]))
        assert seen == [3, 1, 2, 4, 5]

    def test_scan_stops_at_first_match(self) -> None:
        seen: list[int] = []

        def record(x: int) -> bool:
            seen.append(x)
            return x == 2

        select(record, from_lists([1, 2, 2], 3, [2]))
        assert seen == [3, 1, 2]

    def test_predicate_errors_propagate(self) -> None:
        def boom(_x: int) -> bool:
            raise ValueError("bad predicate")

        with pytest.raises(ValueError, match="bad predicate"):
            select(boom, from_lists([1], 2, [3]))
