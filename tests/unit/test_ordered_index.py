"""Unit tests for the ordered secondary index."""

from __future__ import annotations

import pytest

from tabledb.domain.services import OrderedIndex
from tabledb.domain.value_objects import RowId, Value
from tabledb.ports.inbound.index import RangeBound


def _int(n: int) -> Value:
    return Value.integer(n)


@pytest.mark.unit
class TestOrderedIndex:
    """Tests for OrderedIndex."""

    @pytest.fixture
    def index(self) -> OrderedIndex:
        """Index over ages 25, 30 (twice), 45 and one Text key."""
        index = OrderedIndex("age")
        index.insert(_int(30), RowId(0))
        index.insert(_int(45), RowId(1))
        index.insert(_int(25), RowId(2))
        index.insert(_int(30), RowId(3))
        index.insert(Value.text("unknown"), RowId(4))
        return index

    def test_index_creation(self) -> None:
        """A new index is empty."""
        index = OrderedIndex("age")
        assert index.column_name == "age"
        assert len(index) == 0
        assert index.entry_count == 0
        assert index.lookup_eq(_int(1)) == []
        assert index.lookup_range() == []

    def test_keys_are_ordered(self, index: OrderedIndex) -> None:
        """Keys iterate in Value order, Integers before Texts."""
        assert list(index.keys()) == [_int(25), _int(30), _int(45), Value.text("unknown")]

    def test_lookup_eq_returns_bucket_in_insertion_order(self, index: OrderedIndex) -> None:
        """Duplicate keys keep their insertion order."""
        assert index.lookup_eq(_int(30)) == [0, 3]
        assert index.lookup_eq(Value.text("unknown")) == [4]

    def test_lookup_eq_absent_key(self, index: OrderedIndex) -> None:
        """Absent keys yield an empty list, never an error."""
        assert index.lookup_eq(_int(99)) == []
        assert index.lookup_eq(Value.text("30")) == []

    def test_lookup_eq_returns_copy(self, index: OrderedIndex) -> None:
        """Mutating a lookup result leaves the index intact."""
        result = index.lookup_eq(_int(30))
        result.append(RowId(99))
        assert index.lookup_eq(_int(30)) == [0, 3]

    def test_insert_is_not_idempotent(self) -> None:
        """Inserting the same pair twice stores it twice."""
        index = OrderedIndex("x")
        index.insert(_int(1), RowId(7))
        index.insert(_int(1), RowId(7))
        assert index.lookup_eq(_int(1)) == [7, 7]
        assert index.entry_count == 2

    def test_remove(self, index: OrderedIndex) -> None:
        """Remove deletes one RowId from the bucket."""
        index.remove(_int(30), RowId(0))
        assert index.lookup_eq(_int(30)) == [3]
        assert index.entry_count == 4

    def test_remove_drops_empty_bucket(self, index: OrderedIndex) -> None:
        """The key disappears once its bucket is empty."""
        index.remove(_int(45), RowId(1))
        assert _int(45) not in index
        assert list(index.keys()) == [_int(25), _int(30), Value.text("unknown")]

    def test_remove_absent_pair_is_noop(self, index: OrderedIndex) -> None:
        """Removing an absent key or RowId does nothing."""
        index.remove(_int(99), RowId(0))
        index.remove(_int(30), RowId(42))
        assert index.entry_count == 5
        assert len(index) == 4

    def test_range_unbounded(self, index: OrderedIndex) -> None:
        """No bounds returns every RowId in key order."""
        assert index.lookup_range() == [2, 0, 3, 1, 4]

    def test_range_exclusive_lower(self, index: OrderedIndex) -> None:
        result = index.lookup_range(RangeBound(_int(25), inclusive=False), RangeBound(_int(45)))
        assert result == [0, 3, 1]

    def test_range_inclusive_lower(self, index: OrderedIndex) -> None:
        result = index.lookup_range(RangeBound(_int(30)), RangeBound(_int(45)))
        assert result == [0, 3, 1]

    def test_range_exclusive_upper(self, index: OrderedIndex) -> None:
        result = index.lookup_range(None, RangeBound(_int(30), inclusive=False))
        assert result == [2]

    def test_range_inclusive_upper(self, index: OrderedIndex) -> None:
        result = index.lookup_range(None, RangeBound(_int(30)))
        assert result == [2, 0, 3]

    def test_range_bounds_between_keys(self, index: OrderedIndex) -> None:
        """Bounds need not be present keys."""
        result = index.lookup_range(RangeBound(_int(26)), RangeBound(_int(44)))
        assert result == [0, 3]

    def test_range_open_upper_reaches_text_keys(self, index: OrderedIndex) -> None:
        """Without an upper bound the scan continues into Text keys."""
        assert index.lookup_range(RangeBound(_int(40))) == [1, 4]

    def test_empty_range(self, index: OrderedIndex) -> None:
        """Inverted or degenerate ranges are empty."""
        assert index.lookup_range(RangeBound(_int(45)), RangeBound(_int(25))) == []
        assert (
            index.lookup_range(
                RangeBound(_int(30), inclusive=False), RangeBound(_int(30), inclusive=False)
            )
            == []
        )

    def test_stats(self, index: OrderedIndex) -> None:
        """Statistics track entries and lookups."""
        index.lookup_eq(_int(30))
        index.lookup_range()
        index.lookup_range()
        stats = index.get_stats()
        assert stats.column_name == "age"
        assert stats.num_keys == 4
        assert stats.num_entries == 5
        assert stats.lookup_count == 1
        assert stats.range_scan_count == 2

    def test_many_keys_stay_sorted(self) -> None:
        """Out-of-order inserts still produce sorted keys."""
        index = OrderedIndex("n")
        for i, n in enumerate([50, -7, 13, 0, 99, 13, -100]):
            index.insert(_int(n), RowId(i))
        assert [k.payload for k in index.keys()] == [-100, -7, 0, 13, 50, 99]
        assert index.lookup_eq(_int(13)) == [2, 5]
