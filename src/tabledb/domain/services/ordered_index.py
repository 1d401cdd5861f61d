"""Ordered secondary index.

This module implements the column index used by tables. Keys are kept in a
sorted list (binary search via ``bisect``) next to a dict of buckets, which
gives:

    - O(1) average point lookup through the bucket dict
    - O(log n + k) range scans over the sorted key list
    - O(n) worst-case key insertion (list shift), acceptable for an
      in-memory store that is built once and read many times

Buckets preserve insertion order, so RowIds under one key come back in the
order their rows were indexed.
"""

from __future__ import annotations

import bisect
from typing import Iterator

from tabledb.domain.value_objects import RowId, Value
from tabledb.ports.inbound.index import IndexStats, RangeBound


class OrderedIndex:
    """An ordered, non-unique index over one column.

    This class implements the Index protocol.

    Attributes:
        column_name: Column being indexed.

    Example:
        >>> index = OrderedIndex("age")
        >>> index.insert(Value.integer(30), RowId(0))
        >>> index.insert(Value.integer(45), RowId(1))
        >>> index.lookup_range(RangeBound(Value.integer(30), inclusive=False))
        [1]
    """

    def __init__(self, column_name: str) -> None:
        self._column_name = column_name
        self._keys: list[Value] = []
        self._buckets: dict[Value, list[RowId]] = {}

        # Statistics
        self._num_entries = 0
        self._lookup_count = 0
        self._range_scan_count = 0

    @property
    def column_name(self) -> str:
        return self._column_name

    @property
    def entry_count(self) -> int:
        """Total number of RowIds across all buckets."""
        return self._num_entries

    def insert(self, value: Value, row_id: RowId) -> None:
        """Append ``row_id`` under ``value``, creating the bucket if needed."""
        bucket = self._buckets.get(value)
        if bucket is None:
            bucket = []
            self._buckets[value] = bucket
            bisect.insort(self._keys, value)
        bucket.append(row_id)
        self._num_entries += 1

    def remove(self, value: Value, row_id: RowId) -> None:
        """Remove ``row_id`` from under ``value``; absent pairs are ignored."""
        bucket = self._buckets.get(value)
        if bucket is None or row_id not in bucket:
            return
        bucket.remove(row_id)
        self._num_entries -= 1
        if not bucket:
            del self._buckets[value]
            pos = bisect.bisect_left(self._keys, value)
            del self._keys[pos]

    def lookup_eq(self, value: Value) -> list[RowId]:
        """Return a copy of the bucket for ``value``."""
        self._lookup_count += 1
        return list(self._buckets.get(value, ()))

    def lookup_range(
        self,
        lower: RangeBound | None = None,
        upper: RangeBound | None = None,
    ) -> list[RowId]:
        """Concatenate, in key order, the buckets of all keys inside the bounds.

        Args:
            lower: Lower bound (None for unbounded).
            upper: Upper bound (None for unbounded).

        Returns:
            RowIds ordered by key, then by insertion within a key.
        """
        self._range_scan_count += 1

        if lower is None:
            start = 0
        elif lower.inclusive:
            start = bisect.bisect_left(self._keys, lower.value)
        else:
            start = bisect.bisect_right(self._keys, lower.value)

        if upper is None:
            stop = len(self._keys)
        elif upper.inclusive:
            stop = bisect.bisect_right(self._keys, upper.value)
        else:
            stop = bisect.bisect_left(self._keys, upper.value)

        result: list[RowId] = []
        for key in self._keys[start:stop]:
            result.extend(self._buckets[key])
        return result

    def keys(self) -> Iterator[Value]:
        """Iterate over the distinct keys in Value order."""
        return iter(list(self._keys))

    def get_stats(self) -> IndexStats:
        return IndexStats(
            column_name=self._column_name,
            num_keys=len(self._keys),
            num_entries=self._num_entries,
            lookup_count=self._lookup_count,
            range_scan_count=self._range_scan_count,
        )

    def __contains__(self, value: object) -> bool:
        return value in self._buckets

    def __len__(self) -> int:
        return len(self._keys)

    def __repr__(self) -> str:
        return f"OrderedIndex({self._column_name}, keys={len(self._keys)}, entries={self._num_entries})"
