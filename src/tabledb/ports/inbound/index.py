"""Secondary index port.

This inbound port defines the contract for a column index: an ordered map
from Value to the RowIds of rows holding that value, supporting point lookup
and bounded range scans in key order.

None of the operations fail. Absent keys yield empty results.
"""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass
from typing import Iterator, Protocol

from tabledb.domain.value_objects import RowId, Value


@dataclass(frozen=True)
class RangeBound:
    """One end of a key range.

    Attributes:
        value: The boundary key.
        inclusive: Whether keys equal to ``value`` are inside the range.
    """

    value: Value
    inclusive: bool = True

    def __str__(self) -> str:
        return f"{self.value!r}{'' if self.inclusive else ' (exclusive)'}"


@dataclass
class IndexStats:
    """Statistics for index monitoring."""

    column_name: str
    num_keys: int
    num_entries: int
    lookup_count: int
    range_scan_count: int


class Index(Protocol):
    """Protocol for a single column index.

    Keys are kept in Value order. Each key maps to an insertion-ordered list
    of RowIds; several rows may share a key.
    """

    @property
    @abstractmethod
    def column_name(self) -> str:
        """Column this index covers."""
        ...

    @abstractmethod
    def insert(self, value: Value, row_id: RowId) -> None:
        """Append ``row_id`` to the bucket for ``value``.

        Not idempotent: inserting the same pair twice stores it twice.
        """
        ...

    @abstractmethod
    def remove(self, value: Value, row_id: RowId) -> None:
        """Remove ``row_id`` from the bucket for ``value`` if present.

        The bucket is dropped once empty. Absent pairs are ignored.
        """
        ...

    @abstractmethod
    def lookup_eq(self, value: Value) -> list[RowId]:
        """Return the RowIds stored under ``value`` (empty if none)."""
        ...

    @abstractmethod
    def lookup_range(
        self,
        lower: RangeBound | None = None,
        upper: RangeBound | None = None,
    ) -> list[RowId]:
        """Return RowIds for every key within the bounds, in key order.

        Args:
            lower: Lower bound (None for unbounded).
            upper: Upper bound (None for unbounded).
        """
        ...

    @abstractmethod
    def keys(self) -> Iterator[Value]:
        """Iterate over the distinct keys in order."""
        ...

    @abstractmethod
    def get_stats(self) -> IndexStats:
        """Return index statistics for monitoring."""
        ...
