"""Table entity.

A table owns its rows (keyed by RowId), a RowId allocator and one ordered
index per indexed column. Indexes are maintained on insert and built in bulk
when created, so every index always reflects the table's current rows.
"""

from __future__ import annotations

from typing import Any, Iterator, Mapping

from tabledb.domain.entities.row import Row
from tabledb.domain.services.ordered_index import OrderedIndex
from tabledb.domain.value_objects import FIRST_ROW_ID, RowId
from tabledb.infrastructure.logging import get_logger

logger = get_logger(__name__)


class Table:
    """An identifier-keyed collection of rows plus named column indexes.

    RowIds are handed out in strictly increasing order and never reused.
    Rows are iterated in RowId order.

    Example:
        >>> users = Table("users")
        >>> users.insert({"name": "Alice", "age": 30})
        0
        >>> users.create_index("age")
        OrderedIndex(age, keys=1, entries=1)
        >>> users.get_index("age").lookup_eq(Value.integer(30))
        [0]
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._next_row_id: int = FIRST_ROW_ID
        self._rows: dict[RowId, Row] = {}
        self._indexes: dict[str, OrderedIndex] = {}

    @property
    def name(self) -> str:
        return self._name

    @property
    def next_row_id(self) -> RowId:
        """Identifier the next insert will receive."""
        return RowId(self._next_row_id)

    @property
    def indexed_columns(self) -> list[str]:
        return list(self._indexes)

    def insert(self, row: Row | Mapping[str, Any]) -> RowId:
        """Store a row and add it to every index whose column it has.

        Args:
            row: A Row, or a mapping of plain ints/strs converted with
                ``Row.from_dict``.

        Returns:
            The RowId assigned to the row.
        """
        if not isinstance(row, Row):
            row = Row.from_dict(row)

        row_id = RowId(self._next_row_id)
        self._next_row_id += 1
        self._rows[row_id] = row

        for column, index in self._indexes.items():
            value = row.get(column)
            if value is not None:
                index.insert(value, row_id)

        return row_id

    def create_index(self, column: str) -> OrderedIndex:
        """Build an index on ``column`` from every current row.

        Replaces any existing index on the same column. Rows without the
        column are skipped, so the index may be empty.
        """
        index = OrderedIndex(column)
        for row_id, row in self._rows.items():
            value = row.get(column)
            if value is not None:
                index.insert(value, row_id)

        replaced = column in self._indexes
        self._indexes[column] = index
        logger.info(
            "index_created",
            table=self._name,
            column=column,
            entries=index.entry_count,
            replaced=replaced,
        )
        return index

    def drop_index(self, column: str) -> bool:
        """Drop the index on ``column``.

        Returns:
            True if an index existed, False otherwise.
        """
        if self._indexes.pop(column, None) is None:
            return False
        logger.info("index_dropped", table=self._name, column=column)
        return True

    def get_index(self, column: str) -> OrderedIndex | None:
        return self._indexes.get(column)

    def has_index(self, column: str) -> bool:
        return column in self._indexes

    def get(self, row_id: RowId) -> Row | None:
        return self._rows.get(row_id)

    def rows(self) -> Iterator[Row]:
        """Iterate over all rows in RowId order."""
        return iter(list(self._rows.values()))

    def __len__(self) -> int:
        return len(self._rows)

    def __repr__(self) -> str:
        return f"Table({self._name}, rows={len(self._rows)}, indexes={self.indexed_columns})"
