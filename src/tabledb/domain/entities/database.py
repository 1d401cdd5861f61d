"""Database entity: a name-keyed collection of tables.

The database is explicit state. Callers construct it, pass it to the
executor by reference and drop it when done; nothing in the package keeps
a process-wide instance.
"""

from __future__ import annotations

from typing import Iterator

from tabledb.domain.entities.table import Table
from tabledb.domain.errors import TableExistsError, TableNotFoundError
from tabledb.infrastructure.logging import get_logger

logger = get_logger(__name__)


class Database:
    """Collection of tables with unique names."""

    def __init__(self) -> None:
        self._tables: dict[str, Table] = {}

    def create_table(self, name: str) -> Table:
        """Create an empty table.

        Raises:
            TableExistsError: If a table with this name exists.
        """
        if name in self._tables:
            raise TableExistsError(name)
        table = Table(name)
        self._tables[name] = table
        logger.info("table_created", table=name)
        return table

    def get_table(self, name: str) -> Table | None:
        return self._tables.get(name)

    def require_table(self, name: str) -> Table:
        """Get a table or raise.

        Raises:
            TableNotFoundError: If no table has this name.
        """
        table = self._tables.get(name)
        if table is None:
            raise TableNotFoundError(name)
        return table

    def drop_table(self, name: str) -> bool:
        if self._tables.pop(name, None) is None:
            return False
        logger.info("table_dropped", table=name)
        return True

    def table_names(self) -> list[str]:
        return list(self._tables)

    def __contains__(self, name: object) -> bool:
        return name in self._tables

    def __iter__(self) -> Iterator[Table]:
        return iter(list(self._tables.values()))

    def __len__(self) -> int:
        return len(self._tables)
