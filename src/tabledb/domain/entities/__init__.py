"""Domain entities for the table store.

Entities are objects with identity that have a lifecycle. Unlike value objects,
two entities with the same attributes may not be equal if they have different
identities.

Exports:
    - Row: Immutable column-name to Value mapping
    - Table: Rows keyed by RowId plus per-column ordered indexes
    - Database: Name-keyed collection of tables
"""

from tabledb.domain.entities.database import Database
from tabledb.domain.entities.row import Row
from tabledb.domain.entities.table import Table

__all__ = [
    "Row",
    "Table",
    "Database",
]
