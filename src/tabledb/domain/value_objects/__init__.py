"""Value objects for the table store domain.

Value objects are immutable types that represent domain concepts.
They have no identity - two value objects with the same attributes are equal.

Exports:
    Identifiers:
        - RowId: Type-safe, table-scoped row identifier
        - FIRST_ROW_ID: First identifier allocated by a table

    Values:
        - Value: Tagged Integer/Text scalar with a total order
        - ValueKind: Variant tag (INTEGER sorts before TEXT)
        - MIN_INTEGER, MAX_INTEGER: Extremes of the Integer kind

    Query Types:
        - Operator: Closed set of comparison operators
        - Condition: Single (column, operator, value) predicate
        - Query: Table name plus optional condition
"""

from tabledb.domain.value_objects.identifiers import FIRST_ROW_ID, RowId
from tabledb.domain.value_objects.query import Condition, Operator, Query
from tabledb.domain.value_objects.value import (
    INT64_MAX,
    INT64_MIN,
    MAX_INTEGER,
    MIN_INTEGER,
    Value,
    ValueKind,
)

__all__ = [
    # Identifiers
    "RowId",
    "FIRST_ROW_ID",
    # Values
    "Value",
    "ValueKind",
    "INT64_MIN",
    "INT64_MAX",
    "MIN_INTEGER",
    "MAX_INTEGER",
    # Query types
    "Operator",
    "Condition",
    "Query",
]
