"""Query value objects: operators, conditions and queries.

A Query is produced once by the parser for each input line and consumed
once by the executor.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from tabledb.domain.value_objects.value import Value


class Operator(Enum):
    """Comparison operators a condition may use.

    The set is closed: the parser and the executor both map every member.
    """

    EQ = "="
    NE = "!="
    GT = ">"
    GE = ">="
    LT = "<"
    LE = "<="

    @classmethod
    def from_symbol(cls, symbol: str) -> Operator | None:
        """Look up an operator by its surface symbol."""
        for op in cls:
            if op.value == symbol:
                return op
        return None

    @property
    def is_ordering(self) -> bool:
        """Whether the operator compares by order rather than equality."""
        return self in (Operator.GT, Operator.GE, Operator.LT, Operator.LE)


@dataclass(frozen=True)
class Condition:
    """A single ``column <op> value`` predicate."""

    column: str
    operator: Operator
    value: Value

    def __str__(self) -> str:
        literal = f"'{self.value.payload}'" if self.value.is_text else str(self.value.payload)
        return f"{self.column} {self.operator.value} {literal}"


@dataclass(frozen=True)
class Query:
    """``SELECT * FROM table_name [WHERE condition]``."""

    table_name: str
    condition: Condition | None = None

    def __str__(self) -> str:
        if self.condition is None:
            return f"SELECT * FROM {self.table_name}"
        return f"SELECT * FROM {self.table_name} WHERE {self.condition}"
