"""Row entity.

A row maps column names to Values. Rows are created at insertion time and
never mutated afterwards; each row owns its own mapping.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterator, Mapping

from tabledb.domain.value_objects import Value


@dataclass(frozen=True, eq=False)
class Row:
    """An immutable column-name to Value mapping.

    Rows can be accessed by column name. A missing column is not an error
    for ``get`` (it returns the default), which is how the executor treats
    rows lacking the condition's column.
    """

    data: Mapping[str, Value]

    def __post_init__(self) -> None:
        copied: dict[str, Value] = {}
        for column, value in self.data.items():
            if not isinstance(column, str) or not column:
                raise ValueError(f"Column names must be non-empty strings, got {column!r}")
            if not isinstance(value, Value):
                raise TypeError(f"Column '{column}' holds {type(value).__name__}, expected Value")
            copied[column] = value
        object.__setattr__(self, "data", MappingProxyType(copied))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Row:
        """Build a row from plain Python ints/strs (Values are kept as-is)."""
        return cls({column: Value.of(value) for column, value in data.items()})

    @property
    def columns(self) -> list[str]:
        return list(self.data)

    def get(self, column: str, default: Value | None = None) -> Value | None:
        return self.data.get(column, default)

    def to_dict(self) -> dict[str, int | str]:
        """Unwrap every Value to its Python payload."""
        return {column: value.payload for column, value in self.data.items()}

    def __getitem__(self, column: str) -> Value:
        try:
            return self.data[column]
        except KeyError as e:
            raise KeyError(f"Column '{column}' not found") from e

    def __contains__(self, column: object) -> bool:
        return column in self.data

    def __iter__(self) -> Iterator[str]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Row):
            return NotImplemented
        return dict(self.data) == dict(other.data)

    def __hash__(self) -> int:
        return hash(frozenset(self.data.items()))

    def __repr__(self) -> str:
        pairs = ", ".join(f"{c}={v.payload!r}" for c, v in self.data.items())
        return f"Row({pairs})"
