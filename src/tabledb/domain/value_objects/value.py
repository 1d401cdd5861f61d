"""Tagged scalar values stored in rows and used as index keys.

A Value is either an Integer (signed 64-bit) or a Text (unicode string).
Values are immutable, hashable and totally ordered so they can serve as
keys of an ordered index.

Ordering rule:
    Values are compared by kind first and payload second. Every Integer
    sorts before every Text; Integers compare numerically and Texts compare
    lexicographically by code point. There is no implicit coercion, so
    ``Value.integer(30) != Value.text("30")``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Union

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

Payload = Union[int, str]


class ValueKind(Enum):
    """Variant tag of a Value. The rank defines cross-kind ordering."""

    INTEGER = 0
    TEXT = 1

    @property
    def rank(self) -> int:
        return self.value


@total_ordering
@dataclass(frozen=True, slots=True, eq=False)
class Value:
    """An immutable Integer or Text scalar.

    Use the ``integer``/``text``/``of`` constructors rather than building the
    dataclass directly so the payload is validated against its kind.

    Example:
        >>> Value.integer(30) < Value.integer(45)
        True
        >>> Value.integer(10**6) < Value.text("a")
        True
    """

    kind: ValueKind
    payload: Payload

    def __post_init__(self) -> None:
        """Validate the payload against the declared kind."""
        if self.kind is ValueKind.INTEGER:
            if isinstance(self.payload, bool) or not isinstance(self.payload, int):
                raise TypeError(f"Integer value requires int, got {type(self.payload).__name__}")
            if not INT64_MIN <= self.payload <= INT64_MAX:
                raise ValueError(f"Integer value {self.payload} out of 64-bit range")
        elif not isinstance(self.payload, str):
            raise TypeError(f"Text value requires str, got {type(self.payload).__name__}")

    @classmethod
    def integer(cls, payload: int) -> Value:
        return cls(ValueKind.INTEGER, payload)

    @classmethod
    def text(cls, payload: str) -> Value:
        return cls(ValueKind.TEXT, payload)

    @classmethod
    def of(cls, payload: Value | Payload) -> Value:
        """Wrap a plain Python int or str (Values pass through unchanged).

        Raises:
            TypeError: If the payload is neither int nor str (bool included).
        """
        if isinstance(payload, Value):
            return payload
        if isinstance(payload, str):
            return cls.text(payload)
        return cls.integer(payload)  # type: ignore[arg-type]

    @property
    def is_integer(self) -> bool:
        return self.kind is ValueKind.INTEGER

    @property
    def is_text(self) -> bool:
        return self.kind is ValueKind.TEXT

    def sort_key(self) -> tuple[int, Payload]:
        """Key realizing the total order: kind rank, then payload."""
        return (self.kind.rank, self.payload)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self.kind is other.kind and self.payload == other.payload

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __hash__(self) -> int:
        return hash((self.kind, self.payload))

    def __repr__(self) -> str:
        if self.is_integer:
            return f"Integer({self.payload})"
        return f"Text({self.payload!r})"

    def __str__(self) -> str:
        return str(self.payload)


# Extremes of the Integer kind, used to clip range scans to integer keys
MIN_INTEGER = Value.integer(INT64_MIN)
MAX_INTEGER = Value.integer(INT64_MAX)
