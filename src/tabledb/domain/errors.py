"""Error families raised by the table store.

Parse errors reject a query before it reaches a table. Execution errors are
raised while resolving a parsed query against a database; they never leave
the database in a modified state.
"""

from __future__ import annotations


class QueryError(Exception):
    """Base class for every error a query can produce."""


class ParseError(QueryError):
    """Error while turning query text into a Query."""


class InvalidSyntaxError(ParseError):
    """Malformed keyword sequence or unexpected token."""

    def __init__(self, message: str, token: str | None = None) -> None:
        super().__init__(message)
        self.token = token


class IncompleteClauseError(ParseError):
    """Too few tokens for the clause being parsed."""

    def __init__(self, clause: str) -> None:
        super().__init__(f"Incomplete {clause} clause")
        self.clause = clause


class UnknownOperatorError(ParseError):
    """Operator token outside ``= != > < >= <=``."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Unknown operator '{token}'")
        self.token = token


class InvalidLiteralError(ParseError):
    """Value token that is neither an integer nor a text literal."""

    def __init__(self, token: str, reason: str = "not an integer or text literal") -> None:
        super().__init__(f"Invalid literal '{token}': {reason}")
        self.token = token
        self.reason = reason


class ExecutionError(QueryError):
    """Error while executing a parsed query."""


class TableNotFoundError(ExecutionError):
    """The query names a table the database does not hold."""

    def __init__(self, table_name: str) -> None:
        super().__init__(f"Table '{table_name}' not found")
        self.table_name = table_name


class TableExistsError(ExecutionError):
    """A table with the requested name already exists."""

    def __init__(self, table_name: str) -> None:
        super().__init__(f"Table '{table_name}' already exists")
        self.table_name = table_name
