"""Query parser for the single-statement query surface.

Grammar (keywords are case-insensitive)::

    SELECT * FROM <identifier> [ WHERE <identifier> <operator> <literal> ] [;]

    <operator> ::= "=" | "!=" | ">" | "<" | ">=" | "<="
    <literal>  ::= <integer> | '<text>' | "<text>" | <bare-word>

Integer literals must fit in a signed 64-bit integer. Quoted literals become
Text with the quotes stripped. Any other unquoted token is read as Text,
except one that starts like a number (``25abc``, ``1.5``) or carries an
unmatched leading or trailing quote (``'Bob``); those are rejected.
Table and column names are Python-style identifiers.

Tokenization:
    By default quoted spans are kept as single tokens, so
    ``WHERE name = 'Bob Smith'`` parses. With ``quote_aware=False`` the text
    is split on whitespace only, and a quoted literal containing spaces
    becomes several tokens and is rejected as trailing input.
"""

from __future__ import annotations

import re

from tabledb.domain.errors import (
    IncompleteClauseError,
    InvalidLiteralError,
    InvalidSyntaxError,
    UnknownOperatorError,
)
from tabledb.domain.value_objects import INT64_MAX, INT64_MIN, Condition, Operator, Query, Value
from tabledb.infrastructure.config import ParserConfig
from tabledb.infrastructure.logging import get_logger

logger = get_logger(__name__)

# A token is a run of quoted spans and non-space characters; a quote with no
# closing partner is an ordinary character.
_QUOTE_AWARE_TOKEN = re.compile(r"""(?:'[^']*'|"[^"]*"|\S)+""")
_INTEGER = re.compile(r"[+-]?[0-9]+")
_NUMERIC_START = re.compile(r"[+-]?[0-9]")
_QUOTES = "'\""

# Token counts of the two statement shapes
_SELECT_TOKENS = 4
_WHERE_TOKENS = 8


class QueryParser:
    """Parser producing Query objects from query text.

    Example:
        >>> parser = QueryParser()
        >>> print(parser.parse("SELECT * FROM users WHERE age > 25;"))
        SELECT * FROM users WHERE age > 25
    """

    def __init__(self, quote_aware: bool = True, max_query_length: int = 4096) -> None:
        """Initialize the parser.

        Args:
            quote_aware: Keep quoted spans as single tokens.
            max_query_length: Longest accepted input in characters.
        """
        self._quote_aware = quote_aware
        self._max_query_length = max_query_length

    @classmethod
    def from_config(cls, config: ParserConfig) -> QueryParser:
        return cls(quote_aware=config.quote_aware, max_query_length=config.max_query_length)

    @property
    def quote_aware(self) -> bool:
        return self._quote_aware

    def tokenize(self, text: str) -> list[str]:
        """Split query text into tokens, dropping a trailing ``;``."""
        if self._quote_aware:
            tokens = _QUOTE_AWARE_TOKEN.findall(text)
        else:
            tokens = text.split()

        if tokens and tokens[-1] == ";":
            tokens.pop()
        elif tokens and tokens[-1].endswith(";"):
            tokens[-1] = tokens[-1][:-1]
        return tokens

    def parse(self, text: str) -> Query:
        """Parse query text into a Query.

        Args:
            text: The query text.

        Returns:
            The parsed query.

        Raises:
            ParseError: If the text does not match the grammar.
        """
        if len(text) > self._max_query_length:
            raise InvalidSyntaxError(
                f"Query exceeds maximum length of {self._max_query_length} characters"
            )

        tokens = self.tokenize(text)

        if len(tokens) < _SELECT_TOKENS:
            raise IncompleteClauseError("SELECT")
        if tokens[0].upper() != "SELECT":
            raise InvalidSyntaxError(f"Expected SELECT, got '{tokens[0]}'", tokens[0])
        if tokens[1] != "*":
            raise InvalidSyntaxError(f"Expected '*' after SELECT, got '{tokens[1]}'", tokens[1])
        if tokens[2].upper() != "FROM":
            raise InvalidSyntaxError(f"Expected FROM, got '{tokens[2]}'", tokens[2])

        table_name = self._identifier(tokens[3], "table name")

        if len(tokens) == _SELECT_TOKENS:
            query = Query(table_name=table_name)
            logger.debug("query_parsed", query=str(query))
            return query

        if tokens[4].upper() != "WHERE":
            raise InvalidSyntaxError(
                f"Unexpected token '{tokens[4]}' after table name", tokens[4]
            )
        if len(tokens) < _WHERE_TOKENS:
            raise IncompleteClauseError("WHERE")
        if len(tokens) > _WHERE_TOKENS:
            raise InvalidSyntaxError(
                f"Unexpected token '{tokens[_WHERE_TOKENS]}' after WHERE condition",
                tokens[_WHERE_TOKENS],
            )

        column = self._identifier(tokens[5], "column name")
        operator = Operator.from_symbol(tokens[6])
        if operator is None:
            raise UnknownOperatorError(tokens[6])
        value = parse_literal(tokens[7])

        query = Query(
            table_name=table_name,
            condition=Condition(column=column, operator=operator, value=value),
        )
        logger.debug("query_parsed", query=str(query))
        return query

    @staticmethod
    def _identifier(token: str, what: str) -> str:
        if not token.isidentifier():
            raise InvalidSyntaxError(f"Invalid {what} '{token}'", token)
        return token


def parse_literal(token: str) -> Value:
    """Interpret a single literal token.

    Raises:
        InvalidLiteralError: If the token starts like a number but is not a
            64-bit integer, or if it has an unmatched leading or trailing
            quote.
    """
    if len(token) >= 2 and token[0] in _QUOTES and token[-1] == token[0]:
        return Value.text(token[1:-1])

    if _INTEGER.fullmatch(token):
        number = int(token)
        if not INT64_MIN <= number <= INT64_MAX:
            raise InvalidLiteralError(token, "integer out of 64-bit range")
        return Value.integer(number)

    if _NUMERIC_START.match(token):
        raise InvalidLiteralError(token, "not an integer")
    if token[0] in _QUOTES or token[-1] in _QUOTES:
        raise InvalidLiteralError(token, "unbalanced quotes")

    return Value.text(token)


_default_parser = QueryParser()


def parse_query(text: str) -> Query:
    """Parse query text with the default (quote-aware) parser."""
    return _default_parser.parse(text)
