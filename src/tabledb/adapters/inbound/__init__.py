"""Inbound adapters for the table store.

Inbound adapters handle incoming requests and convert them to
internal domain operations.

Exports:
    Query Parser:
        - QueryParser: Parser that converts query text to Query objects
        - parse_query: Parse with the default quote-aware parser
        - parse_literal: Interpret a single literal token
    REPL:
        - run_repl: Line-oriented read loop
        - bootstrap_database: Sample ``users`` database
"""

from tabledb.adapters.inbound.query_parser import QueryParser, parse_literal, parse_query
from tabledb.adapters.inbound.repl import bootstrap_database, run_repl

__all__ = [
    "QueryParser",
    "parse_query",
    "parse_literal",
    "run_repl",
    "bootstrap_database",
]
