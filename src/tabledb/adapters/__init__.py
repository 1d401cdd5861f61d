"""Adapters layer - concrete entry points around the domain.

Inbound adapters handle incoming requests: the query text parser and the
interactive read loop.
"""

from tabledb.adapters.inbound import QueryParser, bootstrap_database, parse_query, run_repl

__all__ = [
    "QueryParser",
    "parse_query",
    "run_repl",
    "bootstrap_database",
]
