"""
tabledb - In-memory Table Store

A small in-memory tabular store with typed Integer/Text values, ordered
secondary indexes and a single-statement query surface
(``SELECT * FROM <table> [WHERE <column> <op> <value>]``) that chooses
between index lookups and full scans.
"""

__version__ = "0.1.0"
__author__ = "Systems Engineering Portfolio"

from tabledb.adapters.inbound.query_parser import QueryParser, parse_query
from tabledb.application import QueryEngine, execute_query, plan_query
from tabledb.domain.entities import Database, Row, Table
from tabledb.domain.value_objects import Condition, Operator, Query, RowId, Value

__all__ = [
    "__version__",
    "QueryParser",
    "parse_query",
    "QueryEngine",
    "execute_query",
    "plan_query",
    "Database",
    "Table",
    "Row",
    "Value",
    "RowId",
    "Operator",
    "Condition",
    "Query",
]
