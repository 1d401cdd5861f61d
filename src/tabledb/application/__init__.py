"""Application layer for the table store.

The application layer orchestrates domain logic to fulfill use cases.

Exports:
    QueryEngine:
        - QueryEngine: Parses and executes query text against a database
    Executor:
        - execute_query: Run a parsed query against a database
        - run_query: Run a parsed query, keeping the executed plan
        - plan_query: Choose the access path for a query
        - AccessPlan, AccessStrategy: The chosen access path
        - ExecutionResult: Result of running query text
        - PhysicalOperator: Base class for executor operators
"""

from tabledb.application.executor import (
    AccessPlan,
    AccessStrategy,
    EmptyOperator,
    ExecutionResult,
    FilterOperator,
    PhysicalOperator,
    RowIdScanOperator,
    SeqScanOperator,
    execute_query,
    matches,
    plan_query,
    run_query,
)
from tabledb.application.query_engine import QueryEngine

__all__ = [
    "QueryEngine",
    "execute_query",
    "run_query",
    "plan_query",
    "matches",
    "AccessPlan",
    "AccessStrategy",
    "ExecutionResult",
    "PhysicalOperator",
    "SeqScanOperator",
    "RowIdScanOperator",
    "FilterOperator",
    "EmptyOperator",
]
