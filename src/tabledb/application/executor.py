"""Query planner and executor.

Planning picks one access path per query:

    - FULL_SCAN:   visit every row and evaluate the condition
    - INDEX_EQ:    point lookup in the column index (``=``)
    - INDEX_RANGE: bounded range scan of the column index (``> >= < <=``)
    - EMPTY:       nothing can match, no row is visited

Execution follows the Volcano iterator model: the plan is turned into a
small tree of physical operators exposing open()/next()/close(), and rows are
pulled from the root.

Ordering operators only match when both sides are Integers. Index keys sort
every Integer before every Text, so range scans are clipped to the Integer
key space with the 64-bit extremes, and an ordering condition on a Text value
plans to EMPTY. Both rules keep the index paths returning exactly the rows a
full scan would.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

from tabledb.domain.entities import Database, Row, Table
from tabledb.domain.errors import ExecutionError
from tabledb.domain.value_objects import (
    MAX_INTEGER,
    MIN_INTEGER,
    Condition,
    Operator,
    Query,
    RowId,
    Value,
)
from tabledb.infrastructure.logging import get_logger
from tabledb.infrastructure.metrics import MetricsRegistry, get_metrics
from tabledb.infrastructure.tracing import trace_span
from tabledb.ports.inbound.index import RangeBound

logger = get_logger(__name__)


class AccessStrategy(Enum):
    """How the rows of a query are located."""

    FULL_SCAN = "full_scan"
    INDEX_EQ = "index_eq"
    INDEX_RANGE = "index_range"
    EMPTY = "empty"


@dataclass(frozen=True)
class AccessPlan:
    """The chosen access path for a query."""

    table_name: str
    strategy: AccessStrategy
    condition: Condition | None = None
    lower: RangeBound | None = None
    upper: RangeBound | None = None

    @property
    def uses_index(self) -> bool:
        return self.strategy in (AccessStrategy.INDEX_EQ, AccessStrategy.INDEX_RANGE)

    def __str__(self) -> str:
        if self.strategy is AccessStrategy.FULL_SCAN:
            if self.condition is None:
                return f"SeqScan({self.table_name})"
            return f"Filter({self.condition})\n  -> SeqScan({self.table_name})"
        if self.strategy is AccessStrategy.EMPTY:
            return f"Empty({self.table_name}: {self.condition})"
        assert self.condition is not None
        target = f"{self.table_name}.{self.condition.column}"
        if self.strategy is AccessStrategy.INDEX_EQ:
            return f"IndexLookup({target} = {self.condition.value!r})"
        return f"IndexRange({target}, lower={self.lower}, upper={self.upper})"


@dataclass
class ExecutionResult:
    """Result of executing a query through the engine facade."""

    rows: list[Row] = field(default_factory=list)
    plan: AccessPlan | None = None
    message: str = ""

    @property
    def success(self) -> bool:
        return self.message == "" or self.message.startswith("OK")


def matches(row: Row, condition: Condition) -> bool:
    """Evaluate a condition against one row.

    A row without the column never matches. ``=``/``!=`` compare Values
    exactly; ordering operators match only Integer against Integer.
    """
    value = row.get(condition.column)
    if value is None:
        return False

    op = condition.operator
    target = condition.value
    if op is Operator.EQ:
        return value == target
    if op is Operator.NE:
        return value != target

    if not (value.is_integer and target.is_integer):
        return False
    left = value.payload
    right = target.payload
    if op is Operator.GT:
        return left > right
    if op is Operator.GE:
        return left >= right
    if op is Operator.LT:
        return left < right
    if op is Operator.LE:
        return left <= right
    raise AssertionError(f"Unhandled operator: {op}")


def range_bounds(op: Operator, value: Value) -> tuple[RangeBound, RangeBound]:
    """Index bounds covering the Integer keys that satisfy ``key <op> value``."""
    if op is Operator.GT:
        return RangeBound(value, inclusive=False), RangeBound(MAX_INTEGER)
    if op is Operator.GE:
        return RangeBound(value), RangeBound(MAX_INTEGER)
    if op is Operator.LT:
        return RangeBound(MIN_INTEGER), RangeBound(value, inclusive=False)
    if op is Operator.LE:
        return RangeBound(MIN_INTEGER), RangeBound(value)
    raise ValueError(f"Operator {op.value} has no index range")


def plan_query(query: Query, database: Database) -> AccessPlan:
    """Choose an access path for a query.

    Raises:
        TableNotFoundError: If the query's table does not exist.
    """
    table = database.require_table(query.table_name)
    condition = query.condition

    if condition is None or not table.has_index(condition.column):
        return AccessPlan(query.table_name, AccessStrategy.FULL_SCAN, condition)

    op = condition.operator
    if op is Operator.EQ:
        return AccessPlan(query.table_name, AccessStrategy.INDEX_EQ, condition)
    if op is Operator.NE:
        # No contiguous key range means "every key but one"
        return AccessPlan(query.table_name, AccessStrategy.FULL_SCAN, condition)
    if op.is_ordering:
        if not condition.value.is_integer:
            return AccessPlan(query.table_name, AccessStrategy.EMPTY, condition)
        lower, upper = range_bounds(op, condition.value)
        return AccessPlan(
            query.table_name, AccessStrategy.INDEX_RANGE, condition, lower=lower, upper=upper
        )
    raise AssertionError(f"Unhandled operator: {op}")


class PhysicalOperator(ABC):
    """Base class for executor operators (Volcano model)."""

    @abstractmethod
    def open(self) -> None:
        """Initialize the operator."""
        pass

    @abstractmethod
    def next(self) -> Row | None:
        """Return the next row or None if exhausted."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Clean up resources."""
        pass

    def __iter__(self) -> Iterator[Row]:
        """Allow iteration over operator results."""
        self.open()
        try:
            while True:
                row = self.next()
                if row is None:
                    break
                yield row
        finally:
            self.close()


class SeqScanOperator(PhysicalOperator):
    """Sequential scan over every row of a table, in RowId order."""

    def __init__(self, table: Table) -> None:
        self._table = table
        self._rows: Iterator[Row] | None = None

    def open(self) -> None:
        self._rows = self._table.rows()

    def next(self) -> Row | None:
        if self._rows is None:
            return None
        return next(self._rows, None)

    def close(self) -> None:
        self._rows = None


class RowIdScanOperator(PhysicalOperator):
    """Fetch rows by the RowIds an index produced."""

    def __init__(self, table: Table, row_ids: list[RowId]) -> None:
        self._table = table
        self._row_ids = row_ids
        self._position = 0

    def open(self) -> None:
        self._position = 0

    def next(self) -> Row | None:
        while self._position < len(self._row_ids):
            row = self._table.get(self._row_ids[self._position])
            self._position += 1
            if row is not None:
                return row
        return None

    def close(self) -> None:
        self._position = len(self._row_ids)


class FilterOperator(PhysicalOperator):
    """Filter operator that applies a condition."""

    def __init__(self, child: PhysicalOperator, condition: Condition) -> None:
        self._child = child
        self._condition = condition

    def open(self) -> None:
        self._child.open()

    def next(self) -> Row | None:
        while True:
            row = self._child.next()
            if row is None:
                return None
            if matches(row, self._condition):
                return row

    def close(self) -> None:
        self._child.close()


class EmptyOperator(PhysicalOperator):
    """Operator that yields nothing."""

    def open(self) -> None:
        pass

    def next(self) -> Row | None:
        return None

    def close(self) -> None:
        pass


def build_operator(
    plan: AccessPlan,
    database: Database,
    metrics: MetricsRegistry | None = None,
) -> PhysicalOperator:
    """Build the physical operator tree for a plan.

    Index lookups run here, so the RowIds are fixed when the tree is built.
    """
    table = database.require_table(plan.table_name)

    if plan.strategy is AccessStrategy.FULL_SCAN:
        scan = SeqScanOperator(table)
        if plan.condition is None:
            return scan
        return FilterOperator(scan, plan.condition)

    if plan.strategy is AccessStrategy.EMPTY:
        return EmptyOperator()

    assert plan.condition is not None
    column = plan.condition.column
    index = table.get_index(column)
    assert index is not None
    index_name = f"{plan.table_name}.{column}"

    if plan.strategy is AccessStrategy.INDEX_EQ:
        if metrics is not None:
            metrics.index_lookups_total.labels(index_name=index_name).inc()
        return RowIdScanOperator(table, index.lookup_eq(plan.condition.value))

    if plan.strategy is AccessStrategy.INDEX_RANGE:
        if metrics is not None:
            metrics.index_scans_total.labels(index_name=index_name).inc()
        return RowIdScanOperator(table, index.lookup_range(plan.lower, plan.upper))

    raise AssertionError(f"Unhandled strategy: {plan.strategy}")


def run_query(
    query: Query,
    database: Database,
    metrics: MetricsRegistry | None = None,
) -> ExecutionResult:
    """Plan and execute a query once, keeping the plan that ran.

    Rows come back in RowId order for scans and in key order for index
    range scans; callers should treat them as unordered.

    Args:
        query: The parsed query.
        database: Database holding the query's table.
        metrics: Metrics registry (defaults to the global one).

    Returns:
        ExecutionResult with the matching rows and the executed plan.

    Raises:
        TableNotFoundError: If the query's table does not exist.
    """
    metrics = metrics or get_metrics()
    started = time.perf_counter()

    with trace_span("tabledb.execute_query", {"table": query.table_name}) as span:
        try:
            plan = plan_query(query, database)
        except ExecutionError as e:
            metrics.queries_total.labels(strategy="none", status="error").inc()
            logger.warning("query_failed", query=str(query), error=str(e))
            raise

        span.set_attribute("strategy", plan.strategy.value)
        rows = list(build_operator(plan, database, metrics))

    elapsed = time.perf_counter() - started
    metrics.queries_total.labels(strategy=plan.strategy.value, status="success").inc()
    metrics.query_latency_seconds.labels(strategy=plan.strategy.value).observe(elapsed)
    metrics.rows_returned_total.inc(len(rows))
    logger.debug(
        "query_executed",
        query=str(query),
        strategy=plan.strategy.value,
        rows=len(rows),
        duration_ms=round(elapsed * 1000, 3),
    )
    return ExecutionResult(rows=rows, plan=plan, message=f"OK: {len(rows)} row(s)")


def execute_query(
    query: Query,
    database: Database,
    metrics: MetricsRegistry | None = None,
) -> list[Row]:
    """Execute a query and return the matching rows.

    Raises:
        TableNotFoundError: If the query's table does not exist.
    """
    return run_query(query, database, metrics).rows
