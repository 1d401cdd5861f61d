"""Query engine - unified entry point for running query text.

This module provides the QueryEngine class that ties the parser and the
executor to one explicitly owned Database.

Usage:
    from tabledb.application import QueryEngine
    from tabledb.domain.entities import Database

    db = Database()
    users = db.create_table("users")
    users.insert({"name": "Alice", "age": 30})
    users.create_index("age")

    engine = QueryEngine(db)
    result = engine.execute("SELECT * FROM users WHERE age >= 30")
    print(engine.explain("SELECT * FROM users WHERE age >= 30"))
"""

from __future__ import annotations

from tabledb.adapters.inbound.query_parser import QueryParser
from tabledb.application.executor import AccessPlan, ExecutionResult, plan_query, run_query
from tabledb.domain.entities import Database
from tabledb.domain.errors import ExecutionError, ParseError
from tabledb.infrastructure.logging import get_logger
from tabledb.infrastructure.metrics import MetricsRegistry, get_metrics

logger = get_logger(__name__)


class QueryEngine:
    """Parses and executes query text against a database.

    Errors never escape ``execute``: parse and execution failures are
    reported in the result message, and the database is left untouched.
    """

    def __init__(
        self,
        database: Database,
        parser: QueryParser | None = None,
        metrics: MetricsRegistry | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            database: Database the queries run against.
            parser: Parser to use. Defaults to a quote-aware parser.
            metrics: Metrics registry. Defaults to the global one.
        """
        self._database = database
        self._parser = parser or QueryParser()
        self._metrics = metrics or get_metrics()

    @property
    def database(self) -> Database:
        return self._database

    def execute(self, text: str) -> ExecutionResult:
        """Parse and execute one query.

        Args:
            text: The query text.

        Returns:
            ExecutionResult with rows, the access plan and a status message.
        """
        try:
            query = self._parser.parse(text)
        except ParseError as e:
            self._metrics.parse_errors_total.inc()
            logger.info("query_rejected", text=text, error=str(e))
            return ExecutionResult(message=f"Parse error: {e}")

        try:
            return run_query(query, self._database, self._metrics)
        except ExecutionError as e:
            return ExecutionResult(message=f"Error: {e}")

    def explain(self, text: str) -> AccessPlan:
        """Return the access plan for a query without running it.

        Raises:
            ParseError: If the text does not parse.
            TableNotFoundError: If the table does not exist.
        """
        return plan_query(self._parser.parse(text), self._database)
