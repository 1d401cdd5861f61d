"""Interactive read loop and sample data bootstrap.

The loop reads one query per line, runs it through the engine and prints
either the matching rows or the error message. ``EXIT`` (any case) or end of
input stops the loop.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from tabledb.domain.entities import Database
from tabledb.infrastructure.logging import get_logger

if TYPE_CHECKING:
    from tabledb.application.query_engine import QueryEngine

logger = get_logger(__name__)

PROMPT = "tabledb> "

SAMPLE_USERS = [
    {"id": 1, "name": "Alice", "age": 30},
    {"id": 2, "name": "Bob", "age": 45},
    {"id": 3, "name": "Charlie", "age": 25},
]


def bootstrap_database() -> Database:
    """Build the sample database: a ``users`` table indexed on ``age``."""
    database = Database()
    users = database.create_table("users")
    for row in SAMPLE_USERS:
        users.insert(row)
    users.create_index("age")
    return database


def run_repl(
    engine: QueryEngine,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> int:
    """Run the read loop until EXIT or end of input.

    Args:
        engine: Engine used to run each query.
        input_fn: Reads one line given a prompt.
        output_fn: Writes one line of output.

    Returns:
        Number of queries executed (blank lines and EXIT not counted).
    """
    output_fn("tabledb REPL. Enter SELECT * FROM <table> [WHERE <col> <op> <value>]; EXIT to quit.")
    executed = 0
    while True:
        try:
            line = input_fn(PROMPT)
        except EOFError:
            break

        stripped = line.strip()
        if not stripped:
            continue
        if stripped.upper() == "EXIT":
            break

        result = engine.execute(stripped)
        executed += 1
        if not result.success:
            output_fn(result.message)
            continue
        for row in result.rows:
            output_fn(repr(row))
        output_fn(f"({len(result.rows)} row(s))")

    logger.debug("repl_finished", queries=executed)
    return executed
