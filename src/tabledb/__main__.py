"""Run the interactive read loop over the sample database.

Usage:
    python -m tabledb

Settings come from ``TABLEDB_*`` environment variables (see
``tabledb.infrastructure.config``).
"""

from __future__ import annotations

import sys

from tabledb.adapters.inbound.query_parser import QueryParser
from tabledb.adapters.inbound.repl import bootstrap_database, run_repl
from tabledb.application.query_engine import QueryEngine
from tabledb.infrastructure.config import get_config
from tabledb.infrastructure.logging import get_logger, setup_logging
from tabledb.infrastructure.metrics import get_metrics, setup_metrics
from tabledb.infrastructure.tracing import setup_tracing


def main() -> int:
    config = get_config()
    setup_logging(
        level=config.observability.log_level,
        log_format=config.observability.log_format,
    )
    logger = get_logger(__name__)

    if config.observability.otel_endpoint:
        setup_tracing(
            service_name=config.observability.otel_service_name,
            otlp_endpoint=config.observability.otel_endpoint,
        )

    if config.metrics.enabled:
        metrics = setup_metrics(port=config.metrics.port)
        logger.info("metrics_server_started", port=config.metrics.port)
    else:
        metrics = get_metrics()

    engine = QueryEngine(
        bootstrap_database(),
        parser=QueryParser.from_config(config.parser),
        metrics=metrics,
    )
    run_repl(engine)
    return 0


if __name__ == "__main__":
    sys.exit(main())
