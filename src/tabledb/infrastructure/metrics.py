"""Prometheus metrics for the table store."""

from __future__ import annotations

from prometheus_client import (
    Counter,
    Histogram,
    Info,
    start_http_server,
    REGISTRY,
    CollectorRegistry,
)


class MetricsRegistry:
    """Registry of all table store metrics."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize metrics registry."""
        self._registry = registry or REGISTRY

        # Query metrics
        self.queries_total = Counter(
            "tabledb_queries_total",
            "Total number of queries executed",
            ["strategy", "status"],  # status: success, error
            registry=self._registry,
        )

        self.query_latency_seconds = Histogram(
            "tabledb_query_latency_seconds",
            "Query latency in seconds",
            ["strategy"],  # full_scan, index_eq, index_range, empty
            buckets=(0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0),
            registry=self._registry,
        )

        self.rows_returned_total = Counter(
            "tabledb_rows_returned_total",
            "Total rows returned by queries",
            registry=self._registry,
        )

        self.parse_errors_total = Counter(
            "tabledb_parse_errors_total",
            "Total queries rejected by the parser",
            registry=self._registry,
        )

        # Index metrics
        self.index_lookups_total = Counter(
            "tabledb_index_lookups_total",
            "Total index point lookups",
            ["index_name"],
            registry=self._registry,
        )

        self.index_scans_total = Counter(
            "tabledb_index_scans_total",
            "Total index range scans",
            ["index_name"],
            registry=self._registry,
        )

        # Server info
        self.info = Info(
            "tabledb",
            "Table store information",
            registry=self._registry,
        )


# Global metrics registry
_metrics: MetricsRegistry | None = None


def setup_metrics(port: int = 8001, registry: CollectorRegistry | None = None) -> MetricsRegistry:
    """
    Set up Prometheus metrics server.

    Args:
        port: Port for the metrics HTTP server
        registry: Optional custom registry

    Returns:
        The metrics registry
    """
    global _metrics
    _metrics = MetricsRegistry(registry)

    from tabledb import __version__
    _metrics.info.info({
        "version": __version__,
    })

    # Start HTTP server for Prometheus scraping
    start_http_server(port, registry=registry or REGISTRY)

    return _metrics


def get_metrics() -> MetricsRegistry:
    """Get the global metrics registry."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsRegistry()
    return _metrics
