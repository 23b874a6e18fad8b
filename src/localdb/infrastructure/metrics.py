"""Prometheus metrics for localdb."""

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
    """Registry of all localdb metrics."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize metrics registry."""
        self._registry = registry or REGISTRY

        # Statement metrics
        self.statements_total = Counter(
            "localdb_statements_total",
            "Total number of statements processed",
            ["statement_type", "status"],  # status: success, error
            registry=self._registry,
        )

        self.statement_latency_seconds = Histogram(
            "localdb_statement_latency_seconds",
            "Statement latency in seconds",
            ["statement_type"],  # create_table, insert, select
            buckets=(0.0005, 0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0),
            registry=self._registry,
        )

        self.rows_inserted_total = Counter(
            "localdb_rows_inserted_total",
            "Total rows appended to collections",
            registry=self._registry,
        )

        # Document metrics
        self.document_loads_total = Counter(
            "localdb_document_loads_total",
            "Total whole-document loads",
            registry=self._registry,
        )

        self.document_saves_total = Counter(
            "localdb_document_saves_total",
            "Total whole-document saves",
            registry=self._registry,
        )

        self.document_recoveries_total = Counter(
            "localdb_document_recoveries_total",
            "Undecodable documents replaced by an empty database",
            registry=self._registry,
        )

        self.info = Info(
            "localdb",
            "localdb library information",
            registry=self._registry,
        )

    @property
    def registry(self) -> CollectorRegistry:
        """The underlying collector registry."""
        return self._registry


# Global metrics registry
_metrics: MetricsRegistry | None = None


def setup_metrics(port: int = 8001, registry: CollectorRegistry | None = None) -> MetricsRegistry:
    """
    Set up the Prometheus exposition server.

    Args:
        port: Port for the metrics HTTP server
        registry: Optional custom registry

    Returns:
        The metrics registry
    """
    global _metrics
    _metrics = MetricsRegistry(registry)

    from localdb import __version__
    _metrics.info.info({
        "version": __version__,
    })

    start_http_server(port, registry=registry or REGISTRY)

    return _metrics


def get_metrics() -> MetricsRegistry:
    """Get the global metrics registry."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsRegistry()
    return _metrics
