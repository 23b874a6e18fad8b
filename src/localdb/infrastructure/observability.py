"""One-call observability setup for embedding hosts."""

from __future__ import annotations

from localdb.infrastructure.config import ObservabilityConfig, get_config
from localdb.infrastructure.logging import setup_logging
from localdb.infrastructure.tracing import setup_tracing


def configure_observability(
    config: ObservabilityConfig | None = None,
    console_export: bool = False,
) -> None:
    """
    Configure logging and tracing from ObservabilityConfig.

    The library never calls this itself; a host process calls it once at
    startup. Without it, structlog defaults and the no-op tracer are used.

    Args:
        config: Observability settings (default from global config)
        console_export: Also print finished spans to the console
    """
    config = config or get_config().observability

    setup_logging(level=config.log_level, log_format=config.log_format)
    setup_tracing(
        service_name=config.otel_service_name,
        otlp_endpoint=config.otel_endpoint,
        console_export=console_export,
    )
