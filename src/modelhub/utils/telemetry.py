"""OpenTelemetry tracing for model resolution and discovery.

Resolution and Ollama discovery open spans through :func:`get_tracer`.
Without a configured SDK the OpenTelemetry API hands back no-op tracers,
so instrumented code runs unchanged when tracing is off::

    _tracer = get_tracer(__name__)

    with _tracer.start_as_current_span("modelhub.resolve") as span:
        span.set_attribute(ATTR_INPUT, text)
        record_model(span, config)

``modelhub --telemetry`` (or :func:`configure_telemetry`) installs a real
tracer provider; that needs the ``otel`` extra
(``pip install modelhub[otel]``).
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any

from opentelemetry import trace

if TYPE_CHECKING:
    from modelhub.core.catalog.models import ModelConfig

ATTR_INPUT = "modelhub.input"
ATTR_MODEL = "modelhub.model"
ATTR_PROVIDER = "modelhub.provider"
ATTR_BACKEND = "modelhub.backend"
ATTR_COST_TIER = "modelhub.cost_tier"
ATTR_DISCOVERED_COUNT = "modelhub.discovery.count"

# Standard OpenTelemetry variable, honoured when no endpoint is passed.
OTLP_ENDPOINT_ENV = "OTEL_EXPORTER_OTLP_ENDPOINT"

_INSTRUMENTATION_NAME = "modelhub"
_INSTALL_HINT = "Install it with: pip install modelhub[otel]"


def get_tracer(name: str | None = None) -> trace.Tracer:
    """Tracer for *name*; a no-op one until telemetry is configured."""
    return trace.get_tracer(name or _INSTRUMENTATION_NAME)


def record_model(span: trace.Span, model: ModelConfig) -> None:
    """Attach the resolved model's identity to *span*."""
    span.set_attribute(ATTR_MODEL, model.id)
    span.set_attribute(ATTR_BACKEND, model.backend)
    span.set_attribute(ATTR_COST_TIER, model.capabilities.cost_tier.value)


def configure_telemetry(
    *,
    service_name: str = "modelhub",
    export_to_console: bool = True,
    otlp_endpoint: str | None = None,
) -> None:
    """Install an SDK tracer provider for this process.

    Spans go to stdout when *export_to_console* is set, and to an OTLP/gRPC
    collector at *otlp_endpoint* (default: ``$OTEL_EXPORTER_OTLP_ENDPOINT``)
    when one is known.

    Raises:
        ImportError: If ``opentelemetry-sdk``, or the OTLP exporter when an
            endpoint is set, is not installed.
    """
    try:
        from opentelemetry.sdk.resources import Resource  # pyright: ignore[reportMissingImports]
        from opentelemetry.sdk.trace import TracerProvider  # pyright: ignore[reportMissingImports]
    except ImportError as exc:
        msg = f"opentelemetry-sdk is required for configure_telemetry(). {_INSTALL_HINT}"
        raise ImportError(msg) from exc

    endpoint = otlp_endpoint or os.environ.get(OTLP_ENDPOINT_ENV)
    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))
    for processor in _span_processors(export_to_console, endpoint):
        provider.add_span_processor(processor)
    trace.set_tracer_provider(provider)


def _span_processors(export_to_console: bool, endpoint: str | None) -> list[Any]:
    from opentelemetry.sdk.trace.export import (  # pyright: ignore[reportMissingImports]
        BatchSpanProcessor,
        ConsoleSpanExporter,
        SimpleSpanProcessor,
    )

    processors: list[Any] = []
    if export_to_console:
        processors.append(SimpleSpanProcessor(ConsoleSpanExporter()))
    if endpoint:
        try:
            from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import (  # pyright: ignore[reportMissingImports]
                OTLPSpanExporter,
            )
        except ImportError as exc:
            msg = f"opentelemetry-exporter-otlp is required for OTLP export. {_INSTALL_HINT}"
            raise ImportError(msg) from exc
        processors.append(BatchSpanProcessor(OTLPSpanExporter(endpoint=endpoint)))
    return processors
