"""Lifecycle management for OpenTelemetry tracing.

Sets up the tracer provider and the streaming exporter, and exposes helpers
for getting a tracer and clearing the trace file.
"""

from __future__ import annotations

import logging
from pathlib import Path

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor

from microunit.tracing.exporters import StreamingFileSpanExporter


logger = logging.getLogger(__name__)

_exporter: StreamingFileSpanExporter | None = None
_initialized = False


def init_tracing(
    *,
    service_name: str = "microunit",
    output_path: Path | str = "traces.jsonl",
) -> None:
    """Initialize OpenTelemetry tracing with streaming file export.

    Calling it again only redirects the existing exporter to ``output_path``.
    """
    global _exporter, _initialized

    if _initialized:
        set_trace_output_path(output_path)
        return

    _exporter = StreamingFileSpanExporter(output_path)
    resource = Resource.create({"service.name": service_name})
    provider = TracerProvider(resource=resource)
    provider.add_span_processor(SimpleSpanProcessor(_exporter))
    trace.set_tracer_provider(provider)
    logger.debug("Tracing initialized, writing spans to %s", _exporter.output_path)

    _initialized = True


def set_trace_output_path(output_path: Path | str) -> None:
    """Point the exporter at a new (emptied) file."""
    if _exporter is None:
        init_tracing(output_path=output_path)
        return
    _exporter.output_path = Path(output_path)
    _exporter.output_path.parent.mkdir(parents=True, exist_ok=True)
    _exporter.output_path.write_text("")


def get_tracer(name: str = "microunit") -> trace.Tracer:
    """Get a tracer instance for creating spans."""
    return trace.get_tracer(name)


def get_trace_output_path() -> Path | None:
    return _exporter.output_path if _exporter is not None else None


def clear_traces() -> None:
    """Clear the trace file."""
    if _exporter is not None:
        _exporter.output_path.write_text("")
