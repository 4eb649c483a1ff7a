"""Streaming file exporter for OpenTelemetry spans.

Writes spans to a JSONL file as they are finished, avoiding memory buildup.
"""

import json
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from opentelemetry.sdk.trace import ReadableSpan
from opentelemetry.sdk.trace.export import SpanExporter, SpanExportResult


logger = logging.getLogger(__name__)


class StreamingFileSpanExporter(SpanExporter):
    """Exports spans to a file in JSONL format as they are received."""

    def __init__(self, output_path: Path | str) -> None:
        self.output_path = Path(output_path)
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self.output_path.write_text("")

    def export(self, spans: Sequence[ReadableSpan]) -> SpanExportResult:
        """Export a batch of spans to the file."""
        try:
            with self.output_path.open("a", encoding="utf-8") as f:
                for span in spans:
                    f.write(json.dumps(self._span_to_dict(span), default=str) + "\n")
        except OSError:
            logger.exception("Error exporting spans to %s", self.output_path)
            return SpanExportResult.FAILURE
        return SpanExportResult.SUCCESS

    def shutdown(self) -> None:
        """Nothing to release; the file is reopened per batch."""

    def _span_to_dict(self, span: ReadableSpan) -> dict[str, Any]:
        return {
            "traceId": format(span.context.trace_id, "032x"),
            "spanId": format(span.context.span_id, "016x"),
            "parentSpanId": format(span.parent.span_id, "016x") if span.parent else None,
            "name": span.name,
            "startTimeUnixNano": span.start_time,
            "endTimeUnixNano": span.end_time,
            "attributes": dict(span.attributes or {}),
            "status": {"code": span.status.status_code.name if span.status else "UNSET"},
        }
