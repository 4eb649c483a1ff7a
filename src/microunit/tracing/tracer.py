"""Spans around fixture and test execution."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING

from opentelemetry.trace import Span, StatusCode

from microunit.tracing.lifecycle import get_tracer


if TYPE_CHECKING:
    from microunit.testing.models import Fixture, ResultKind, TestEntry


@dataclass
class RunTracer:
    """Handles optional tracing spans for a fixture run."""

    enabled: bool = False

    @contextmanager
    def fixture_span(self, fixture: Fixture) -> Iterator[Span | None]:
        if not self.enabled:
            yield None
            return
        with get_tracer().start_as_current_span(f"fixture.{fixture.name}") as span:
            span.set_attribute("fixture.name", fixture.name)
            span.set_attribute("fixture.test_count", len(fixture.tests))
            yield span

    @contextmanager
    def test_span(self, fixture: Fixture, test: TestEntry) -> Iterator[Span | None]:
        if not self.enabled:
            yield None
            return
        with get_tracer().start_as_current_span(f"test.{fixture.name}.{test.name}") as span:
            span.set_attribute("test.name", test.name)
            span.set_attribute("test.file", test.file)
            span.set_attribute("test.line", test.line)
            yield span

    def record(self, span: Span | None, result: ResultKind, message: str | None = None) -> None:
        """Record the verdict on ``span``."""
        if span is None:
            return
        span.set_attribute("test.result", result.name.lower())
        if result.is_failure:
            span.set_status(StatusCode.ERROR, message or "")
