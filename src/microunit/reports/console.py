"""Console output for test results using Rich."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

from microunit.reports.base import Reporter
from microunit.testing.models import ResultKind


if TYPE_CHECKING:
    from microunit.testing.models import Fixture, FixtureResult, TestEntry


def format_failure_line(test: TestEntry, message: str | None) -> str:
    """Render ``<file>(<line>): Test failed: '<name>': <message>``."""
    return f"{test.file}({test.line}): Test failed: '{test.name}': {message or ''}"


def format_print_line(test: TestEntry | None, message: str) -> str:
    """Render ``<file>(<line>): '<name>': <message>``."""
    if test is None:
        return message
    return f"{test.file}({test.line}): '{test.name}': {message}"


class ConsoleReporter(Reporter):
    """Default reporter: one plain line per failure and per diagnostic print.

    Lines are written straight to the console's stream, bypassing rich
    rendering, so tabs and control characters in messages survive. Without
    an explicit console, output follows ``sys.stdout`` at write time.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(highlight=False)

    def on_result(
        self, fixture: Fixture, test: TestEntry, result: ResultKind, message: str | None
    ) -> None:
        if result is ResultKind.FAILED:
            self._write(format_failure_line(test, message))

    def on_print(self, test: TestEntry | None, message: str) -> None:
        self._write(format_print_line(test, message))

    def _write(self, line: str) -> None:
        stream = self.console.file
        stream.write(line + "\n")
        stream.flush()


_DEFAULT_REPORTER = ConsoleReporter()


def default_result_handler(
    fixture: Fixture, test: TestEntry, result: ResultKind, message: str | None
) -> None:
    """Write failures to stdout in the standard line format."""
    _DEFAULT_REPORTER.on_result(fixture, test, result, message)


def default_print_handler(test: TestEntry | None, message: str) -> None:
    """Write a diagnostic to stdout in the standard line format."""
    _DEFAULT_REPORTER.on_print(test, message)


_STATUS_CONFIG: dict[ResultKind, tuple[str, str, str]] = {
    ResultKind.SUCCESS: ("✓", "green", "PASSED"),
    ResultKind.FAILED: ("✗", "red", "FAILED"),
}


class ConsoleSummary:
    """Rich-formatted per-fixture and overall summaries for the command line."""

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        self.console = console or Console()
        self.verbosity = verbosity
        self._fixtures: list[FixtureResult] = []

    def _print_section_header(self, title: str) -> None:
        width = self.console.width
        header_title = f" {title} "
        fill = max(width - len(header_title), 0)
        left = fill // 2
        right = fill - left
        self.console.print("=" * left + header_title + "=" * right)

    def on_fixture_complete(self, result: FixtureResult) -> None:
        self._fixtures.append(result)
        if self.verbosity < 0:
            return

        symbol, color, label = _STATUS_CONFIG[result.result]
        self.console.print(
            f"[{color}]{symbol}[/{color}] {escape(result.fixture_name)} "
            f"[dim]({result.pass_count}/{result.run_count} passed)[/dim] [{color}]{label}[/{color}]"
        )
        if self.verbosity > 0:
            for outcome in result.outcomes:
                o_symbol, o_color, _ = _STATUS_CONFIG[outcome.result]
                self.console.print(
                    f"    [{o_color}]{o_symbol}[/{o_color}] {escape(outcome.entry.name)}",
                    highlight=False,
                )
        if result.teardown_message is not None:
            self.console.print(
                f"    [yellow]fixture teardown failed:[/yellow] {escape(result.teardown_message)}",
                highlight=False,
            )

    def print_summary(self) -> None:
        run = sum(f.run_count for f in self._fixtures)
        passed = sum(f.pass_count for f in self._fixtures)
        failed = sum(f.fail_count for f in self._fixtures)

        parts = []
        if passed:
            parts.append(f"[green]{passed} passed[/green]")
        if failed:
            parts.append(f"[red]{failed} failed[/red]")
        summary = ", ".join(parts) if parts else "[dim]0 tests[/dim]"

        self.console.print()
        self._print_section_header("SUMMARY")
        self.console.print(
            f"[bold]{summary} of {run} in {len(self._fixtures)} fixture(s)[/bold]", justify="center"
        )
        self.console.print("=" * self.console.width)
