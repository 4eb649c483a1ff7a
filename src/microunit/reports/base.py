"""Reporting hook slots and the observer interface behind them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Protocol


if TYPE_CHECKING:
    from microunit.testing.models import Fixture, ResultKind, TestEntry


class ResultHandler(Protocol):
    """Called once per completed test by the fixture runner."""

    def __call__(
        self, fixture: Fixture, test: TestEntry, result: ResultKind, message: str | None
    ) -> None: ...


class PrintHandler(Protocol):
    """Called for explicit diagnostics emitted from a test."""

    def __call__(self, test: TestEntry | None, message: str) -> None: ...


class Reporter(ABC):
    """Observer receiving test results and diagnostic prints."""

    @abstractmethod
    def on_result(
        self, fixture: Fixture, test: TestEntry, result: ResultKind, message: str | None
    ) -> None:
        """Handle the outcome of one test."""

    @abstractmethod
    def on_print(self, test: TestEntry | None, message: str) -> None:
        """Handle a diagnostic message."""


class ReportingConfig:
    """The pair of replaceable reporting callbacks.

    Each slot can be replaced at any time and reset independently to the
    default reporter's method. A slot set to ``None`` is silent.

    Parameters
    ----------
    default : Reporter | None
        Reporter whose methods are the defaults; a console reporter on stdout
        when omitted.
    """

    def __init__(self, default: Reporter | None = None) -> None:
        if default is None:
            from microunit.reports.console import ConsoleReporter  # noqa: PLC0415

            default = ConsoleReporter()
        self.default = default
        self.result_handler: ResultHandler | None = default.on_result
        self.print_handler: PrintHandler | None = default.on_print

    def set_result_handler(self, handler: ResultHandler | None) -> None:
        self.result_handler = handler

    def set_print_handler(self, handler: PrintHandler | None) -> None:
        self.print_handler = handler

    def reset_result_handler(self) -> None:
        self.result_handler = self.default.on_result

    def reset_print_handler(self) -> None:
        self.print_handler = self.default.on_print

    def reset(self) -> None:
        """Restore both slots to the defaults."""
        self.reset_result_handler()
        self.reset_print_handler()

    def use(self, reporter: Reporter) -> None:
        """Route both slots to ``reporter``."""
        self.result_handler = reporter.on_result
        self.print_handler = reporter.on_print

    def report_result(
        self, fixture: Fixture, test: TestEntry, result: ResultKind, message: str | None
    ) -> None:
        if self.result_handler is not None:
            self.result_handler(fixture, test, result, message)

    def report_print(self, test: TestEntry | None, message: str) -> None:
        if self.print_handler is not None:
            self.print_handler(test, message)
