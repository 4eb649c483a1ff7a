from microunit.reports.base import PrintHandler, Reporter, ReportingConfig, ResultHandler
from microunit.reports.console import (
    ConsoleReporter,
    ConsoleSummary,
    default_print_handler,
    default_result_handler,
    format_failure_line,
    format_print_line,
)

__all__ = [
    "ConsoleReporter",
    "ConsoleSummary",
    "PrintHandler",
    "Reporter",
    "ReportingConfig",
    "ResultHandler",
    "default_print_handler",
    "default_result_handler",
    "format_failure_line",
    "format_print_line",
]
