"""Command-line host for running fixtures."""

from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path
from types import ModuleType

import click
from rich.console import Console

from microunit.config import MicrounitSettings
from microunit.context import RunContext
from microunit.log import setup_logging
from microunit.reports.base import ReportingConfig
from microunit.reports.console import ConsoleReporter, ConsoleSummary
from microunit.testing.models import Fixture
from microunit.testing.runner import FixtureRunner
from microunit.tracing import init_tracing
from microunit.version import __version__


logger = logging.getLogger(__name__)


def _import_module(name: str) -> ModuleType:
    try:
        return importlib.import_module(name)
    except ImportError as exc:
        raise click.BadParameter(f"cannot import module '{name}': {exc}", param_hint="TARGET") from exc


def module_fixtures(module: ModuleType) -> list[Fixture]:
    """Fixtures bound at module level, in definition order, without duplicates."""
    seen: set[int] = set()
    fixtures = []
    for value in vars(module).values():
        if isinstance(value, Fixture) and id(value) not in seen:
            seen.add(id(value))
            fixtures.append(value)
    return fixtures


def resolve_target(target: str) -> list[Fixture]:
    """Resolve ``package.module:fixture`` or ``package.module`` to fixtures."""
    module_name, _, attr = target.partition(":")
    module = _import_module(module_name)
    if not attr:
        fixtures = module_fixtures(module)
        if not fixtures:
            raise click.BadParameter(f"module '{module_name}' defines no fixtures", param_hint="TARGET")
        return fixtures

    fixture = getattr(module, attr, None)
    if not isinstance(fixture, Fixture):
        raise click.BadParameter(f"'{target}' is not a Fixture", param_hint="TARGET")
    return [fixture]


@click.group()
@click.version_option(__version__, prog_name="microunit")
def main() -> None:
    """Run microunit fixtures."""


@main.command()
@click.argument("targets", nargs=-1, required=True)
@click.option("-v", "--verbose", "verbose", count=True, help="List every test.")
@click.option("-q", "--quiet", is_flag=True, help="Only print failures and the summary.")
@click.option(
    "--trace-output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write an OpenTelemetry span per fixture and test to this JSONL file.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Engine log level (default from MICROUNIT_LOG_LEVEL).",
)
def run(
    targets: tuple[str, ...],
    verbose: int,
    quiet: bool,
    trace_output: Path | None,
    log_level: str | None,
) -> None:
    """Run the fixtures named by TARGETS (module or module:fixture)."""
    overrides: dict[str, object] = {}
    if log_level:
        overrides["log_level"] = log_level.upper()
    if trace_output:
        overrides["trace_output"] = trace_output
    if quiet:
        overrides["verbosity"] = -1
    elif verbose:
        overrides["verbosity"] = verbose
    settings = MicrounitSettings(**overrides)

    setup_logging(settings.log_level)

    fixtures = [fixture for target in targets for fixture in resolve_target(target)]

    if settings.trace_output is not None:
        init_tracing(output_path=settings.trace_output)

    console = Console()
    context = RunContext(config=settings.run_config(), reporting=ReportingConfig(ConsoleReporter(console)))
    context.init()
    runner = FixtureRunner(context)
    summary = ConsoleSummary(console, verbosity=settings.verbosity)

    failed = 0
    for fixture in fixtures:
        result = runner.run(fixture)
        summary.on_fixture_complete(result)
        if result.result.is_failure:
            failed += 1

    summary.print_summary()
    if settings.trace_output is not None:
        console.print(f"[dim]Tracing written to {settings.trace_output}[/dim]")
    logger.debug("%d of %d fixtures failed", failed, len(fixtures))
    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
