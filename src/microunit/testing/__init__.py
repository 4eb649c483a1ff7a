"""Test and fixture execution engine.

Runs registered tests one at a time, converting failure aborts into
verdicts and driving fixture-level and per-test hooks.
"""

from .models import Fixture, FixtureResult, ResultKind, TestEntry, TestOutcome
from .outcomes import TestFailure, fail, print_message
from .runner import FixtureRunner, run_fixture, run_test


__all__ = [
    "Fixture",
    "FixtureResult",
    "FixtureRunner",
    "ResultKind",
    "TestEntry",
    "TestFailure",
    "TestOutcome",
    "fail",
    "print_message",
    "run_fixture",
    "run_test",
]
