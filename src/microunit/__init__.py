"""microunit - a minimal unit-testing runtime with fixtures and typed assertions."""

from .assertions import (
    IntWidth,
    assert_float_equal,
    assert_integer_equal,
    assert_not_null,
    assert_null,
    assert_pointer_equal,
    assert_string_equal,
    assert_string_equal_ignore_case,
    assert_true,
)
from .config import RunConfig
from .context import RunContext, get_user, last_message, set_user
from .reports import ConsoleReporter, Reporter, ReportingConfig
from .testing import (
    Fixture,
    FixtureResult,
    FixtureRunner,
    ResultKind,
    TestEntry,
    TestFailure,
    fail,
    print_message,
    run_fixture,
    run_test,
)
from .version import __version__


__all__ = [
    # Registration
    "Fixture",
    "TestEntry",
    # Execution
    "FixtureResult",
    "FixtureRunner",
    "ResultKind",
    "RunConfig",
    "RunContext",
    "run_fixture",
    "run_test",
    # Fail protocol
    "TestFailure",
    "fail",
    "last_message",
    "print_message",
    # User state
    "get_user",
    "set_user",
    # Assertions
    "IntWidth",
    "assert_float_equal",
    "assert_integer_equal",
    "assert_not_null",
    "assert_null",
    "assert_pointer_equal",
    "assert_string_equal",
    "assert_string_equal_ignore_case",
    "assert_true",
    # Reporting
    "ConsoleReporter",
    "Reporter",
    "ReportingConfig",
]
