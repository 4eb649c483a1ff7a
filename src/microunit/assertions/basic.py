"""Boolean and unconditional assertions."""

from typing import Any

from microunit.testing.outcomes import fail


DEFAULT_EXPRESSION_MESSAGE = "Expression is false"


def assert_true(expr: Any, message: str | None = None) -> None:
    """Fail with ``message`` (or a generic default) when ``expr`` is falsy."""
    if not expr:
        fail(message or DEFAULT_EXPRESSION_MESSAGE)
