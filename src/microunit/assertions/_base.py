"""Shared failure helpers for assertions."""

from typing import NoReturn

from microunit.testing.outcomes import fail


def fail_with(text: str, message: str | None, separator: str = " - ") -> NoReturn:
    """Fail with ``text``, appending the caller's message when given."""
    if message:
        fail(f"{text}{separator}{message}")
    fail(text)
