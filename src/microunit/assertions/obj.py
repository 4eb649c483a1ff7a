"""Assertions on object identity and nullity."""

from typing import Any

from microunit.assertions._base import fail_with


def _address(obj: Any) -> str:
    return f"0x{id(obj):016x}"


def assert_pointer_equal(expected: Any, actual: Any, message: str | None = None) -> None:
    """Fail unless ``expected`` and ``actual`` are the same object."""
    if expected is actual:
        return
    fail_with(
        f"Pointers not equal. Expected [{_address(expected)}], Actual [{_address(actual)}]",
        message,
    )


def assert_null(actual: Any, expect_null: bool = True, message: str | None = None) -> None:
    """Fail unless ``actual is None`` matches ``expect_null``."""
    is_null = actual is None
    if is_null == expect_null:
        return
    if expect_null:
        fail_with("Value non-null. Expected null.", message, " ")
    fail_with("Value null. Expected non-null.", message, " ")


def assert_not_null(actual: Any, message: str | None = None) -> None:
    assert_null(actual, False, message)
