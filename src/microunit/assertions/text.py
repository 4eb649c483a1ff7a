"""Assertions for strings."""

from microunit.assertions._base import fail_with


Text = str | bytes | None


def _display(value: Text) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="backslashreplace")
    return str(value)


def _fold(value: str | bytes) -> str | bytes:
    # bytes.lower() only touches ASCII letters
    if isinstance(value, bytes):
        return value.lower()
    return value.casefold()


def _strings_match(expected: Text, actual: Text, ignore_case: bool) -> bool:
    if expected is None or actual is None:
        return expected is actual
    if isinstance(expected, bytes) != isinstance(actual, bytes):
        return False
    if ignore_case:
        return _fold(expected) == _fold(actual)
    return expected == actual


def assert_string_equal(
    expected: Text,
    actual: Text,
    message: str | None = None,
    ignore_case: bool = False,
) -> None:
    """Fail unless the strings are equal.

    Parameters
    ----------
    expected : str | bytes | None
        Reference string.
    actual : str | bytes | None
        String produced by the code under test.
    message : str or None
        Optional text appended to the failure message.
    ignore_case : bool
        Compare using locale-independent case folding.
    """
    if _strings_match(expected, actual, ignore_case):
        return
    fail_with(
        f"Strings not equal. Expected [{_display(expected)}], Actual [{_display(actual)}]",
        message,
    )


def assert_string_equal_ignore_case(expected: Text, actual: Text, message: str | None = None) -> None:
    assert_string_equal(expected, actual, message, ignore_case=True)
