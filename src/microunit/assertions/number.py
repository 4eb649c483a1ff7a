"""Assertions for integer and floating point values."""

from enum import Enum

from microunit.assertions._base import fail_with


class IntWidth(Enum):
    """Integer widths available to :func:`assert_integer_equal`.

    Each value is ``(bits, signed)``. ``INT``/``INT32`` and
    ``UINT``/``UINT32`` are the same width.
    """

    INT = (32, True)
    INT8 = (8, True)
    INT16 = (16, True)
    INT32 = (32, True)
    INT64 = (64, True)
    UINT = (32, False)
    UINT8 = (8, False)
    UINT16 = (16, False)
    UINT32 = (32, False)
    UINT64 = (64, False)

    @property
    def bits(self) -> int:
        return self.value[0]

    @property
    def signed(self) -> bool:
        return self.value[1]


def narrow_int(value: int, width: IntWidth = IntWidth.INT) -> int:
    """Wrap ``value`` into ``width`` using two's complement.

    Parameters
    ----------
    value : int
        Any integer (floats and bools are converted with ``int``).
    width : IntWidth
        Target width.

    Returns
    -------
    int
        The value as it would be stored in an integer of that width.

    Examples
    --------
    >>> narrow_int(300, IntWidth.UINT8)
    44
    >>> narrow_int(255, IntWidth.INT8)
    -1
    """
    bits, signed = width.value
    narrowed = int(value) & ((1 << bits) - 1)
    if signed and narrowed >= 1 << (bits - 1):
        narrowed -= 1 << bits
    return narrowed


def assert_integer_equal(
    expected: int,
    actual: int,
    message: str | None = None,
    *,
    width: IntWidth = IntWidth.INT,
) -> None:
    """Fail unless both operands are equal once narrowed to ``width``.

    Parameters
    ----------
    expected : int
        Reference value.
    actual : int
        Value produced by the code under test.
    message : str or None
        Optional text appended to the failure message.
    width : IntWidth
        Width both operands are narrowed to before comparing.
    """
    expected_n = narrow_int(expected, width)
    actual_n = narrow_int(actual, width)
    if expected_n == actual_n:
        return
    fail_with(f"Values not equal. Expected [{expected_n}], Actual [{actual_n}]", message)


def assert_float_equal(
    expected: float,
    actual: float,
    epsilon: float,
    message: str | None = None,
) -> None:
    """Fail unless ``abs(expected - actual) < epsilon``.

    The tolerance is always supplied by the caller; a NaN on either side
    never matches.
    """
    if abs(expected - actual) < epsilon:
        return
    fail_with(f"Values not equal. Expected [{expected:f}], Actual [{actual:f}]", message)
