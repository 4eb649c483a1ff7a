"""Typed assertions that abort the current test on mismatch."""

from microunit.assertions.basic import assert_true
from microunit.assertions.number import IntWidth, assert_float_equal, assert_integer_equal, narrow_int
from microunit.assertions.obj import assert_not_null, assert_null, assert_pointer_equal
from microunit.assertions.text import assert_string_equal, assert_string_equal_ignore_case
from microunit.testing.outcomes import fail

__all__ = [
    "IntWidth",
    "assert_float_equal",
    "assert_integer_equal",
    "assert_not_null",
    "assert_null",
    "assert_pointer_equal",
    "assert_string_equal",
    "assert_string_equal_ignore_case",
    "assert_true",
    "fail",
    "narrow_int",
]
