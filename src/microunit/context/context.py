from __future__ import annotations

import weakref
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from microunit.config import RunConfig


if TYPE_CHECKING:
    from microunit.reports.base import ReportingConfig
    from microunit.testing.models import Fixture, TestEntry


def _default_reporting() -> ReportingConfig:
    from microunit.reports.base import ReportingConfig  # noqa: PLC0415

    return ReportingConfig()


class MessageBuffer:
    """Fixed-capacity holder for the most recent failure message.

    One slot of ``capacity`` is reserved, so at most ``capacity - 1``
    characters are kept; longer messages are truncated.
    """

    __slots__ = ("_capacity", "_value")

    def __init__(self, capacity: int) -> None:
        if capacity < 2:
            raise ValueError("Message buffer capacity must be at least 2")
        self._capacity = capacity
        self._value = ""

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def value(self) -> str:
        return self._value

    def write(self, message: str) -> str:
        """Replace the contents with ``message``; return what was stored."""
        self._value = message[: self._capacity - 1]
        return self._value

    def clear(self) -> None:
        self._value = ""

    def __str__(self) -> str:
        return self._value


class EscapePoint:
    """Resumption target armed by the test runner for the test in flight.

    A failure raised while the point is armed carries it, which lets the
    runner recognise failures that belong to its own test.
    """

    __slots__ = ("test_name",)

    def __init__(self, test_name: str) -> None:
        self.test_name = test_name

    def __repr__(self) -> str:
        return f"EscapePoint({self.test_name!r})"


@dataclass(eq=False)
class RunContext:
    """Mutable execution state for one run.

    Attributes:
    ----------
    run_count, pass_count, fail_count : int
        Counters for the fixture currently being run.
    user_state : Any
        Opaque value owned by test code; never touched by the engine
        except by ``init``.
    messages : MessageBuffer
        Most recent failure message.
    escape_point : EscapePoint | None
        Set only while a test body is executing.
    reporting : ReportingConfig
        The result and print callback slots.
    """

    config: RunConfig = field(default_factory=RunConfig)
    reporting: ReportingConfig = field(default_factory=_default_reporting)
    run_count: int = 0
    pass_count: int = 0
    fail_count: int = 0
    user_state: Any = None
    escape_point: EscapePoint | None = None
    messages: MessageBuffer = field(init=False)
    _current_fixture: weakref.ref[Fixture] | None = field(default=None, init=False, repr=False)
    _current_test: weakref.ref[TestEntry] | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        self.messages = MessageBuffer(self.config.message_buffer_size)

    def init(self) -> None:
        """Zero all state and install the default reporting hooks."""
        self.reset_for_fixture()
        self.user_state = None
        self.escape_point = None
        self.current_fixture = None
        self.current_test = None
        self.messages.clear()
        self.reporting.reset()

    def reset_for_fixture(self) -> None:
        self.run_count = 0
        self.pass_count = 0
        self.fail_count = 0

    @property
    def current_fixture(self) -> Fixture | None:
        return self._current_fixture() if self._current_fixture is not None else None

    @current_fixture.setter
    def current_fixture(self, fixture: Fixture | None) -> None:
        self._current_fixture = weakref.ref(fixture) if fixture is not None else None

    @property
    def current_test(self) -> TestEntry | None:
        return self._current_test() if self._current_test is not None else None

    @current_test.setter
    def current_test(self, test: TestEntry | None) -> None:
        self._current_test = weakref.ref(test) if test is not None else None

    @property
    def last_message(self) -> str:
        return self.messages.value

    def arm(self, test: TestEntry) -> EscapePoint:
        """Establish a fresh escape point for ``test``.

        Raises
        ------
        RuntimeError
            If another test is already in flight on this context.
        """
        if self.escape_point is not None:
            msg = (
                f"Cannot run '{test.name}' while '{self.escape_point.test_name}' is in flight; "
                "nested test execution is not supported"
            )
            raise RuntimeError(msg)
        self.escape_point = EscapePoint(test.name)
        return self.escape_point

    def disarm(self, point: EscapePoint) -> None:
        if self.escape_point is point:
            self.escape_point = None


RUN_CONTEXT: ContextVar[RunContext | None] = ContextVar("run_context", default=None)


def get_run_context() -> RunContext | None:
    """Get the run context bound to the current execution stream, if any."""
    return RUN_CONTEXT.get()


@contextmanager
def run_context_scope(ctx: RunContext) -> Iterator[RunContext]:
    """Bind ``ctx`` as the current run context for the ``with`` block.

    Parameters
    ----------
    ctx : RunContext
        The context test bodies and assertions will see.
    """
    token = RUN_CONTEXT.set(ctx)
    try:
        yield ctx
    finally:
        RUN_CONTEXT.reset(token)


def get_user() -> Any:
    """Return the user state of the bound run context (``None`` outside a run)."""
    ctx = RUN_CONTEXT.get()
    return ctx.user_state if ctx is not None else None


def set_user(value: Any) -> None:
    """Store ``value`` as the user state of the bound run context.

    Raises
    ------
    RuntimeError
        If no run context is bound.
    """
    ctx = RUN_CONTEXT.get()
    if ctx is None:
        raise RuntimeError("set_user() called outside of a run context")
    ctx.user_state = value


def last_message() -> str:
    """Return the most recent failure message of the bound run context."""
    ctx = RUN_CONTEXT.get()
    return ctx.last_message if ctx is not None else ""
