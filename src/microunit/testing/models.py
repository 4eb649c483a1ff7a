"""Test and fixture definitions."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import overload


Hook = Callable[[], None]


class ResultKind(Enum):
    """Verdict of a single test or of a whole fixture."""

    __test__ = False  # Prevent pytest from collecting this as a test class

    SUCCESS = 0
    FAILED = -1

    @property
    def is_failure(self) -> bool:
        """Check if this verdict represents a failure."""
        return self is ResultKind.FAILED


@dataclass(frozen=True, slots=True, weakref_slot=True)
class TestEntry:
    """A named, zero-argument unit of test logic and where it was defined.

    Attributes:
    ----------
    name : str
        Display name used in reports.
    fn : Callable[[], None]
        The test body.
    file : str
        Source file reported for this test.
    line : int
        Source line reported for this test.
    """

    __test__ = False  # Prevent pytest from collecting this as a test class

    name: str
    fn: Hook
    file: str
    line: int

    @classmethod
    def from_function(cls, fn: Hook, name: str | None = None) -> TestEntry:
        """Build an entry whose location is taken from the function's code object."""
        if not callable(fn):
            msg = f"Test function must be callable, got {type(fn).__name__}"
            raise TypeError(msg)
        code = getattr(fn, "__code__", None)
        file = code.co_filename if code else "<unknown>"
        line = code.co_firstlineno if code else 0
        return cls(name=name or getattr(fn, "__name__", repr(fn)), fn=fn, file=file, line=line)


@dataclass(eq=False, weakref_slot=True, slots=True)
class Fixture:
    """A named, ordered group of tests sharing setup and teardown hooks.

    Examples:
        arith = Fixture("arith")

        @arith.test
        def adds():
            assert_integer_equal(4, 2 + 2)

        @arith.test_setup_hook
        def reset():
            set_user({})
    """

    name: str
    fixture_setup: Hook | None = None
    fixture_teardown: Hook | None = None
    test_setup: Hook | None = None
    test_teardown: Hook | None = None
    tests: list[TestEntry] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Fixture name must not be empty")
        for slot in ("fixture_setup", "fixture_teardown", "test_setup", "test_teardown"):
            hook = getattr(self, slot)
            if hook is not None and not callable(hook):
                msg = f"Fixture '{self.name}': {slot} must be callable or None"
                raise TypeError(msg)
        self.tests = [self._coerce(t) for t in self.tests]

    @staticmethod
    def _coerce(test: TestEntry | Hook) -> TestEntry:
        if isinstance(test, TestEntry):
            return test
        return TestEntry.from_function(test)

    def add(self, test: TestEntry | Hook, name: str | None = None) -> TestEntry:
        """Append a test after the ones already declared."""
        if name is not None and not isinstance(test, TestEntry):
            entry = TestEntry.from_function(test, name)
        else:
            entry = self._coerce(test)
        self.tests.append(entry)
        return entry

    @overload
    def test(self, fn: Hook) -> Hook: ...

    @overload
    def test(self, fn: None = None, *, name: str | None = None) -> Callable[[Hook], Hook]: ...

    def test(self, fn: Hook | None = None, *, name: str | None = None) -> Hook | Callable[[Hook], Hook]:
        """Register the decorated function as the fixture's next test.

        Can be used as ``@fixture.test`` or ``@fixture.test(name="...")``.
        The function itself is returned unchanged.
        """

        def decorator(func: Hook) -> Hook:
            self.add(func, name)
            return func

        if fn is not None:
            return decorator(fn)
        return decorator

    def _hook_setter(self, slot: str) -> Callable[[Hook], Hook]:
        def decorator(func: Hook) -> Hook:
            setattr(self, slot, func)
            return func

        return decorator

    @property
    def fixture_setup_hook(self) -> Callable[[Hook], Hook]:
        """Decorator filling the fixture-setup slot."""
        return self._hook_setter("fixture_setup")

    @property
    def fixture_teardown_hook(self) -> Callable[[Hook], Hook]:
        """Decorator filling the fixture-teardown slot."""
        return self._hook_setter("fixture_teardown")

    @property
    def test_setup_hook(self) -> Callable[[Hook], Hook]:
        """Decorator filling the per-test setup slot."""
        return self._hook_setter("test_setup")

    @property
    def test_teardown_hook(self) -> Callable[[Hook], Hook]:
        """Decorator filling the per-test teardown slot."""
        return self._hook_setter("test_teardown")


@dataclass
class TestOutcome:
    """Reported outcome of one test inside a fixture run."""

    __test__ = False  # Prevent pytest from collecting this as a test class

    entry: TestEntry
    result: ResultKind
    message: str | None = None


@dataclass
class FixtureResult:
    """Counters, verdict and ordered outcomes of a fixture run."""

    fixture_name: str
    run_count: int = 0
    pass_count: int = 0
    fail_count: int = 0
    outcomes: list[TestOutcome] = field(default_factory=list)
    setup_message: str | None = None
    teardown_message: str | None = None

    @property
    def result(self) -> ResultKind:
        """Overall verdict: success iff nothing failed."""
        if self.fail_count or self.teardown_message is not None:
            return ResultKind.FAILED
        return ResultKind.SUCCESS
