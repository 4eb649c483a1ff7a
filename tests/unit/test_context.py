"""Tests for microunit.context."""

import gc

import pytest

from microunit.config import RunConfig
from microunit.context import (
    MessageBuffer,
    RunContext,
    get_run_context,
    get_user,
    last_message,
    run_context_scope,
    set_user,
)
from microunit.reports import ConsoleReporter, ReportingConfig
from microunit.testing import Fixture, TestEntry


def _noop():
    pass


class TestMessageBuffer:
    def test_starts_empty(self):
        buffer = MessageBuffer(16)
        assert buffer.value == ""
        assert str(buffer) == ""
        assert buffer.capacity == 16

    def test_write_replaces_contents(self):
        buffer = MessageBuffer(16)
        buffer.write("first")
        buffer.write("second")
        assert buffer.value == "second"

    def test_truncates_to_capacity_minus_one(self):
        buffer = MessageBuffer(8)
        assert buffer.write("0123456789") == "0123456"
        assert buffer.value == "0123456"

    def test_rejects_tiny_capacity(self):
        with pytest.raises(ValueError):
            MessageBuffer(1)

    def test_buffer_size_comes_from_config(self):
        ctx = RunContext(config=RunConfig(message_buffer_size=32))
        assert ctx.messages.capacity == 32


class TestRunContext:
    """Tests for RunContext lifecycle."""

    def test_init_zeroes_state_and_restores_default_hooks(self):
        ctx = RunContext()
        ctx.run_count, ctx.pass_count, ctx.fail_count = 3, 2, 1
        ctx.user_state = {"db": 1}
        ctx.messages.write("old")
        ctx.reporting.set_result_handler(None)
        ctx.reporting.set_print_handler(None)

        ctx.init()

        assert (ctx.run_count, ctx.pass_count, ctx.fail_count) == (0, 0, 0)
        assert ctx.user_state is None
        assert ctx.last_message == ""
        assert ctx.current_fixture is None
        assert ctx.current_test is None
        assert ctx.reporting.result_handler == ctx.reporting.default.on_result
        assert ctx.reporting.print_handler == ctx.reporting.default.on_print

    def test_default_reporting_is_console(self):
        assert isinstance(RunContext().reporting.default, ConsoleReporter)

    def test_reset_for_fixture_only_touches_counters(self):
        ctx = RunContext()
        ctx.run_count, ctx.pass_count, ctx.fail_count = 3, 2, 1
        ctx.user_state = "kept"
        ctx.messages.write("kept too")

        ctx.reset_for_fixture()

        assert (ctx.run_count, ctx.pass_count, ctx.fail_count) == (0, 0, 0)
        assert ctx.user_state == "kept"
        assert ctx.last_message == "kept too"

    def test_current_references_are_weak(self):
        ctx = RunContext()
        fixture = Fixture("temporary")
        entry = TestEntry.from_function(_noop)
        ctx.current_fixture = fixture
        ctx.current_test = entry
        assert ctx.current_fixture is fixture
        assert ctx.current_test is entry

        del fixture, entry
        gc.collect()

        assert ctx.current_fixture is None
        assert ctx.current_test is None

    def test_arm_refuses_second_escape_point(self):
        ctx = RunContext()
        entry = TestEntry.from_function(_noop)
        point = ctx.arm(entry)
        with pytest.raises(RuntimeError, match="nested test execution"):
            ctx.arm(entry)
        ctx.disarm(point)
        assert ctx.escape_point is None

    def test_disarm_ignores_stale_point(self):
        ctx = RunContext()
        entry = TestEntry.from_function(_noop)
        first = ctx.arm(entry)
        ctx.disarm(first)
        second = ctx.arm(entry)
        ctx.disarm(first)
        assert ctx.escape_point is second

    def test_custom_reporting_survives_init(self):
        reporter = ConsoleReporter()
        ctx = RunContext(reporting=ReportingConfig(reporter))
        ctx.init()
        assert ctx.reporting.result_handler == reporter.on_result


class TestContextBinding:
    def test_no_context_outside_scope(self):
        assert get_run_context() is None

    def test_scope_binds_and_restores(self):
        ctx = RunContext()
        with run_context_scope(ctx) as bound:
            assert bound is ctx
            assert get_run_context() is ctx
        assert get_run_context() is None

    def test_nested_scopes_restore_outer(self):
        outer, inner = RunContext(), RunContext()
        with run_context_scope(outer):
            with run_context_scope(inner):
                assert get_run_context() is inner
            assert get_run_context() is outer

    def test_user_state_roundtrip(self):
        ctx = RunContext()
        marker = object()
        with run_context_scope(ctx):
            set_user(marker)
            assert get_user() is marker
        assert ctx.user_state is marker

    def test_get_user_outside_context(self):
        assert get_user() is None

    def test_set_user_outside_context_raises(self):
        with pytest.raises(RuntimeError):
            set_user(1)

    def test_last_message(self):
        ctx = RunContext()
        ctx.messages.write("boom")
        assert last_message() == ""
        with run_context_scope(ctx):
            assert last_message() == "boom"
