"""
Unit tests for UnitResult — the flag-only success/failure container.
"""

from __future__ import annotations

import pytest

from railyard import InvalidOperationError, Result, UnitResult


class TestCreation:
    def test_ok(self):
        result = UnitResult.ok()
        assert result.is_success()
        assert not result.is_failure()
        assert result

    def test_fail(self):
        result = UnitResult.fail("disk full")
        assert result.is_failure()
        assert not result.is_success()
        assert result.error() == "disk full"
        assert not result

    def test_fail_rejects_none(self):
        with pytest.raises(TypeError):
            UnitResult.fail(None)  # type: ignore[arg-type]

    def test_error_on_success_raises(self):
        with pytest.raises(InvalidOperationError):
            UnitResult.ok().error()


class TestTaps:
    def test_on_success_runs_zero_arg_action(self, recorder):
        result = UnitResult.ok()
        assert result.on_success(recorder) is result
        assert recorder.calls == [()]

    def test_on_success_skipped_on_failure(self, recorder):
        UnitResult.fail("x").on_success(recorder)
        assert recorder.call_count == 0

    def test_on_failure_runs_zero_arg_action(self, recorder):
        result = UnitResult.fail("x")
        assert result.on_failure(recorder) is result
        assert recorder.calls == [()]

    def test_on_failure_skipped_on_success(self, recorder):
        UnitResult.ok().on_failure(recorder)
        assert recorder.call_count == 0

    def test_on_both(self):
        assert UnitResult.fail("x").on_both(lambda r: r.error()) == "x"
        assert UnitResult.ok().on_both(lambda r: r.is_success()) is True


class TestCombine:
    def test_all_ok(self):
        assert UnitResult.combine(UnitResult.ok(), UnitResult.ok()) == UnitResult.ok()

    def test_first_failure_wins(self):
        combined = UnitResult.combine(UnitResult.ok(), UnitResult.fail("a"), UnitResult.fail("b"))
        assert combined.error() == "a"

    def test_no_results_is_ok(self):
        assert UnitResult.combine().is_success()


class TestEqualityAndRepr:
    def test_equality(self):
        assert UnitResult.ok() == UnitResult.ok()
        assert UnitResult.fail("a") == UnitResult.fail("a")
        assert UnitResult.fail("a") != UnitResult.fail("b")
        assert UnitResult.ok() != UnitResult.fail("a")

    def test_never_equal_to_result(self):
        assert UnitResult.fail("a") != Result.fail("a")

    def test_repr(self):
        assert repr(UnitResult.ok()) == "UnitResult.ok()"
        assert repr(UnitResult.fail("a")) == "UnitResult.fail('a')"
