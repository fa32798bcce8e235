"""
Test assertions for railway containers.

Expressive assert helpers that produce clear failure messages instead of
a bare `assert result.is_success()`.

Usage in tests:
    from railyard import ResultAssertions, MaybeAssertions

    def test_register_user():
        result = register_user(valid_command)
        user = ResultAssertions.assert_success(result)
        assert user.name == "Alice"

    def test_invalid_email():
        result = register_user(bad_command)
        ResultAssertions.assert_failure_message_contains(result, "email")

    def test_lookup_miss():
        MaybeAssertions.assert_nothing(find_user("nobody"))
"""

from __future__ import annotations

from typing import Any, TypeVar

from railyard.maybe import Maybe
from railyard.result import Result, UnitResult

T = TypeVar("T")


def _describe(result: Result[Any] | UnitResult) -> str:
    if result.is_failure():
        return f"Failure({result.error()!r})"
    if isinstance(result, UnitResult):
        return "UnitResult.ok()"
    return f"Success({result.value()!r})"


class ResultAssertions:
    """Expressive test assertions for Result and UnitResult values."""

    @staticmethod
    def assert_success(result: Result[T] | UnitResult, message: str = "") -> T | None:
        """
        Assert the result succeeded and return its value (None for a UnitResult).

            value = ResultAssertions.assert_success(result)
        """
        context = f" — {message}" if message else ""
        assert result.is_success(), f"Expected Success but got {_describe(result)}{context}"
        if isinstance(result, UnitResult):
            return None
        return result.value()

    @staticmethod
    def assert_failure(result: Result[T] | UnitResult, message: str = "") -> str:
        """
        Assert the result failed and return its error message.

            error = ResultAssertions.assert_failure(result)
        """
        context = f" — {message}" if message else ""
        assert result.is_failure(), f"Expected Failure but got {_describe(result)}{context}"
        return result.error()

    @staticmethod
    def assert_failure_message_contains(result: Result[T] | UnitResult, substring: str) -> None:
        """Assert that the failure message contains the given substring (case-insensitive)."""
        error = ResultAssertions.assert_failure(result)
        assert substring.lower() in error.lower(), (
            f"Expected failure message to contain {substring!r} "
            f"but message was: {error!r}"
        )

    @staticmethod
    def assert_failure_message_equals(result: Result[T] | UnitResult, expected_message: str) -> None:
        """Assert that the failure message exactly equals the expected message."""
        error = ResultAssertions.assert_failure(result)
        assert error == expected_message, (
            f"Expected failure message {expected_message!r} but got {error!r}"
        )

    @staticmethod
    def assert_success_value(result: Result[T], expected_value: Any) -> None:
        """Assert the Result is a Success with the specific value."""
        value = ResultAssertions.assert_success(result)
        assert value == expected_value, (
            f"Expected success value {expected_value!r} but got {value!r}"
        )


class MaybeAssertions:
    """Expressive test assertions for Maybe values."""

    @staticmethod
    def assert_some(maybe: Maybe[T], expected_value: Any = None) -> T:
        """
        Assert a value is present and return it.

        When `expected_value` is given, the held value must equal it.
        """
        assert maybe.has_value(), f"Expected Some but got {maybe!r}"
        value = maybe.value()
        if expected_value is not None:
            assert value == expected_value, (
                f"Expected Some({expected_value!r}) but got Some({value!r})"
            )
        return value

    @staticmethod
    def assert_nothing(maybe: Maybe[Any]) -> None:
        """Assert no value is present."""
        assert not maybe.has_value(), f"Expected Nothing() but got {maybe!r}"
