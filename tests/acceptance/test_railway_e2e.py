"""
Acceptance tests — full railway pipelines built from Maybe, Result and
the combinators, checked for first-failure-wins behaviour.
"""

from __future__ import annotations

from dataclasses import dataclass

from railyard import Maybe, Result, ResultAssertions, UnitResult


class TestNumericPipeline:
    """ensure → map → on_success over an integer."""

    @staticmethod
    def _run(start: Result[int], calls: dict[str, list]) -> Result[int]:
        def positive(x: int) -> bool:
            calls["predicate"].append(x)
            return x > 0

        def double(x: int) -> int:
            calls["double"].append(x)
            return x * 2

        return (
            start.ensure(positive, "must be positive")
            .map(double)
            .on_success(calls["log"].append)
        )

    @staticmethod
    def _calls() -> dict[str, list]:
        return {"predicate": [], "double": [], "log": []}

    def test_success_flows_through_every_step(self) -> None:
        """
        GIVEN Result.ok(5)
        WHEN it is ensured positive, doubled and logged
        THEN the result is Success(10) and 10 is logged exactly once.
        """
        calls = self._calls()
        result = self._run(Result.ok(5), calls)
        ResultAssertions.assert_success_value(result, 10)
        assert calls["log"] == [10]

    def test_failure_skips_every_step(self) -> None:
        """
        GIVEN Result.fail("bad input")
        WHEN the same chain runs
        THEN no callback fires and the original failure comes out.
        """
        calls = self._calls()
        result = self._run(Result.fail("bad input"), calls)
        ResultAssertions.assert_failure_message_equals(result, "bad input")
        assert calls == self._calls()

    def test_rejection_stops_later_steps(self) -> None:
        calls = self._calls()
        result = self._run(Result.ok(-3), calls)
        ResultAssertions.assert_failure_message_equals(result, "must be positive")
        assert calls["predicate"] == [-3]
        assert calls["double"] == []
        assert calls["log"] == []


class TestMaybeToResultPipeline:
    """Maybe → Result → failure tap."""

    def test_present_value_does_not_log(self) -> None:
        logged: list[str] = []
        Maybe.some("x").to_result("missing").as_unit().on_failure(lambda: logged.append("no"))
        assert logged == []

    def test_absent_value_logs_once(self) -> None:
        logged: list[str] = []
        Maybe.nothing().to_result("missing").as_unit().on_failure(lambda: logged.append("no"))
        assert logged == ["no"]

    def test_typed_failure_tap_receives_message(self) -> None:
        logged: list[str] = []
        Maybe.nothing().to_result("missing").on_failure(logged.append)
        assert logged == ["missing"]


@dataclass(frozen=True)
class Account:
    email: str
    balance: int


class TestAccountWithdrawal:
    """A small domain flow mixing lookups, validation and a unit outcome."""

    accounts = {"alice": Account("alice@example.com", 100)}

    def _find(self, name: str) -> Maybe[Account]:
        return Maybe.from_optional(self.accounts.get(name))

    def _withdraw(self, name: str, amount: int) -> UnitResult:
        return (
            self._find(name)
            .to_result(f"No account for {name}")
            .ensure(lambda a: amount > 0, "Amount must be positive")
            .ensure(lambda a: a.balance >= amount, "Insufficient funds")
            .map(lambda a: Account(a.email, a.balance - amount))
            .as_unit()
        )

    def test_successful_withdrawal(self) -> None:
        ResultAssertions.assert_success(self._withdraw("alice", 40))

    def test_unknown_account(self) -> None:
        ResultAssertions.assert_failure_message_equals(
            self._withdraw("bob", 40), "No account for bob"
        )

    def test_insufficient_funds(self) -> None:
        ResultAssertions.assert_failure_message_contains(
            self._withdraw("alice", 500), "insufficient"
        )

    def test_outcome_rendered_with_on_both(self) -> None:
        status = self._withdraw("alice", 0).on_both(
            lambda r: "ok" if r.is_success() else f"rejected: {r.error()}"
        )
        assert status == "rejected: Amount must be positive"
