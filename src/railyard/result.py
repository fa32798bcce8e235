"""
Result — the success/failure container at the heart of the railway.

A Result[T] is either Success(value: T) or Failure(error: str). Fallible
steps return a Result instead of raising; once a Failure appears it rides
the failure track untouched through every later transformation.

    ┌───────────┐    ensure     ┌───────────┐      map      ┌──────────┐
    │   parse   │──Success──────│  validate │──Success──────│  enrich  │──→ Result[T]
    │           │               │           │               │          │
    └─────┬─────┘               └─────┬─────┘               └─────┬────┘
          │ Failure                   │ Failure                   │ Failure
          └───────────────────────────┴───────────────────────────┴──→ Result[T]

UnitResult is the flag-only sibling for operations with no meaningful
return value: it carries success/failure and, when failed, the message.

Taps (.on_success / .on_failure) observe the railway and hand back the
very same instance; .map / .then / .flat_map build a new one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, TypeVar

import structlog

from railyard.errors import InvalidOperationError

T = TypeVar("T")
U = TypeVar("U")
A = TypeVar("A")
B = TypeVar("B")
R = TypeVar("R")

log = structlog.get_logger(__name__)


class Result(Generic[T]):
    """
    Railway-Oriented Programming Result.

    Two possible states:
      - Success(value: T) — the happy path
      - Failure(error: str) — the error track

    Usage:
        >>> Result.ok(42).map(lambda x: x * 2).value()
        84

        >>> Result.fail("bad input").map(lambda x: x * 2).is_failure()
        True
    """

    # ──────────────────────── Introspection ────────────────────────

    def is_success(self) -> bool:
        """Check if this Result is a Success."""
        return isinstance(self, Success)

    def is_failure(self) -> bool:
        """Check if this Result is a Failure."""
        return isinstance(self, Failure)

    def value(self) -> T:
        """
        Extract the success value. Raises InvalidOperationError on a Failure.

        Prefer .either() or match/case for safe access.
        """
        match self:
            case Success(v):
                return v
            case Failure(err):
                raise InvalidOperationError(f"Cannot get value from a Failure: {err}")
        raise TypeError("unreachable")  # pragma: no cover

    def error(self) -> str:
        """Extract the failure message. Raises InvalidOperationError on a Success."""
        match self:
            case Failure(err):
                return err
            case Success(v):
                raise InvalidOperationError(f"Cannot get error from a Success: {v!r}")
        raise TypeError("unreachable")  # pragma: no cover

    # ──────────────────────── Transformations ────────────────────────

    def map(self, mapper: Callable[[T], U]) -> Result[U]:
        """
        Transform the success value. Short-circuits on failure.

            Result.ok(5).map(lambda x: x * 2)       # → Success(10)
            Result.fail("bad").map(lambda x: x * 2)  # → Failure('bad')
        """
        match self:
            case Success(v):
                return Success(mapper(v))
            case Failure(err):
                return Failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    def then(self, mapper: Callable[[T], U]) -> Result[U]:
        """
        Same as .map(), named for pipelines that read as a sequence of steps.

            load(order_id).then(price).then(format_invoice)
        """
        return self.map(mapper)

    def flat_map(self, mapper: Callable[[T], Result[U]]) -> Result[U]:
        """
        Chain a Result-returning function. Short-circuits on failure.

            def validate(x: int) -> Result[int]:
                if x > 0:
                    return Result.ok(x)
                return Result.fail("Must be positive")

            Result.ok(5).flat_map(validate)   # → Success(5)
            Result.ok(-1).flat_map(validate)  # → Failure('Must be positive')
        """
        match self:
            case Success(v):
                return mapper(v)
            case Failure(err):
                return Failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    def ensure(self, predicate: Callable[[T], bool], error_message: str) -> Result[T]:
        """
        Validate the success value against a condition.

        An existing failure passes through without calling `predicate`.
        An accepted success passes through as the same instance.

            Result.ok(order).ensure(lambda o: o.total > 0, "Order total must be positive")
        """
        match self:
            case Success(v):
                if predicate(v):
                    return self
                return Failure(error_message)
        return self

    def map_failure(self, mapper: Callable[[str], str]) -> Result[T]:
        """
        Rewrite the failure message. Passes through success unchanged.

            result.map_failure(lambda err: f"Loading settings: {err}")
        """
        match self:
            case Failure(err):
                return Failure(mapper(err))
        return self

    # ──────────────────────── Side Effects ────────────────────────

    def on_success(self, action: Callable[[T], Any]) -> Result[T]:
        """
        Run `action` with the success value; always return this same Result.

            result.on_success(lambda user: log.info("user.created", user_id=user.id))
        """
        match self:
            case Success(v):
                action(v)
        return self

    def on_failure(self, action: Callable[[str], Any]) -> Result[T]:
        """
        Run `action` with the failure message; always return this same Result.

        A failed Result has no value, so the action receives the error message.
        """
        match self:
            case Failure(err):
                action(err)
        return self

    def on_both(self, handler: Callable[[Result[T]], R]) -> R:
        """
        Hand the whole Result to `handler` regardless of its state.

        Usually the last step of a pipeline:

            response = pipeline(cmd).on_both(to_http_response)
        """
        return handler(self)

    # ──────────────────────── Destructuring ────────────────────────

    def either(self, on_success: Callable[[T], R], on_failure: Callable[[str], R]) -> R:
        """
        Apply one of two functions depending on the state.

            result.either(
                on_success=lambda user: f"Hello {user.name}",
                on_failure=lambda err: f"Error: {err}",
            )
        """
        match self:
            case Success(v):
                return on_success(v)
            case Failure(err):
                return on_failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    def get_or_else(self, default: T) -> T:
        """Extract value or return a default on failure."""
        match self:
            case Success(v):
                return v
            case _:
                return default

    def as_unit(self) -> UnitResult:
        """Drop the value and keep only the railway state."""
        match self:
            case Failure(err):
                return UnitResult.fail(err)
        return UnitResult.ok()

    # ──────────────────────── Static Factories ────────────────────────

    @staticmethod
    def ok(value: T) -> Result[T]:
        """Create a successful Result wrapping the given value."""
        return Success(value)

    @staticmethod
    def fail(error_message: str) -> Result[Any]:
        """Create a failed Result carrying the given message."""
        return Failure(error_message)

    @staticmethod
    def from_computation(computation: Callable[[], T], error_message: str) -> Result[T]:
        """
        Run a computation that may raise and capture the outcome as a Result.

        Before:
            try:
                return Result.ok(int(raw))
            except ValueError as e:
                return Result.fail(f"Invalid quantity: {e}")

        After:
            return Result.from_computation(lambda: int(raw), "Invalid quantity")
        """
        try:
            return Success(computation())
        except Exception as e:
            log.debug("result.computation_failed", error=error_message, exc_info=e)
            return Failure(f"{error_message}: {e}")

    @staticmethod
    def combine(ra: Result[A], rb: Result[B], combiner: Callable[[A, B], R]) -> Result[R]:
        """
        Combine two Results. Both must succeed for the combination to succeed.

            order = Result.combine(
                validate_customer(cmd),
                validate_lines(cmd),
                lambda customer, lines: Order(customer, lines),
            )
        """
        return ra.flat_map(lambda a: rb.map(lambda b: combiner(a, b)))

    @staticmethod
    def all_of(results: Iterable[Result[T]]) -> Result[list[T]]:
        """
        Collect Results into a Result of list.
        Returns the first failure encountered, or Success with all values.
        """
        values: list[T] = []
        for r in results:
            match r:
                case Success(v):
                    values.append(v)
                case Failure(err):
                    return Failure(err)
        return Success(values)

    # ──────────────────────── Dunder methods ────────────────────────

    def __bool__(self) -> bool:
        """Allow truthiness check: `if result: ...` succeeds only on Success."""
        return self.is_success()


@dataclass(frozen=True, slots=True)
class Success(Result[T]):
    """The success track — wraps a value of type T."""

    _value: T

    def __repr__(self) -> str:
        return f"Success({self._value!r})"


@dataclass(frozen=True, slots=True)
class Failure(Result[T]):
    """The failure track — wraps the error message."""

    _error: str

    def __post_init__(self) -> None:
        if not isinstance(self._error, str):
            raise TypeError(f"Failure error must be a str, got {type(self._error).__name__}")

    def __repr__(self) -> str:
        return f"Failure({self._error!r})"


@dataclass(frozen=True, slots=True)
class UnitResult:
    """
    Success/failure flag with an error message and no value.

    For operations whose only outcome is "it worked" or "it failed because…":

        def delete_draft(draft_id: str) -> UnitResult:
            if draft_id not in drafts:
                return UnitResult.fail(f"Draft {draft_id} not found")
            del drafts[draft_id]
            return UnitResult.ok()
    """

    _error: str | None = None

    def __post_init__(self) -> None:
        if self._error is not None and not isinstance(self._error, str):
            raise TypeError(f"UnitResult error must be a str, got {type(self._error).__name__}")

    @staticmethod
    def ok() -> UnitResult:
        return _UNIT_OK

    @staticmethod
    def fail(error_message: str) -> UnitResult:
        if error_message is None:
            raise TypeError("UnitResult error must be a str, got NoneType")
        return UnitResult(error_message)

    @staticmethod
    def combine(*results: UnitResult) -> UnitResult:
        """First failure wins; all successes give ok()."""
        for r in results:
            if r.is_failure():
                return r
        return _UNIT_OK

    def is_success(self) -> bool:
        return self._error is None

    def is_failure(self) -> bool:
        return self._error is not None

    def error(self) -> str:
        """Extract the failure message. Raises InvalidOperationError on success."""
        if self._error is None:
            raise InvalidOperationError("Cannot get error from a successful UnitResult")
        return self._error

    def on_success(self, action: Callable[[], Any]) -> UnitResult:
        """Run the zero-argument `action` on success; return this same instance."""
        if self.is_success():
            action()
        return self

    def on_failure(self, action: Callable[[], Any]) -> UnitResult:
        """Run the zero-argument `action` on failure; return this same instance."""
        if self.is_failure():
            action()
        return self

    def on_both(self, handler: Callable[[UnitResult], R]) -> R:
        return handler(self)

    def __bool__(self) -> bool:
        return self.is_success()

    def __repr__(self) -> str:
        if self._error is None:
            return "UnitResult.ok()"
        return f"UnitResult.fail({self._error!r})"


_UNIT_OK = UnitResult()
