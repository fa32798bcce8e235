"""
Maybe — an explicit "value present / value absent" container.

A Maybe[T] is either Some(value: T) or Nothing(). It replaces None as a
sentinel: absence is a state you have to handle, not a value that slips
through unnoticed.

    Maybe.some(user)                       # → Some(user)
        .map(lambda u: u.email)            # → Some("alice@example.com")
        .flat_map(find_account_by_email)   # → Some(account) or Nothing()
        .to_result("No account for user")  # → Result[Account]

Some(None) is rejected at construction: a present Maybe always holds
exactly one real value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from railyard.errors import InvalidOperationError
from railyard.result import Result

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


class Maybe(Generic[T]):
    """
    Optional value container.

    Two possible states:
      - Some(value: T) — a value is present
      - Nothing()      — no value

    Usage:
        >>> Maybe.some(21).map(lambda x: x * 2).value()
        42

        >>> Maybe.nothing().map(lambda x: x * 2).has_value()
        False
    """

    # ──────────────────────── Static Factories ────────────────────────

    @staticmethod
    def some(value: T) -> Maybe[T]:
        """Create a present Maybe. Raises InvalidOperationError for None."""
        return Some(value)

    @staticmethod
    def nothing() -> Maybe[Any]:
        """Return the absent Maybe."""
        return NOTHING

    @staticmethod
    def from_optional(value: Optional[T]) -> Maybe[T]:
        """
        Lift a nullable value: None becomes Nothing(), anything else Some(value).

        Use this at boundaries where None is a legitimate "not found" answer;
        use Maybe.some() where None would be a bug.
        """
        if value is None:
            return NOTHING
        return Some(value)

    # ──────────────────────── Introspection ────────────────────────

    def has_value(self) -> bool:
        """Check if a value is present."""
        return isinstance(self, Some)

    def value(self) -> T:
        """
        Extract the held value. Raises InvalidOperationError if absent.

        Prefer .match(), .value_or_default() or match/case for safe access.
        """
        match self:
            case Some(v):
                return v
        raise InvalidOperationError("Maybe does not have a value")

    def value_or_default(self, default: T) -> T:
        """Extract the held value or return `default` when absent."""
        match self:
            case Some(v):
                return v
            case _:
                return default

    def value_or_throw(self, error: BaseException) -> T:
        """
        Extract the held value or raise the caller-supplied exception.

            user = find_user(user_id).value_or_throw(UserNotFound(user_id))
        """
        match self:
            case Some(v):
                return v
        raise error

    def to_optional(self) -> Optional[T]:
        """Convert back to a plain nullable value."""
        return self.value_or_default(None)  # type: ignore[arg-type]

    def contains(self, candidate: object) -> bool:
        """
        Compare against a bare value.

        Nothing() never contains anything; Some(v) contains `candidate`
        iff v == candidate.
        """
        match self:
            case Some(v):
                return v == candidate
            case _:
                return False

    # ──────────────────────── Consumption ────────────────────────

    def match(self, on_some: Callable[[T], R], on_none: Callable[[], R]) -> R:
        """
        Invoke exactly one of the two callbacks and return its result.

        Works for side effects too; the callbacks then simply return None.

            label = maybe_user.match(
                on_some=lambda user: user.name,
                on_none=lambda: "anonymous",
            )
        """
        match self:
            case Some(v):
                return on_some(v)
            case _:
                return on_none()

    def if_some(self, action: Callable[[T], Any]) -> None:
        """Run `action` with the held value when present; do nothing otherwise."""
        match self:
            case Some(v):
                action(v)

    # ──────────────────────── Transformations ────────────────────────

    def map(self, mapper: Callable[[T], Any]) -> Maybe[Any]:
        """
        Transform the held value. Absence propagates without calling `mapper`.

        When `mapper` returns a Maybe it is forwarded as is, so a chain of
        "might produce a value" steps short-circuits at the first absence:

            Maybe.some(2).map(lambda x: x + 1)               # → Some(3)
            Maybe.some(2).map(lambda x: Maybe.nothing())     # → Nothing()
            Maybe.nothing().map(lambda x: x + 1)             # → Nothing()

        A mapper returning None raises InvalidOperationError.
        """
        match self:
            case Some(v):
                mapped = mapper(v)
                if isinstance(mapped, Maybe):
                    return mapped
                return Some(mapped)
            case _:
                return NOTHING

    def flat_map(self, mapper: Callable[[T], Maybe[U]]) -> Maybe[U]:
        """Chain a Maybe-returning function. Short-circuits on absence."""
        match self:
            case Some(v):
                return mapper(v)
            case _:
                return NOTHING

    def filter(self, predicate: Callable[[T], bool]) -> Maybe[T]:
        """Keep the value only if `predicate` accepts it."""
        match self:
            case Some(v) if predicate(v):
                return self
            case _:
                return NOTHING

    # ──────────────────────── Conversion ────────────────────────

    def to_result(self, error_message: str) -> Result[T]:
        """
        Move onto the Result railway.

        Some(v) → Success(v); Nothing() → Failure(error_message).
        """
        match self:
            case Some(v):
                return Result.ok(v)
            case _:
                return Result.fail(error_message)

    # ──────────────────────── Dunder methods ────────────────────────

    def __bool__(self) -> bool:
        """Truthiness mirrors has_value()."""
        return self.has_value()


@dataclass(frozen=True, slots=True)
class Some(Maybe[T]):
    """The present state — wraps exactly one non-None value."""

    _value: T

    def __post_init__(self) -> None:
        if self._value is None:
            raise InvalidOperationError("Cannot create Some from None; use Maybe.nothing()")

    def __repr__(self) -> str:
        return f"Some({self._value!r})"


@dataclass(frozen=True, slots=True)
class Nothing(Maybe[Any]):
    """The absent state."""

    def __repr__(self) -> str:
        return "Nothing()"


NOTHING: Maybe[Any] = Nothing()
