"""
Function-form combinators.

Each function takes the container as its first argument and delegates to
the container's public contract, so steps can be pre-bound with
functools.partial and run through pipe():

    from functools import partial

    pipe(
        to_result(find_user(user_id), "User not found"),
        partial(ensure, predicate=lambda u: u.active, error_message="User is inactive"),
        partial(map_result, mapper=lambda u: u.email),
        partial(on_success, action=send_welcome),
    )

on_success / on_failure / on_both accept either a Result or a UnitResult;
for a UnitResult the actions take no arguments.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar, overload

from railyard.maybe import Maybe
from railyard.result import Result, UnitResult

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


def to_result(maybe: Maybe[T], error_message: str) -> Result[T]:
    """Some(v) → Success(v); Nothing() → Failure(error_message)."""
    return maybe.to_result(error_message)


def map_result(result: Result[T], mapper: Callable[[T], U]) -> Result[U]:
    """Transform the success value; a failure keeps its message and skips `mapper`."""
    return result.map(mapper)


def then(result: Result[T], mapper: Callable[[T], U]) -> Result[U]:
    """Alias of map_result for step-by-step pipelines."""
    return result.then(mapper)


def ensure(result: Result[T], predicate: Callable[[T], bool], error_message: str) -> Result[T]:
    """Turn a success into Failure(error_message) when `predicate` rejects its value."""
    return result.ensure(predicate, error_message)


@overload
def on_success(result: UnitResult, action: Callable[[], Any]) -> UnitResult: ...
@overload
def on_success(result: Result[T], action: Callable[[T], Any]) -> Result[T]: ...
def on_success(result, action):
    """Tap the success track; returns the same container."""
    return result.on_success(action)


@overload
def on_failure(result: UnitResult, action: Callable[[], Any]) -> UnitResult: ...
@overload
def on_failure(result: Result[T], action: Callable[[str], Any]) -> Result[T]: ...
def on_failure(result, action):
    """Tap the failure track; returns the same container."""
    return result.on_failure(action)


def on_both(result: Result[T] | UnitResult, handler: Callable[[Any], R]) -> R:
    """Hand the container to `handler` whatever its state."""
    return handler(result)


def pipe(result: Any, *steps: Callable[[Any], Any]) -> Any:
    """
    Feed `result` through `steps` left to right.

    pipe(r, f, g) is g(f(r)).
    """
    for step in steps:
        result = step(result)
    return result
