"""
railyard — Railway-Oriented Programming containers for Python.

Explicit, composable error handling: ordinary failures are data, not
exceptions.

    from railyard import Maybe, Result

    def find_email(user_id: str) -> Maybe[str]: ...

    result = (
        find_email("u-42")
        .to_result("User has no email")
        .ensure(lambda email: "@" in email, "Malformed email")
        .map(str.lower)
        .on_success(send_welcome)
    )
"""

from railyard.assertions import MaybeAssertions, ResultAssertions
from railyard.combinators import (
    ensure,
    map_result,
    on_both,
    on_failure,
    on_success,
    pipe,
    then,
    to_result,
)
from railyard.errors import InvalidOperationError, RailyardError
from railyard.maybe import NOTHING, Maybe, Nothing, Some
from railyard.result import Failure, Result, Success, UnitResult

__all__ = [
    "Maybe",
    "Some",
    "Nothing",
    "NOTHING",
    "Result",
    "Success",
    "Failure",
    "UnitResult",
    "to_result",
    "map_result",
    "then",
    "ensure",
    "on_success",
    "on_failure",
    "on_both",
    "pipe",
    "RailyardError",
    "InvalidOperationError",
    "ResultAssertions",
    "MaybeAssertions",
]

__version__ = "0.1.0"
