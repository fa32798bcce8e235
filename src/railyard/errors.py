"""
Contract-violation errors.

Ordinary failures travel as data on the failure track (Failure, a failed
UnitResult, Nothing). The exceptions here signal misuse of the container API
itself: reading a value that is not there, reading an error from a success,
or building a present Maybe around None. They are never meant to be caught
by business logic.
"""

from __future__ import annotations


class RailyardError(Exception):
    """Base class for every exception raised by railyard."""


class InvalidOperationError(RailyardError, ValueError):
    """
    An operation was attempted that the container's current state forbids.

    Subclasses ValueError so callers that already guard value extraction
    with `except ValueError` keep working.
    """
