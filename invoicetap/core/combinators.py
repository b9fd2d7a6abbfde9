"""Value-threading helpers for single-expression call chains.

Two ways of running a function in the middle of a chain:

- tap(value, fn): run fn for its side effect, keep value
- pipe(value, fn): replace value with whatever fn returns

A block handed to pipe() has to return the value it was given if the
chain should carry on with it. tap() does not depend on that.
"""

from collections.abc import Callable
from typing import Any, TypeVar

T = TypeVar("T")
R = TypeVar("R")


def tap(value: T, side_effect: Callable[[T], Any]) -> T:
    """Call side_effect(value) and return value itself.

    The return value of side_effect is discarded.
    """
    side_effect(value)
    return value


def pipe(value: T, fn: Callable[[T], R]) -> R:
    """Return fn(value)."""
    return fn(value)


__all__ = ["pipe", "tap"]
