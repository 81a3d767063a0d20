"""A single-pass cursor that calls a function for each position.

The cursor pairs a nullary callable with a counting state. The function
is called lazily: reading the cursor calls it once and caches the result
until the cursor moves, and moving past a position that was never read
still calls it so that each position consumes exactly one result. Two
cursors are equal when they share the function and their states are
equal, so a range is bounded by the state of its end cursor.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from cursorkit.facade import IteratorFacade
from cursorkit.traversal import Traversal

__all__ = ["Infinite", "FunctionInputIterator", "make_function_input_iterator"]

_EMPTY = object()


class Infinite:
    """A state that never compares equal, giving an endless range."""

    __hash__ = object.__hash__

    def __eq__(self, other: object) -> bool:
        return False

    def increment(self) -> "Infinite":
        """Return the next state, which is this same object."""
        return self

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def _next_state(state: Any) -> Any:
    step = getattr(state, "increment", None)
    if callable(step):
        return step()
    return state + 1


class FunctionInputIterator(IteratorFacade):
    """Single-pass cursor over results of *function*, counted by *state*.

    *state* is advanced with ``+ 1``, or through its ``increment()``
    method when it has one; that method returns the next state.
    """

    traversal = Traversal.SINGLE_PASS

    def __init__(self, function: Callable[[], Any], state: Any) -> None:
        if not callable(function):
            raise TypeError(f"{function!r} is not callable")
        self._function = function
        self._state = state
        self._value: Any = _EMPTY

    @property
    def function(self) -> Callable[[], Any]:
        """The callable that produces the values."""
        return self._function

    @property
    def state(self) -> Any:
        """The current counting state."""
        return self._state

    def increment(self) -> None:
        """Move forward, consuming one result of the function."""
        if self._value is not _EMPTY:
            self._value = _EMPTY
        else:
            self._function()
        self._state = _next_state(self._state)

    def dereference(self) -> Any:
        """Return the value at this position, calling the function if needed."""
        if self._value is _EMPTY:
            self._value = self._function()
        return self._value

    def equal(self, other: Any) -> bool:
        """Return True if *other* shares the function and has an equal state."""
        return (
            isinstance(other, FunctionInputIterator)
            and self._function is other._function
            and bool(self._state == other._state)
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(state={self._state!r})"


def make_function_input_iterator(
    function: Callable[[], Any], state: Any
) -> FunctionInputIterator:
    """Return a cursor over results of *function* starting at *state*."""
    return FunctionInputIterator(function, state)