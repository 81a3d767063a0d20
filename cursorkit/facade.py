"""A base class that turns a small core interface into a full cursor.

A cursor subclass supplies a handful of core operations and declares its
traversal category. :class:`IteratorFacade` then provides comparison,
arithmetic, subscript and postfix operations on top of them. Operations
beyond the declared category raise :class:`TypeError`.

The core operations are:

* ``dereference()``: the value at the current position (required)
* ``increment()``: move one step forward (required)
* ``equal(other)``: position equality (required)
* ``decrement()``: move one step back (bidirectional and stronger)
* ``advance(n)``: move by *n* steps (random access)
* ``distance_to(other)``: signed steps from here to *other* (random access)

A writable cursor also defines ``assign(value)``.
"""

from __future__ import annotations

import abc
import copy as _copy
import operator
from collections.abc import Iterator
from typing import Any

from cursorkit.proxies import (
    BracketsProxy,
    PostfixIncrementProxy,
    WritablePostfixIncrementProxy,
)
from cursorkit.traversal import Traversal

__all__ = ["IteratorFacade", "SequenceCursor", "iterate"]


class IteratorFacade(abc.ABC):
    """Base class for cursors built from a small core interface.

    Subclasses set the ``traversal`` attribute (forward by default) and
    implement the core operations their traversal needs.
    """

    traversal: Traversal = Traversal.FORWARD

    __hash__ = None  # type: ignore[assignment]

    # -- core interface -------------------------------------------------

    @abc.abstractmethod
    def dereference(self) -> Any:
        """Return the value at the current position."""

    @abc.abstractmethod
    def increment(self) -> None:
        """Move one position forward."""

    @abc.abstractmethod
    def equal(self, other: Any) -> bool:
        """Return True if *other* refers to the same position."""

    def decrement(self) -> None:
        """Move one position back (bidirectional cursors)."""
        raise TypeError(f"{type(self).__name__} cannot be decremented")

    def advance(self, n: int) -> None:
        """Move by *n* positions (random-access cursors)."""
        raise TypeError(f"{type(self).__name__} cannot be advanced")

    def distance_to(self, other: Any) -> int:
        """Return the signed number of steps to *other* (random access)."""
        raise TypeError(
            f"{type(self).__name__} cannot measure distance in constant time"
        )

    # -- helpers --------------------------------------------------------

    def _require(self, needed: Traversal, what: str) -> None:
        if not self.traversal.at_least(needed):
            raise TypeError(
                f"{what} requires {needed.name.lower()} traversal; "
                f"{type(self).__name__} is {self.traversal.name.lower()}"
            )

    def _difference(self, other: "IteratorFacade") -> int:
        """Return ``self - other`` for interoperable random-access cursors."""
        self._require(Traversal.RANDOM_ACCESS, "difference")
        other._require(Traversal.RANDOM_ACCESS, "difference")
        if isinstance(other, type(self)):
            return -self.distance_to(other)
        if isinstance(self, type(other)):
            return other.distance_to(self)
        raise TypeError(
            f"{type(self).__name__} and {type(other).__name__} "
            "are not interoperable"
        )

    def copy(self) -> "IteratorFacade":
        """Return an independent cursor at the same position."""
        return _copy.copy(self)

    # -- postfix operations ---------------------------------------------

    def post_increment(self) -> Any:
        """Advance this cursor and return what refers to the old position.

        Multi-pass cursors return a copy of themselves at the old position.
        Single-pass cursors return a proxy that captured the old value, and
        that can also write to the old position if the cursor is writable.
        """
        old = self.copy()
        result: Any
        if self.traversal.is_multipass:
            result = old
        elif callable(getattr(self, "assign", None)):
            result = WritablePostfixIncrementProxy(old)
        else:
            result = PostfixIncrementProxy(old)
        self.increment()
        return result

    def post_decrement(self) -> "IteratorFacade":
        """Move this cursor back and return a copy at the old position."""
        self._require(Traversal.BIDIRECTIONAL, "decrement")
        old = self.copy()
        self.decrement()
        return old

    # -- comparisons ----------------------------------------------------

    def __eq__(self, other: object) -> Any:
        if not isinstance(other, IteratorFacade):
            return NotImplemented
        if isinstance(other, type(self)):
            return bool(self.equal(other))
        if isinstance(self, type(other)):
            return bool(other.equal(self))
        return NotImplemented

    def __ne__(self, other: object) -> Any:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other: object) -> Any:
        if not isinstance(other, IteratorFacade):
            return NotImplemented
        return self._difference(other) < 0

    def __le__(self, other: object) -> Any:
        if not isinstance(other, IteratorFacade):
            return NotImplemented
        return self._difference(other) <= 0

    def __gt__(self, other: object) -> Any:
        if not isinstance(other, IteratorFacade):
            return NotImplemented
        return self._difference(other) > 0

    def __ge__(self, other: object) -> Any:
        if not isinstance(other, IteratorFacade):
            return NotImplemented
        return self._difference(other) >= 0

    # -- arithmetic -----------------------------------------------------

    def __add__(self, n: object) -> Any:
        if not isinstance(n, int):
            return NotImplemented
        self._require(Traversal.RANDOM_ACCESS, "addition")
        result = self.copy()
        result.advance(n)
        return result

    def __radd__(self, n: object) -> Any:
        return self.__add__(n)

    def __sub__(self, other: object) -> Any:
        if isinstance(other, int):
            self._require(Traversal.RANDOM_ACCESS, "subtraction")
            result = self.copy()
            result.advance(-other)
            return result
        if isinstance(other, IteratorFacade):
            return self._difference(other)
        return NotImplemented

    def __iadd__(self, n: int) -> "IteratorFacade":
        self._require(Traversal.RANDOM_ACCESS, "addition")
        self.advance(operator.index(n))
        return self

    def __isub__(self, n: int) -> "IteratorFacade":
        self._require(Traversal.RANDOM_ACCESS, "subtraction")
        self.advance(-operator.index(n))
        return self

    # -- subscript ------------------------------------------------------

    def __getitem__(self, n: int) -> Any:
        self._require(Traversal.RANDOM_ACCESS, "subscript")
        return BracketsProxy(self + operator.index(n)).get()

    def __setitem__(self, n: int, value: Any) -> None:
        self._require(Traversal.RANDOM_ACCESS, "subscript")
        BracketsProxy(self + operator.index(n)).set(value)


class SequenceCursor(IteratorFacade):
    """Writable random-access cursor over a position in a sequence.

    The position may equal ``len(sequence)``, which is the end position;
    reading or writing there raises :class:`IndexError`.
    """

    traversal = Traversal.RANDOM_ACCESS

    def __init__(self, sequence: Any, index: int = 0) -> None:
        self._sequence = sequence
        self._index = operator.index(index)

    @property
    def sequence(self) -> Any:
        """The sequence this cursor walks."""
        return self._sequence

    @property
    def index(self) -> int:
        """The current position."""
        return self._index

    def _check_position(self) -> None:
        if not 0 <= self._index < len(self._sequence):
            raise IndexError(
                f"cursor position {self._index} is outside the sequence"
            )

    def dereference(self) -> Any:
        """Return the element at the current position."""
        self._check_position()
        return self._sequence[self._index]

    def assign(self, value: Any) -> None:
        """Replace the element at the current position."""
        self._check_position()
        self._sequence[self._index] = value

    def increment(self) -> None:
        """Move one position forward."""
        self._index += 1

    def decrement(self) -> None:
        """Move one position back."""
        self._index -= 1

    def advance(self, n: int) -> None:
        """Move by *n* positions."""
        self._index += operator.index(n)

    def equal(self, other: Any) -> bool:
        """Return True if *other* is at the same position of the same sequence."""
        return (
            isinstance(other, SequenceCursor)
            and self._sequence is other._sequence
            and self._index == other._index
        )

    def distance_to(self, other: Any) -> int:
        """Return the signed number of steps to *other*."""
        if not isinstance(other, SequenceCursor) or (
            self._sequence is not other._sequence
        ):
            raise ValueError("cursors refer to different sequences")
        return other._index - self._index

    def __repr__(self) -> str:
        return f"{type(self).__name__}(index={self._index})"


def iterate(first: IteratorFacade, last: IteratorFacade) -> Iterator[Any]:
    """Yield the values from *first* up to, not including, *last*.

    *first* itself is not moved; a copy of it walks the range.
    """
    cursor = first.copy()
    while cursor != last:
        yield cursor.dereference()
        cursor.increment()