"""A cursor that wraps another cursor and forwards to it by default.

:class:`IteratorAdaptor` stores its own copy of a base cursor. Every core
operation is passed on to that copy, so a subclass only overrides the
operations it wants to change. A typical example is ``dereference()`` to
transform values, or ``increment()`` to skip some positions.
"""

from __future__ import annotations

import copy as _copy
from typing import Any

from cursorkit.facade import IteratorFacade
from cursorkit.traits import traversal_of
from cursorkit.traversal import Traversal

__all__ = ["IteratorAdaptor", "is_convertible"]


def is_convertible(source: Any, target: Any) -> bool:
    """Return True if *source* can stand in wherever *target* is expected.

    Two traversal categories are convertible when *source* provides at
    least what *target* requires. Two classes are convertible when
    *source* is a subclass of *target*. A traversal and a class are never
    convertible to each other.
    """
    if isinstance(source, Traversal) and isinstance(target, Traversal):
        return source.at_least(target)
    if isinstance(source, type) and isinstance(target, type):
        return issubclass(source, target)
    for arg in (source, target):
        if not isinstance(arg, (Traversal, type)):
            raise TypeError(
                f"expected a class or a Traversal, got {type(arg).__name__}"
            )
    return False


class IteratorAdaptor(IteratorFacade):
    """Cursor that forwards its core operations to a wrapped base cursor.

    The traversal defaults to that of *base*; a weaker one may be given to
    restrict what the adaptor allows. Operations the declared traversal
    does not cover raise :class:`TypeError`.
    """

    def __init__(self, base: Any, traversal: Traversal | None = None) -> None:
        if traversal is None:
            traversal = traversal_of(base)
        elif not isinstance(traversal, Traversal):
            raise TypeError(
                f"expected a Traversal, got {type(traversal).__name__}"
            )
        self.traversal = traversal
        self._base = _copy.copy(base)

    def base(self) -> Any:
        """Return the wrapped cursor at the adaptor's position."""
        return self._base

    def __copy__(self) -> "IteratorAdaptor":
        duplicate = type(self).__new__(type(self))
        duplicate.__dict__.update(self.__dict__)
        duplicate._base = _copy.copy(self._base)
        return duplicate

    def dereference(self) -> Any:
        """Return the value the wrapped cursor refers to."""
        return self._base.dereference()

    def equal(self, other: Any) -> bool:
        """Return True if *other* wraps a cursor at the same position."""
        if not isinstance(other, IteratorAdaptor):
            raise TypeError(
                f"cannot compare {type(self).__name__} "
                f"with {type(other).__name__}"
            )
        return bool(self._base == other.base())

    def increment(self) -> None:
        """Move the wrapped cursor one position forward."""
        self._base.increment()

    def decrement(self) -> None:
        """Move the wrapped cursor one position back."""
        self._require(Traversal.BIDIRECTIONAL, "decrement")
        self._base.decrement()

    def advance(self, n: int) -> None:
        """Move the wrapped cursor by *n* positions."""
        self._require(Traversal.RANDOM_ACCESS, "advance")
        self._base.advance(n)

    def distance_to(self, other: Any) -> int:
        """Return the signed number of steps from here to *other*."""
        self._require(Traversal.RANDOM_ACCESS, "distance")
        if not isinstance(other, IteratorAdaptor):
            raise TypeError(
                f"cannot measure distance from {type(self).__name__} "
                f"to {type(other).__name__}"
            )
        return other.base() - self._base

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._base!r})"