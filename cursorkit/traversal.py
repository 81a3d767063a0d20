"""Traversal categories describing how far a cursor can move."""

from __future__ import annotations

import enum

__all__ = ["Traversal", "minimum_traversal"]


class Traversal(enum.IntEnum):
    """Traversal capability of a cursor, ordered from weakest to strongest.

    Each category includes every capability of the ones below it, so a
    cursor with a stronger traversal can be used wherever a weaker one is
    required.
    """

    INCREMENTABLE = 0
    SINGLE_PASS = 1
    FORWARD = 2
    BIDIRECTIONAL = 3
    RANDOM_ACCESS = 4

    def at_least(self, other: "Traversal") -> bool:
        """Return True if this traversal provides everything *other* requires."""
        if not isinstance(other, Traversal):
            raise TypeError(
                f"expected a Traversal, got {type(other).__name__}"
            )
        return self >= other

    @property
    def is_multipass(self) -> bool:
        """True when positions can be revisited (forward or stronger)."""
        return self >= Traversal.FORWARD


def minimum_traversal(*args: Traversal) -> Traversal:
    """Return the weakest traversal among *args*.

    This is the traversal that every one of the given categories supports.
    """
    if not args:
        raise TypeError("minimum_traversal() needs at least one traversal")
    for arg in args:
        if not isinstance(arg, Traversal):
            raise TypeError(
                f"expected a Traversal, got {type(arg).__name__}"
            )
    return Traversal(min(args))