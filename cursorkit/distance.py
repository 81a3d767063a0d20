"""Number of steps between two cursor positions."""

from __future__ import annotations

import copy
from typing import Any

from cursorkit.traits import traversal_of
from cursorkit.traversal import Traversal

__all__ = ["distance"]


def distance(first: Any, last: Any) -> int:
    """Return the number of increments that take *first* to *last*.

    Random-access cursors answer in constant time and may give a negative
    result. Other cursors are walked forward from a copy of *first*, so
    *last* must be reachable from it.
    """
    traversal = traversal_of(first)
    if traversal.at_least(Traversal.RANDOM_ACCESS):
        return last - first
    if not callable(getattr(first, "increment", None)):
        raise TypeError(f"{first!r} has no increment() to walk with")
    cursor = copy.copy(first)
    steps = 0
    while cursor != last:
        cursor.increment()
        steps += 1
    return steps