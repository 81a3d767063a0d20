"""Detection of cursor-like objects and their traversal category."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from cursorkit.traversal import Traversal

__all__ = ["is_iterator", "traversal_of"]


def _declared_traversal(obj: Any) -> Traversal | None:
    declared = getattr(obj, "traversal", None)
    return declared if isinstance(declared, Traversal) else None


def traversal_of(obj: Any) -> Traversal:
    """Return the traversal category of a cursor object or class.

    A cursor declares its category through a ``traversal`` attribute
    holding a :class:`Traversal`. Native Python iterators, which can only
    be consumed once, are treated as single-pass. Anything else raises
    :class:`TypeError`.
    """
    declared = _declared_traversal(obj)
    if declared is not None:
        return declared
    if isinstance(obj, type):
        if issubclass(obj, Iterator):
            return Traversal.SINGLE_PASS
    elif isinstance(obj, Iterator):
        return Traversal.SINGLE_PASS
    raise TypeError(f"{obj!r} is not an iterator")


def is_iterator(obj: Any) -> bool:
    """Return True if *obj* (an object or a class) is an iterator."""
    try:
        traversal_of(obj)
    except TypeError:
        return False
    return True