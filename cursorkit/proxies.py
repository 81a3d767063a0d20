"""Helper objects returned by postfix increment and subscript operations.

An iterator that only supports a single pass may reuse one storage slot
for the value it refers to, so after it moves on the old value is gone.
Postfix increment therefore hands back a proxy that captured the value
(and a copy of the old position) before the move.

The proxies only need the cursor protocol: ``dereference()`` to read and,
for writing, ``assign(value)``.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "PostfixIncrementProxy",
    "WritablePostfixIncrementProxy",
    "BracketsProxy",
]


class PostfixIncrementProxy:
    """Read-only snapshot of a cursor taken just before it was advanced.

    *iterator* should be a copy of the cursor at its old position; its
    current value is read and stored at construction time.
    """

    __slots__ = ("_iterator", "_value")

    def __init__(self, iterator: Any) -> None:
        self._iterator = iterator
        self._value = iterator.dereference()

    def dereference(self) -> Any:
        """Return the value the cursor referred to before it moved."""
        return self._value

    def iterator(self) -> Any:
        """Return the stored cursor at its old position."""
        return self._iterator

    def __repr__(self) -> str:
        return f"{type(self).__name__}(value={self._value!r})"


class WritablePostfixIncrementProxy:
    """Snapshot of a writable single-pass cursor taken before it advanced.

    Reading yields the captured value; writing goes through the stored
    copy of the cursor, so the element at the old position is updated.
    """

    __slots__ = ("_iterator", "_value")

    def __init__(self, iterator: Any) -> None:
        self._iterator = iterator
        self._value = iterator.dereference()

    def dereference(self) -> Any:
        """Return the value the cursor referred to before it moved."""
        return self._value

    def assign(self, value: Any) -> "WritablePostfixIncrementProxy":
        """Write *value* to the old position and return this proxy.

        When *value* is itself a writable proxy, its captured value is
        written rather than the proxy object.
        """
        if isinstance(value, WritablePostfixIncrementProxy):
            value = value.dereference()
        self._iterator.assign(value)
        return self

    def iterator(self) -> Any:
        """Return the stored cursor at its old position."""
        return self._iterator

    def __repr__(self) -> str:
        return f"{type(self).__name__}(value={self._value!r})"


class BracketsProxy:
    """Deferred access to the element at some offset from a cursor.

    The proxy holds its own cursor, so the element stays reachable even
    when the cursor it was computed from has gone away.
    """

    __slots__ = ("_iterator",)

    def __init__(self, iterator: Any) -> None:
        self._iterator = iterator

    def get(self) -> Any:
        """Read the referenced element."""
        return self._iterator.dereference()

    def set(self, value: Any) -> "BracketsProxy":
        """Write *value* to the referenced element and return this proxy."""
        self._iterator.assign(value)
        return self

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._iterator!r})"