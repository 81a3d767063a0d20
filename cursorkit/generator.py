"""A single-pass cursor over the values produced by a nullary callable."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from cursorkit.facade import IteratorFacade
from cursorkit.traversal import Traversal

__all__ = ["GeneratorIterator", "make_generator_iterator"]

_UNSET = object()


class GeneratorIterator(IteratorFacade):
    """Cursor whose values are successive results of calling a generator.

    Construction calls the generator once to obtain the first value; each
    increment calls it again. Two cursors are equal when they share the
    same generator and currently hold equal values. A cursor made without
    a generator holds no value and cannot be read or advanced.
    """

    traversal = Traversal.SINGLE_PASS

    def __init__(self, generator: Callable[[], Any] | None = None) -> None:
        self._generator = generator
        self._value: Any = _UNSET if generator is None else generator()

    @property
    def generator(self) -> Callable[[], Any] | None:
        """The callable this cursor draws values from."""
        return self._generator

    def _checked_generator(self) -> Callable[[], Any]:
        if self._generator is None:
            raise ValueError("generator iterator has no generator")
        return self._generator

    def increment(self) -> None:
        """Replace the current value with the generator's next result."""
        self._value = self._checked_generator()()

    def dereference(self) -> Any:
        """Return the current value."""
        self._checked_generator()
        return self._value

    def equal(self, other: Any) -> bool:
        """Return True if *other* shares the generator and holds an equal value."""
        if not isinstance(other, GeneratorIterator):
            return False
        if self._generator is not other._generator:
            return False
        if self._value is _UNSET or other._value is _UNSET:
            return self._value is other._value
        return bool(self._value == other._value)

    def __repr__(self) -> str:
        value = "<unset>" if self._value is _UNSET else repr(self._value)
        return f"{type(self).__name__}(value={value})"


def make_generator_iterator(generator: Callable[[], Any]) -> GeneratorIterator:
    """Return a cursor over the results of calling *generator* repeatedly."""
    return GeneratorIterator(generator)