# cursorkit

A cursor is an object that marks a position in a sequence and can be
moved, compared and read. cursorkit lets you define your own cursor by
writing a few core operations and get the rest (comparison, arithmetic,
indexing, postfix increment and decrement) from a shared base class.

## Installing

```
pip install cursorkit
```

The package has no dependencies outside the standard library.

## Traversal categories

`cursorkit.traversal.Traversal` is an ordered enum naming how far a
cursor can move: `INCREMENTABLE`, `SINGLE_PASS`, `FORWARD`,
`BIDIRECTIONAL` and `RANDOM_ACCESS`.

- `Traversal.at_least(other)` tells whether one category provides
  everything another requires.
- `Traversal.is_multipass` is true for forward and stronger categories.
- `minimum_traversal(*args)` returns the weakest of the given categories.

## Defining a cursor

Subclass `cursorkit.facade.IteratorFacade`, set the class attribute
`traversal` (forward by default) and provide the core operations your
traversal needs:

- `dereference()`, `increment()` and `equal(other)` for every cursor,
- `decrement()` for bidirectional cursors,
- `advance(n)` and `distance_to(other)` for random-access cursors,
- optionally `assign(value)` for a writable cursor.

The facade then supplies `==`, `!=`, `copy()`, `post_increment()` and,
for bidirectional cursors, `post_decrement()`. Random-access cursors also
get `<`, `<=`, `>`, `>=`, `+`, `-` (with an integer or with another
cursor), `+=`, `-=` and `cursor[n]` for reading and writing. Using an
operation beyond the declared traversal raises `TypeError`.

`post_increment()` returns a copy at the old position for multi-pass
cursors. For single-pass cursors it returns a proxy from
`cursorkit.proxies` that captured the old value: a
`PostfixIncrementProxy`, or a `WritablePostfixIncrementProxy` whose
`assign(value)` writes to the old position when the cursor is writable.

`SequenceCursor(sequence, index=0)` is a ready-made writable
random-access cursor over a Python sequence; reading or writing at the
end position raises `IndexError`. `iterate(first, last)` yields the
values from `first` up to, not including, `last` without moving `first`:

```python
from cursorkit.facade import SequenceCursor, iterate

data = [1, 2, 3]
first, last = SequenceCursor(data, 0), SequenceCursor(data, 3)
print(list(iterate(first, last)))   # [1, 2, 3]
print(last - first)                 # 3
```

## Distance

`cursorkit.distance.distance(first, last)` counts the increments that
take `first` to `last`. Random-access cursors answer with `last - first`
and may give a negative result; other cursors are stepped forward from a
copy of `first`.

## Adapting a cursor

`cursorkit.adaptor.IteratorAdaptor(base, traversal=None)` keeps its own
copy of a base cursor and forwards every core operation to it. Its
traversal is that of `base` unless a weaker one is given. Override only
the parts you want to change, such as `dereference()` to transform
values or `increment()` to skip positions. `base()` returns the wrapped
cursor.

`is_convertible(source, target)` reports whether one traversal category
covers another, or whether one class is a subclass of another.

## Input cursors over functions

- `cursorkit.generator.make_generator_iterator(generator)` returns a
  single-pass `GeneratorIterator`. It calls the generator once on
  construction and again on every increment; its value is the latest
  result. Two such cursors are equal when they share the generator and
  hold equal values.
- `cursorkit.function_input.make_function_input_iterator(function, state)`
  returns a single-pass `FunctionInputIterator` that calls `function`
  lazily, one result per position, and counts positions in `state`
  (advanced with `+ 1`, or by its `increment()` method). Compare it with
  a cursor holding an end state to read a fixed number of values, or use
  an `Infinite()` state, which never compares equal, for an endless
  stream.

## Inspecting objects

`cursorkit.traits.traversal_of(obj)` returns the traversal of a cursor
object or class from its `traversal` attribute, treats native Python
iterators as single-pass, and raises `TypeError` for anything else.
`is_iterator(obj)` returns whether `traversal_of` succeeds.

## What it does not include

cursorkit provides the building blocks only. It ships no ready-made
transforming, filtering, counting or indirect cursors; write those as
subclasses of `IteratorAdaptor` or `IteratorFacade`. It has no
command-line program.