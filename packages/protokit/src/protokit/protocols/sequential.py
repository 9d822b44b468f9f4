"""
Sequential: indexable, finite sequences.

Minimal definition: ``at(i)`` and ``length()``. Everything else derives from
those two. The inherited container operations (``reduce``, ``map``,
``concat``, ``empty``, ``of``) get list-building defaults here, so derived
results of a type that supplies only the minimal pair are plain lists. Types
that can build their own values (list, tuple, str, Maybe) override them.
"""
from protokit.core import define
from protokit.maybe import NOTHING, Some

from .applicative import Applicative
from .eq import equal
from .exceptions import ItemNotFoundError
from .foldable import Foldable
from .monoid import Monoid
from .semigroup import Semigroup


def _identity(value):
    return value


def _bounds(self, start, end):
    length = Sequential.length(self)
    if end is None or end > length:
        end = length
    if start < 0:
        start = max(length + start, 0)
    if end < 0:
        end = max(length + end, 0)
    return start, end


# -- container defaults (list-building) --------------------------------------

def _reduce(self, fn, initial):
    acc = initial
    for idx in range(Sequential.length(self)):
        acc = fn(acc, Sequential.at(self, idx))
    return acc


def _count(self):
    return Sequential.length(self)


def _map(self, fn):
    return [fn(Sequential.at(self, idx)) for idx in range(Sequential.length(self))]


def _concat(self, other):
    return [*Foldable.to_list(self), *Foldable.to_list(other)]


def _empty(self):
    return []


def _of(self, value):
    return [value]


def _isempty(self):
    return Sequential.length(self) == 0


# -- building ----------------------------------------------------------------

def _append(self, item):
    return Semigroup.concat(self, Applicative.of(self, item))


def _prepend(self, item):
    return Semigroup.concat(Applicative.of(self, item), self)


def _slice(self, start, end=None):
    start, end = _bounds(self, start, end)
    result = Monoid.empty(self)
    while start < end:
        result = Sequential.append(result, Sequential.at(self, start))
        start += 1
    return result


def _take(self, n):
    return Sequential.slice(self, 0, max(n, 0))


def _drop(self, n):
    return Sequential.slice(self, max(n, 0), Sequential.length(self))


def _take_last(self, n):
    return Sequential.drop(self, Sequential.length(self) - max(n, 0))


def _drop_last(self, n):
    return Sequential.take(self, Sequential.length(self) - max(n, 0))


def _head(self):
    if Sequential.isempty(self):
        raise ItemNotFoundError("head of an empty sequence")
    return Sequential.at(self, 0)


def _last(self):
    if Sequential.isempty(self):
        raise ItemNotFoundError("last of an empty sequence")
    return Sequential.at(self, Sequential.length(self) - 1)


def _tail(self):
    return Sequential.drop(self, 1)


def _init(self):
    return Sequential.drop_last(self, 1)


def _intersperse(self, sep):
    length = Sequential.length(self)
    if length < 2:
        return self
    result = Applicative.of(self, Sequential.at(self, 0))
    for idx in range(1, length):
        result = Sequential.append(Sequential.append(result, sep), Sequential.at(self, idx))
    return result


def _reverse(self):
    result = Monoid.empty(self)
    for idx in range(Sequential.length(self) - 1, -1, -1):
        result = Sequential.append(result, Sequential.at(self, idx))
    return result


def _split_at(self, n):
    return Sequential.take(self, n), Sequential.drop(self, n)


# -- predicates --------------------------------------------------------------

def _leading(self, pred):
    idx, length = 0, Sequential.length(self)
    while idx < length and pred(Sequential.at(self, idx)):
        idx += 1
    return idx


def _trailing(self, pred):
    idx = Sequential.length(self) - 1
    while idx >= 0 and pred(Sequential.at(self, idx)):
        idx -= 1
    return idx + 1


def _take_while(self, pred):
    return Sequential.take(self, _leading(self, pred))


def _drop_while(self, pred):
    return Sequential.drop(self, _leading(self, pred))


def _take_last_while(self, pred):
    return Sequential.drop(self, _trailing(self, pred))


def _drop_last_while(self, pred):
    return Sequential.take(self, _trailing(self, pred))


def _filter(self, pred):
    result = Monoid.empty(self)
    for idx in range(Sequential.length(self)):
        value = Sequential.at(self, idx)
        if pred(value):
            result = Sequential.append(result, value)
    return result


def _unique_by(self, fn):
    result = Monoid.empty(self)
    seen = []
    for idx in range(Sequential.length(self)):
        value = Sequential.at(self, idx)
        key = fn(value)
        if any(equal(key, other) for other in seen):
            continue
        seen.append(key)
        result = Sequential.append(result, value)
    return result


def _unique(self):
    return Sequential.unique_by(self, _identity)


# -- searching ---------------------------------------------------------------

def _find_index(self, pred):
    for idx in range(Sequential.length(self)):
        if pred(Sequential.at(self, idx)):
            return idx
    return -1


def _find_last_index(self, pred):
    for idx in range(Sequential.length(self) - 1, -1, -1):
        if pred(Sequential.at(self, idx)):
            return idx
    return -1


def _maybe_at(self, idx):
    return NOTHING if idx == -1 else Some(Sequential.at(self, idx))


def _find_maybe(self, pred):
    return _maybe_at(self, Sequential.find_index(self, pred))


def _find_last_maybe(self, pred):
    return _maybe_at(self, Sequential.find_last_index(self, pred))


def _found(result):
    if Monoid.isempty(result):
        raise ItemNotFoundError("Could not find the item")
    return Sequential.at(result, 0)


def _find(self, pred):
    return _found(Sequential.find_maybe(self, pred))


def _find_last(self, pred):
    return _found(Sequential.find_last_maybe(self, pred))


def _index_of(self, value):
    return Sequential.find_index(self, lambda other: equal(value, other))


def _last_index_of(self, value):
    return Sequential.find_last_index(self, lambda other: equal(value, other))


Sequential = define(
    "Sequential",
    {
        "at": None,
        "length": None,
        # inherited container operations
        "reduce": _reduce,
        "count": _count,
        "map": _map,
        "concat": _concat,
        "empty": _empty,
        "of": _of,
        "isempty": _isempty,
        # derived
        "append": _append,
        "prepend": _prepend,
        "slice": _slice,
        "take": _take,
        "drop": _drop,
        "take_last": _take_last,
        "drop_last": _drop_last,
        "head": _head,
        "tail": _tail,
        "last": _last,
        "init": _init,
        "intersperse": _intersperse,
        "reverse": _reverse,
        "split_at": _split_at,
        "take_while": _take_while,
        "drop_while": _drop_while,
        "take_last_while": _take_last_while,
        "drop_last_while": _drop_last_while,
        "filter": _filter,
        "unique_by": _unique_by,
        "unique": _unique,
        "find_index": _find_index,
        "find_last_index": _find_last_index,
        "find_maybe": _find_maybe,
        "find_last_maybe": _find_last_maybe,
        "find": _find,
        "find_last": _find_last,
        "index_of": _index_of,
        "last_index_of": _last_index_of,
    },
    Foldable,
    Monoid,
    Applicative,
)
