from protokit.core import implement
from protokit.maybe import NOTHING, Maybe, Some
from protokit.protocols import (
    Applicative,
    Clone,
    Eq,
    Functor,
    Monoid,
    Sequential,
    Show,
    equal,
    show_value,
)


def _equals(self, other):
    if isinstance(self, Some):
        return isinstance(other, Some) and equal(self.value, other.value)
    return other is NOTHING


def _show(self):
    return f"Some({show_value(self.value)})" if isinstance(self, Some) else "NOTHING"


def _map(self, fn):
    return Some(fn(self.value)) if isinstance(self, Some) else NOTHING


def _at(self, idx):
    if isinstance(self, Some) and idx in (0, -1):
        return self.value
    raise IndexError("Maybe index out of range")


def _reduce(self, fn, initial):
    return fn(initial, self.value) if isinstance(self, Some) else initial


def _clone(self):
    if isinstance(self, Some) and Clone.member(self.value):
        return Some(Clone.clone(self.value))
    return self


# concat keeps the first Some
implement(
    Maybe,
    Eq,
    Show,
    Clone,
    Functor,
    Applicative,
    Monoid,
    Sequential,
    overrides={
        Eq.equals: _equals,
        Show.show: _show,
        Clone.clone: _clone,
        Functor.map: _map,
        Applicative.of: lambda self, value: Some(value),
        Monoid.empty: lambda self: NOTHING,
        Monoid.concat: lambda self, other: self if isinstance(self, Some) else other,
        Monoid.isempty: lambda self: self is NOTHING,
        Sequential.at: _at,
        Sequential.length: lambda self: 1 if isinstance(self, Some) else 0,
        Sequential.reduce: _reduce,
    },
)
