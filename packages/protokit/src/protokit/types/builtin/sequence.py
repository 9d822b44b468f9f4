"""list and tuple: Eq, Show, Clone and Sequential with native overrides."""

import functools

from protokit.core import implement
from protokit.protocols import Clone, Eq, Foldable, Sequential, Show, equal, show_value


def _overrides(kind: type, brackets: str) -> dict:
    def coerce(other):
        return other if isinstance(other, kind) else kind(Foldable.to_list(other))

    def equals(self, other):
        return (
            isinstance(other, kind)
            and len(self) == len(other)
            and all(equal(left, right) for left, right in zip(self, other))
        )

    def show(self):
        items = [show_value(v) for v in self]
        if kind is tuple and len(items) == 1:
            items[0] += ","
        return f"{brackets[0]}{', '.join(items)}{brackets[1]}"

    def clone(self):
        return kind(Clone.clone(v) if Clone.member(v) else v for v in self)

    return {
        Eq.equals: equals,
        Show.show: show,
        Clone.clone: clone,
        Sequential.at: lambda self, idx: self[idx],
        Sequential.length: len,
        Sequential.slice: lambda self, start, end=None: self[start:end],
        Sequential.concat: lambda self, other: self + coerce(other),
        Sequential.empty: lambda self: kind(),
        Sequential.of: lambda self, value: kind((value,)),
        Sequential.append: lambda self, value: self + kind((value,)),
        Sequential.prepend: lambda self, value: kind((value,)) + self,
        Sequential.map: lambda self, fn: kind(fn(v) for v in self),
        Sequential.filter: lambda self, pred: kind(v for v in self if pred(v)),
        Sequential.reduce: lambda self, fn, initial: functools.reduce(fn, self, initial),
        Sequential.reverse: lambda self: self[::-1],
        Sequential.isempty: lambda self: not self,
        Foldable.to_list: list,
    }


implement(list, Eq, Show, Clone, Sequential, overrides=_overrides(list, "[]"))
implement(tuple, Eq, Show, Clone, Sequential, overrides=_overrides(tuple, "()"))
