import functools

from protokit.core import implement
from protokit.protocols import Clone, Foldable, Ord, Sequential, Show


def _concat(self, other):
    if isinstance(other, str):
        return self + other
    return self + "".join(Foldable.to_list(other))


implement(
    str,
    Ord,
    Show,
    Clone,
    Sequential,
    overrides={
        Ord.equals: lambda self, other: self == other,
        Ord.lte: lambda self, other: self <= other,
        Show.show: repr,
        Clone.clone: lambda self: self,
        Sequential.at: lambda self, idx: self[idx],
        Sequential.length: len,
        Sequential.slice: lambda self, start, end=None: self[start:end],
        Sequential.concat: _concat,
        Sequential.empty: lambda self: "",
        Sequential.of: lambda self, value: str(value),
        Sequential.map: lambda self, fn: "".join(fn(ch) for ch in self),
        Sequential.reduce: lambda self, fn, initial: functools.reduce(fn, self, initial),
        Sequential.reverse: lambda self: self[::-1],
        Sequential.isempty: lambda self: not self,
        Foldable.to_list: list,
    },
)
