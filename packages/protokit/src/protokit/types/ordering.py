from protokit.core import implement
from protokit.ordering import Ordering
from protokit.protocols import Bounded, BoundsError, Clone, Enumerable, Ord, Show


def _next(self):
    if self is Ordering.GT:
        raise BoundsError("Cannot call Enumerable.next on GT")
    return Ordering(self.value + 1)


def _prev(self):
    if self is Ordering.LT:
        raise BoundsError("Cannot call Enumerable.prev on LT")
    return Ordering(self.value - 1)


implement(
    Ordering,
    Ord,
    Bounded,
    Enumerable,
    Show,
    Clone,
    overrides={
        Ord.equals: lambda self, other: self is other,
        Ord.lte: lambda self, other: self.value <= other.value,
        Bounded.min_bound: lambda self: Ordering.LT,
        Bounded.max_bound: lambda self: Ordering.GT,
        Enumerable.next: _next,
        Enumerable.prev: _prev,
        Show.show: lambda self: self.name,
        Clone.clone: lambda self: self,
    },
)
