from protokit.core import implement
from protokit.protocols import (
    Bounded,
    BoundsError,
    Case,
    Clone,
    Enumerable,
    Logical,
    Numeric,
    Ord,
    Show,
    select_case,
)


def _prev(self):
    if self is True:
        return False
    raise BoundsError("Cannot call Enumerable.prev on False")


def _next(self):
    if self is False:
        return True
    raise BoundsError("Cannot call Enumerable.next on True")


def _case(self, cases):
    return select_case(self, (self, str(self).lower()), cases)


implement(
    bool,
    Ord,
    Bounded,
    Numeric,
    Enumerable,
    Case,
    Show,
    Logical,
    Clone,
    overrides={
        Ord.equals: lambda self, other: self is other,
        Ord.lte: lambda self, other: self <= other,
        Bounded.min_bound: lambda self: False,
        Bounded.max_bound: lambda self: True,
        Numeric.to_number: int,
        Numeric.from_number: lambda self, number: bool(number),
        Enumerable.prev: _prev,
        Enumerable.next: _next,
        Case.case: _case,
        Show.show: str,
        Logical.to_boolean: lambda self: self,
        Logical.to_false: lambda self: False,
        Logical.not_: lambda self: not self,
        Clone.clone: lambda self: self,
    },
)
