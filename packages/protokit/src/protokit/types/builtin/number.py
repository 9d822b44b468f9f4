from protokit.core import implement
from protokit.protocols import Clone, Enumerable, Numeric, Ord, Show

_NUMBER_OVERRIDES = {
    Ord.equals: lambda self, other: self == other,
    Ord.lte: lambda self, other: self <= other,
    Show.show: repr,
    Clone.clone: lambda self: self,
    Numeric.to_number: lambda self: self,
}

implement(
    int,
    Ord,
    Numeric,
    Enumerable,
    Show,
    Clone,
    overrides={
        **_NUMBER_OVERRIDES,
        Numeric.from_number: lambda self, number: int(number),
        Enumerable.next: lambda self: self + 1,
        Enumerable.prev: lambda self: self - 1,
    },
)

implement(
    float,
    Ord,
    Numeric,
    Show,
    Clone,
    overrides={
        **_NUMBER_OVERRIDES,
        Numeric.from_number: lambda self, number: float(number),
    },
)
