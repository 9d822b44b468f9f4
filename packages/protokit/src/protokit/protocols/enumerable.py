from protokit.core import define

from .eq import Eq
from .ord import Ord


def _enum_to(self, end):
    """Every value from ``self`` up to and including ``end`` (requires Ord)."""
    values = []
    current = self
    while Ord.lte(current, end):
        values.append(current)
        if Eq.equals(current, end):
            break
        current = Enumerable.next(current)
    return values


Enumerable = define(
    "Enumerable",
    {
        "next": None,
        "prev": None,
        "enum_to": _enum_to,
    },
    doc="Types whose values have a successor and a predecessor.",
)
