from protokit.core import define
from protokit.ordering import Ordering

from .eq import Eq


def _compare(self, other):
    if Ord.equals(self, other):
        return Ordering.EQ
    return Ordering.LT if Ord.lte(self, other) else Ordering.GT


def _lt(self, other):
    return Ord.lte(self, other) and not Ord.equals(self, other)


def _gt(self, other):
    return not Ord.lte(self, other)


def _gte(self, other):
    return Ord.equals(self, other) or not Ord.lte(self, other)


def _min(self, other):
    return self if Ord.lte(self, other) else other


def _max(self, other):
    return other if Ord.lte(self, other) else self


Ord = define(
    "Ord",
    {
        "lte": None,
        "compare": _compare,
        "lt": _lt,
        "gt": _gt,
        "gte": _gte,
        "min": _min,
        "max": _max,
    },
    Eq,
    doc="Totally ordered types. Minimal definition: equals and lte.",
)
