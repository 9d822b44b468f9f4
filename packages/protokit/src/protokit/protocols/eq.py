from typing import Any

from protokit.core import define


def _not_equals(self, other):
    return not Eq.equals(self, other)


Eq = define(
    "Eq",
    {
        "equals": None,
        "not_equals": _not_equals,
    },
    doc="Types with a notion of equality.",
)


def equal(left: Any, right: Any) -> bool:
    """``Eq.equals`` when ``left`` conforms to Eq, plain ``==`` otherwise."""
    if Eq.member(left):
        return Eq.equals(left, right)
    return left == right
