from protokit.core import define

from .eq import Eq
from .semigroup import Semigroup


def _isempty(self):
    return Eq.equals(self, Monoid.empty(self))


Monoid = define(
    "Monoid",
    {
        "empty": None,
        "isempty": _isempty,
    },
    Semigroup,
    doc="Semigroups with an identity value. ``empty`` returns it for the receiver's type.",
)
