from protokit.core import define


def _and(self, other):
    return other if Logical.to_boolean(self) else self


def _or(self, other):
    return self if Logical.to_boolean(self) else other


def _not(self):
    return not Logical.to_boolean(self)


def _xor(self, other):
    return Logical.to_boolean(self) != Logical.to_boolean(other)


Logical = define(
    "Logical",
    {
        "to_boolean": None,
        "to_false": None,
        "and_": _and,
        "or_": _or,
        "not_": _not,
        "xor": _xor,
    },
    doc="Types with truthiness. ``to_false`` returns the type's false value.",
)
