from protokit.core import define

from .eq import equal


def _count(self):
    return Foldable.reduce(self, lambda acc, _: acc + 1, 0)


def _to_list(self):
    def step(acc, value):
        acc.append(value)
        return acc

    return Foldable.reduce(self, step, [])


def _includes(self, value):
    return Foldable.reduce(self, lambda found, v: found or equal(v, value), False)


Foldable = define(
    "Foldable",
    {
        "reduce": None,
        "count": _count,
        "to_list": _to_list,
        "includes": _includes,
    },
    doc="Containers that can be folded left to right: ``Foldable.reduce(value, fn, initial)``.",
)
