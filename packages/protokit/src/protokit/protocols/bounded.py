from protokit.core import define

Bounded = define(
    "Bounded",
    {
        "min_bound": None,
        "max_bound": None,
    },
    doc="Types with a least and a greatest value.",
)
