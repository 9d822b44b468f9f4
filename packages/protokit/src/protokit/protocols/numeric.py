from protokit.core import define

Numeric = define(
    "Numeric",
    {
        "to_number": None,
        "from_number": None,
    },
    doc="Types convertible to and from plain numbers.",
)
