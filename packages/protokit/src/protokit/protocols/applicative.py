from protokit.core import define

from .functor import Functor

Applicative = define(
    "Applicative",
    {"of": None},
    Functor,
    doc="Functors that can lift a plain value: ``Applicative.of(like, value)``.",
)
