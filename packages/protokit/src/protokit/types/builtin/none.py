from protokit.core import implement
from protokit.protocols import Clone, Eq, Functor, Show

NoneType = type(None)

# Mapping over nothing yields nothing.
implement(
    NoneType,
    Eq,
    Show,
    Functor,
    Clone,
    overrides={
        Eq.equals: lambda self, other: other is None,
        Show.show: lambda self: "None",
        Functor.map: lambda self, fn: None,
        Clone.clone: lambda self: None,
    },
)
