"""
protokit: typeclass-style protocols for Python values.

Named protocols (Eq, Ord, Functor, Monoid, Sequential, ...) are defined once,
implemented by types through an explicit registration step, and invoked
generically: ``Eq.equals(a, b)`` dispatches on ``a``'s type.

- ``protokit.core``: tags, ``define``, ``implement``, dispatch and capability queries
- ``protokit.protocols``: the standard protocols
- ``protokit.types``: registrations for built-ins, ``Maybe`` and ``Ordering``
- ``protokit.boolean``: curried boolean helpers
- ``protokit.conf``: layered settings

Importing ``protokit`` loads the standard protocols and built-in registrations
into the root dispatch context.
"""

from importlib.metadata import PackageNotFoundError, version

from .core import (
    DispatchContext,
    OperationNotImplementedError,
    Protocol,
    UnresolvedOperationError,
    alias,
    allocate,
    conforms_to,
    define,
    get_current_context,
    implement,
    implemented_by,
    override,
    override_instance,
    push_context,
    register,
    resolve,
    surface,
)
from .maybe import NOTHING, Maybe, Some, maybe
from .ordering import Ordering
from . import protocols, types  # noqa: E402  registers the standard library

try:
    __version__ = version("protokit")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "DispatchContext",
    "Maybe",
    "NOTHING",
    "OperationNotImplementedError",
    "Ordering",
    "Protocol",
    "Some",
    "UnresolvedOperationError",
    "alias",
    "allocate",
    "conforms_to",
    "define",
    "get_current_context",
    "implement",
    "implemented_by",
    "maybe",
    "override",
    "override_instance",
    "protocols",
    "push_context",
    "register",
    "resolve",
    "surface",
    "types",
]
