"""Protocol dispatch core: tags, definition, registration, resolution, capability."""

from typing import Any, Callable, Mapping

from .capability import conforms_to, implemented_by, missing_operations
from .context import (
    DispatchContext,
    get_current_context,
    get_root_context,
    push_context,
    set_current_context,
)
from .curry import curry, curry_n, required_arity
from .dispatch import BoundOperation, Surface, find_implementation, invoke, override_instance, resolve, surface
from .exceptions import (
    AmbiguousOperationError,
    DispatchError,
    DuplicateProtocolError,
    OperationNotImplementedError,
    ProtocolDefinitionError,
    ProtocolNotFoundError,
    RegistrationError,
    RegistryFrozenError,
    TagError,
    UnresolvedOperationError,
)
from .protocol import Alias, Operation, OperationSpec, Protocol, alias, define
from .records import ImplementationRecord
from .registration import override
from .registry import ProtocolRegistry, TypeRegistry
from .table import DispatchTable, Implementation
from .tags import OperationTag, allocate, coerce_tag


def implement(
    cls: type,
    *protocols: Protocol,
    overrides: Mapping[Any, Callable[..., Any]] | None = None,
    partial: bool = False,
) -> DispatchTable:
    """Register ``cls`` against ``protocols`` in the active dispatch context."""
    return get_current_context().implement(cls, *protocols, overrides=overrides, partial=partial)


def register(cls: type, overrides: Mapping[Any, Callable[..., Any]]) -> DispatchTable:
    """Install type-supplied overrides in the active dispatch context."""
    return get_current_context().register(cls, overrides)


__all__ = [
    "Alias",
    "AmbiguousOperationError",
    "BoundOperation",
    "DispatchContext",
    "DispatchError",
    "DispatchTable",
    "DuplicateProtocolError",
    "Implementation",
    "ImplementationRecord",
    "Operation",
    "OperationNotImplementedError",
    "OperationSpec",
    "OperationTag",
    "Protocol",
    "ProtocolDefinitionError",
    "ProtocolNotFoundError",
    "ProtocolRegistry",
    "RegistrationError",
    "RegistryFrozenError",
    "Surface",
    "TagError",
    "TypeRegistry",
    "UnresolvedOperationError",
    "alias",
    "allocate",
    "coerce_tag",
    "conforms_to",
    "curry",
    "curry_n",
    "define",
    "find_implementation",
    "get_current_context",
    "get_root_context",
    "implement",
    "implemented_by",
    "invoke",
    "missing_operations",
    "override",
    "override_instance",
    "push_context",
    "register",
    "required_arity",
    "resolve",
    "set_current_context",
    "surface",
]
