# protokit/core/exceptions.py
"""Errors raised by the protocol core (definition, registration, dispatch)."""

from __future__ import annotations

from typing import Any, Iterable

from protokit.exceptions import ProtokitError

__all__ = [
    "TagError",
    "ProtocolDefinitionError",
    "DuplicateProtocolError",
    "ProtocolNotFoundError",
    "RegistrationError",
    "UnresolvedOperationError",
    "RegistryFrozenError",
    "DispatchError",
    "OperationNotImplementedError",
    "AmbiguousOperationError",
]


def _type_name(cls: Any) -> str:
    return getattr(cls, "__qualname__", None) or repr(cls)


# ----------------------------------------------------------------------------
# Definition-time errors
# ----------------------------------------------------------------------------
class TagError(ProtokitError, TypeError):
    """Raised when a value cannot be used as an operation tag."""


class ProtocolDefinitionError(ProtokitError):
    """Raised when a protocol definition is malformed."""


class DuplicateProtocolError(ProtocolDefinitionError):
    """Raised when a protocol name is already taken in the active registry chain."""


class ProtocolNotFoundError(ProtokitError, LookupError):
    """Raised when looking up a protocol name that was never defined."""


# ----------------------------------------------------------------------------
# Registration-time errors
# ----------------------------------------------------------------------------
class RegistrationError(ProtokitError):
    """Raised when a type cannot be registered against a protocol."""


class UnresolvedOperationError(RegistrationError):
    """Raised when a fully claimed protocol still has required operations without an implementation."""

    def __init__(self, *, type_: type, missing: Iterable[tuple[str, str]]) -> None:
        self.type = type_
        self.missing = tuple(missing)
        listed = ", ".join(f"{proto}.{name}" for proto, name in self.missing)
        super().__init__(
            f"{_type_name(type_)} does not implement required operation(s): {listed}"
        )


class RegistryFrozenError(RuntimeError, RegistrationError):
    """Raised when registering into a finalized registry."""


# ----------------------------------------------------------------------------
# Dispatch-time errors
# ----------------------------------------------------------------------------
class DispatchError(ProtokitError):
    pass


class OperationNotImplementedError(DispatchError, NotImplementedError):
    """Raised when a value's type has no implementation for an operation tag."""

    def __init__(self, *, tag: Any, type_: type) -> None:
        self.tag = tag
        self.type = type_
        label = getattr(tag, "label", None) or repr(tag)
        super().__init__(f"{label} is not implemented for {_type_name(type_)}")


class AmbiguousOperationError(DispatchError, AttributeError):
    """Raised when an operation name maps to more than one tag."""
