"""Capability queries: does a value (or type) resolve every operation of a protocol?"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .context import DispatchContext, get_current_context
from .dispatch import find_implementation

if TYPE_CHECKING:
    from .protocol import Protocol

__all__ = ["conforms_to", "implemented_by", "missing_operations"]


def conforms_to(value: Any, protocol: Protocol, *, context: DispatchContext | None = None) -> bool:
    """True iff every tag of ``protocol`` (inherited included) resolves on ``value``."""
    ctx = context or get_current_context()
    return all(find_implementation(value, tag, context=ctx) is not None for tag in protocol.tags)


def implemented_by(cls: type, protocol: Protocol, *, context: DispatchContext | None = None) -> bool:
    """Type-level counterpart of :func:`conforms_to` (ignores per-instance overrides)."""
    return not missing_operations(cls, protocol, context=context)


def missing_operations(cls: type, protocol: Protocol, *, context: DispatchContext | None = None) -> tuple[str, ...]:
    """Labels of the operations of ``protocol`` that ``cls`` does not resolve."""
    ctx = context or get_current_context()
    table = ctx.table_for(cls)
    if table is None:
        return tuple(tag.label for tag in protocol.tags)
    return tuple(tag.label for tag in protocol.tags if tag not in table)
