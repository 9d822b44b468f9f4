"""Dispatch contexts.

A :class:`DispatchContext` bundles the registries operations resolve against.
The active context is held in a ``ContextVar`` with predictable nesting via
:func:`push_context`. The process-wide root context holds the standard
protocols and built-in registrations; child contexts see everything in their
parent but write only to themselves.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any, Callable, Generator, Mapping

from protokit.conf import get_config

from .records import ImplementationRecord
from .registry import ProtocolRegistry, TypeRegistry

if TYPE_CHECKING:
    from .dispatch import BoundOperation
    from .protocol import Protocol
    from .table import DispatchTable, Implementation

logger = logging.getLogger(__name__)

__all__ = [
    "DispatchContext",
    "get_current_context",
    "get_root_context",
    "push_context",
    "set_current_context",
]


class DispatchContext:
    """Registries plus the operations that read and write them."""

    def __init__(
        self,
        name: str = "root",
        *,
        parent: DispatchContext | None = None,
    ) -> None:
        self.name = name
        self.parent = parent
        self.types = TypeRegistry(parent.types if parent is not None else None)
        self.protocols = ProtocolRegistry(parent.protocols if parent is not None else None)

    def child(self, name: str | None = None) -> DispatchContext:
        return DispatchContext(name or f"{self.name}.child", parent=self)

    # --- registration ---

    def implement(
        self,
        cls: type,
        *protocols: Protocol,
        overrides: Mapping[Any, Callable[..., Any]] | None = None,
        partial: bool = False,
    ) -> DispatchTable:
        from .registration import implement_into

        return implement_into(self, cls, protocols, overrides=overrides, partial=partial)

    def register(self, cls: type, overrides: Mapping[Any, Callable[..., Any]]) -> DispatchTable:
        """Install type-supplied overrides only, ahead of a later ``implement``."""
        return self.implement(cls, overrides=overrides)

    def finalize(self) -> None:
        """Freeze this context's registries when ``FREEZE_ON_FINALIZE`` is set."""
        if not get_config().freeze_on_finalize:
            logger.debug("context %s finalized without freezing", self.name)
            return
        self.types.freeze()
        self.protocols.freeze()
        logger.debug("context %s frozen", self.name)

    def records(self) -> tuple[ImplementationRecord, ...]:
        return self.types.records()

    # --- resolution ---

    def table_for(self, cls: type, *, use_cache: bool | None = None) -> DispatchTable | None:
        if use_cache is None:
            use_cache = get_config().dispatch_cache
        return self.types.lookup(cls, use_cache=use_cache)

    def find(self, value: Any, tag: Any) -> Implementation | None:
        from .dispatch import find_implementation

        return find_implementation(value, tag, context=self)

    def resolve(self, value: Any, tag: Any) -> BoundOperation:
        from .dispatch import resolve

        return resolve(value, tag, context=self)

    def conforms_to(self, value: Any, protocol: Protocol) -> bool:
        from .capability import conforms_to

        return conforms_to(value, protocol, context=self)

    def implemented_by(self, cls: type, protocol: Protocol) -> bool:
        from .capability import implemented_by

        return implemented_by(cls, protocol, context=self)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"DispatchContext({self.name})"


_root_context: DispatchContext | None = None
_current_context: ContextVar[DispatchContext | None] = ContextVar("protokit_current_context", default=None)


def get_root_context() -> DispatchContext:
    """Return the process-wide root context, creating it on first use."""
    global _root_context
    if _root_context is None:
        _root_context = DispatchContext("root")
    return _root_context


def get_current_context() -> DispatchContext:
    """Return the active context, falling back to the root context."""
    ctx = _current_context.get()
    return ctx if ctx is not None else get_root_context()


def set_current_context(ctx: DispatchContext | None) -> None:
    _current_context.set(ctx)


@contextmanager
def push_context(ctx: DispatchContext) -> Generator[DispatchContext, None, None]:
    token = _current_context.set(ctx)
    try:
        yield ctx
    finally:
        _current_context.reset(token)
