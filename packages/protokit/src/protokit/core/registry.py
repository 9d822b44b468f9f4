# protokit/core/registry.py
from __future__ import annotations

import logging
from threading import RLock
from typing import TYPE_CHECKING, Any, Iterator

from .exceptions import DuplicateProtocolError, ProtocolNotFoundError, RegistryFrozenError
from .records import ImplementationRecord
from .table import DispatchTable

if TYPE_CHECKING:
    from .protocol import Protocol

logger = logging.getLogger(__name__)

__all__ = ["TypeRegistry", "ProtocolRegistry"]


class TypeRegistry:
    """Type -> :class:`DispatchTable` store with optional parent fallback.

    Lookups consult this registry first and then the parent chain; writes only
    ever land here. A frozen registry rejects further writes.
    """

    def __init__(self, parent: TypeRegistry | None = None) -> None:
        self.parent = parent
        self._lock = RLock()
        self._tables: dict[type, DispatchTable] = {}
        self._records: list[ImplementationRecord] = []
        self._frozen = False
        self._version = 0
        self._cache: dict[type, DispatchTable | None] = {}
        self._cache_generation = -1

    # --- state ---

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def generation(self) -> int:
        """Monotonic counter bumped by any write in this registry or its parents."""
        parent = self.parent.generation if self.parent is not None else 0
        return self._version + parent

    def freeze(self) -> None:
        """Mark the registry as frozen (no further registrations)."""
        with self._lock:
            self._frozen = True

    # --- writes ---

    def publish(self, cls: type, table: DispatchTable, record: ImplementationRecord | None = None) -> None:
        """Swap in ``table`` as the dispatch surface of ``cls``."""
        with self._lock:
            if self._frozen:
                raise RegistryFrozenError(f"Registry is frozen; cannot register {cls.__qualname__}")
            self._tables[cls] = table
            if record is not None:
                self._records.append(record)
            self._version += 1
            self._cache.clear()

    # --- reads ---

    def own_table(self, cls: type) -> DispatchTable | None:
        with self._lock:
            return self._tables.get(cls)

    def table_for_type(self, cls: type) -> DispatchTable | None:
        """Return the table registered for exactly ``cls``, searching parents."""
        table = self.own_table(cls)
        if table is None and self.parent is not None:
            return self.parent.table_for_type(cls)
        return table

    def lookup(self, cls: type, *, use_cache: bool = True) -> DispatchTable | None:
        """Return the table of the most specific registered class in ``cls.__mro__``."""
        if use_cache:
            generation = self.generation
            with self._lock:
                if self._cache_generation != generation:
                    self._cache.clear()
                    self._cache_generation = generation
                elif cls in self._cache:
                    return self._cache[cls]

        table = None
        for klass in getattr(cls, "__mro__", (cls,)):
            table = self.table_for_type(klass)
            if table is not None:
                break

        if use_cache:
            with self._lock:
                self._cache[cls] = table
        return table

    def types(self) -> tuple[type, ...]:
        """Registered types, this registry's first, then the parents'."""
        with self._lock:
            own = tuple(self._tables)
        inherited = self.parent.types() if self.parent is not None else ()
        return own + tuple(t for t in inherited if t not in own)

    def records(self) -> tuple[ImplementationRecord, ...]:
        with self._lock:
            return tuple(self._records)

    def __contains__(self, cls: object) -> bool:
        return isinstance(cls, type) and self.table_for_type(cls) is not None


class ProtocolRegistry:
    """Name -> :class:`Protocol` store. Names are unique across the parent chain."""

    def __init__(self, parent: ProtocolRegistry | None = None) -> None:
        self.parent = parent
        self._lock = RLock()
        self._store: dict[str, Protocol] = {}
        self._frozen = False

    def register(self, protocol: Protocol) -> None:
        with self._lock:
            if self._frozen:
                raise RegistryFrozenError("Protocol registry is frozen")
            if self.try_get(protocol.name) is not None:
                raise DuplicateProtocolError(f"Protocol already defined: {protocol.name}")
            self._store[protocol.name] = protocol

    def get(self, name: str) -> Protocol:
        with self._lock:
            found = self._store.get(name)
        if found is not None:
            return found
        if self.parent is not None:
            return self.parent.get(name)
        raise ProtocolNotFoundError(f"Protocol {name!r} not found or not defined")

    def try_get(self, name: str) -> Protocol | None:
        try:
            return self.get(name)
        except ProtocolNotFoundError:
            return None

    def names(self) -> tuple[str, ...]:
        with self._lock:
            own = tuple(self._store)
        inherited = self.parent.names() if self.parent is not None else ()
        return own + tuple(n for n in inherited if n not in own)

    def freeze(self) -> None:
        with self._lock:
            self._frozen = True

    def __contains__(self, name: Any) -> bool:
        return isinstance(name, str) and self.try_get(name) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())
