# protokit/core/table.py
"""Per-type dispatch surfaces.

A :class:`DispatchTable` is immutable once built. Registration never edits a
published table; it builds a new one and swaps it in (see
:meth:`TypeRegistry.publish`).
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Iterator, Literal, Mapping

from .tags import OperationTag

__all__ = ["Implementation", "DispatchTable"]

OVERRIDE = "override"
DEFAULT = "default"


@dataclass(frozen=True, slots=True)
class Implementation:
    """One resolved slot: the callable plus where it came from."""

    tag: OperationTag
    func: Callable[..., Any]
    kind: Literal["override", "default"]
    source: str

    @property
    def is_override(self) -> bool:
        return self.kind == OVERRIDE


class DispatchTable:
    """Mapping of tag -> :class:`Implementation` owned by exactly one type."""

    __slots__ = ("owner", "_entries", "_claims")

    def __init__(
        self,
        owner: type,
        entries: Mapping[OperationTag, Implementation] | None = None,
        claims: Mapping[str, bool] | None = None,
    ) -> None:
        self.owner = owner
        self._entries = MappingProxyType(dict(entries or {}))
        # protocol name -> True when fully implemented, False when partial
        self._claims = MappingProxyType(dict(claims or {}))

    def get(self, tag: OperationTag) -> Implementation | None:
        return self._entries.get(tag)

    def __contains__(self, tag: object) -> bool:
        return tag in self._entries

    def __iter__(self) -> Iterator[OperationTag]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> Mapping[OperationTag, Implementation]:
        return self._entries

    @property
    def claims(self) -> Mapping[str, bool]:
        return self._claims

    def overrides(self) -> tuple[OperationTag, ...]:
        return tuple(t for t, impl in self._entries.items() if impl.is_override)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"DispatchTable({self.owner.__qualname__}, {len(self)} ops)"
