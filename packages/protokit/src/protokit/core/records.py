"""Registration records kept by each :class:`TypeRegistry`.

``implement`` emits one :class:`ImplementationRecord` per successful call so
registrations stay auditable after the fact.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class ImplementationRecord:
    """Immutable summary of one ``implement`` call."""

    type: type
    protocols: tuple[str, ...]
    partial: bool = False
    overrides: tuple[str, ...] = field(default_factory=tuple)
    defaults: tuple[str, ...] = field(default_factory=tuple)

    @property
    def label(self) -> str:
        return f"{self.type.__qualname__}: {', '.join(self.protocols) or '<overrides>'}"


__all__ = ["ImplementationRecord"]
