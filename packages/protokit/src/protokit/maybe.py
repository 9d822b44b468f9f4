"""Optional values: ``Some(value)`` or ``NOTHING``.

A Maybe behaves as a sequence of length zero or one once its protocol
registrations are loaded (see :mod:`protokit.types.maybe`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class Maybe:
    __slots__ = ()


@dataclass(frozen=True, slots=True)
class Some(Maybe):
    value: Any

    def __repr__(self) -> str:
        return f"Some({self.value!r})"


class Nothing(Maybe):
    __slots__ = ()
    _instance: Nothing | None = None

    def __new__(cls) -> Nothing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOTHING"


NOTHING = Nothing()


def maybe(value: Any) -> Maybe:
    """Wrap ``value``; ``None`` becomes ``NOTHING``."""
    return NOTHING if value is None else Some(value)


__all__ = ["Maybe", "Some", "Nothing", "NOTHING", "maybe"]
