"""Three-way comparison result."""

from __future__ import annotations

import enum


class Ordering(enum.Enum):
    LT = -1
    EQ = 0
    GT = 1

    @classmethod
    def from_int(cls, value: int | float) -> Ordering:
        """Map the sign of ``value`` to an Ordering (negative -> LT)."""
        if value < 0:
            return cls.LT
        if value > 0:
            return cls.GT
        return cls.EQ

    def to_int(self) -> int:
        return self.value

    def invert(self) -> Ordering:
        return Ordering(-self.value)


__all__ = ["Ordering"]
