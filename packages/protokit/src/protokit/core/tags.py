# protokit/core/tags.py
"""
Operation tags: identity-based dispatch keys.

Each call to :func:`allocate` returns a fresh :class:`OperationTag`, even when
the human-readable name repeats. Tags compare and hash by identity, so two
protocols that both declare ``equals`` never share a dispatch slot.
"""
from __future__ import annotations

import itertools
import logging
import re
from dataclasses import dataclass
from threading import RLock
from typing import Any

from .exceptions import TagError

logger = logging.getLogger(__name__)

__all__ = [
    "OperationTag",
    "TagRegistry",
    "allocate",
    "coerce_tag",
    "validate_name",
    "tag_registry",
]

_MAX_LEN = 128
_NAME_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def validate_name(value: Any, field: str = "name") -> str:
    """
    Validate an operation name.

    Rules:
    - must be a string
    - length <= 128
    - must be a valid Python identifier (letters, digits, underscore)
    """
    if not isinstance(value, str):
        raise TagError(f"{field} must be a string (got {type(value)!r})")
    if not value or len(value) > _MAX_LEN:
        raise TagError(f"{field} must be 1..{_MAX_LEN} characters: {value!r}")
    if not _NAME_RE.match(value):
        raise TagError(f"{field} contains illegal characters: {value!r}")
    return value


@dataclass(frozen=True, eq=False, slots=True)
class OperationTag:
    """Opaque dispatch key. Equality and hashing are by identity."""

    name: str
    owner: str | None
    serial: int

    @property
    def label(self) -> str:
        """Return 'Owner.name', or just the name for unowned tags."""
        return f"{self.owner}.{self.name}" if self.owner else self.name

    def __repr__(self) -> str:
        return f"OperationTag({self.label}#{self.serial})"


class TagRegistry:
    """Allocates tags. Tags are never removed."""

    def __init__(self) -> None:
        self._lock = RLock()
        self._counter = itertools.count(1)
        self._tags: list[OperationTag] = []

    def allocate(self, name: str, *, owner: str | None = None) -> OperationTag:
        validate_name(name)
        with self._lock:
            tag = OperationTag(name=name, owner=owner, serial=next(self._counter))
            self._tags.append(tag)
        logger.debug("allocated %r", tag)
        return tag

    def find(self, name: str) -> tuple[OperationTag, ...]:
        """Return every tag allocated under ``name`` (diagnostics only)."""
        with self._lock:
            return tuple(t for t in self._tags if t.name == name)

    def count(self) -> int:
        with self._lock:
            return len(self._tags)


tag_registry = TagRegistry()


def allocate(name: str, *, owner: str | None = None) -> OperationTag:
    """Allocate a fresh tag from the process-wide :class:`TagRegistry`."""
    return tag_registry.allocate(name, owner=owner)


def coerce_tag(value: Any) -> OperationTag:
    """
    Resolve the tag for a tag-like value:
      • an :class:`OperationTag` is returned as is
      • anything exposing a ``tag`` attribute holding one (an ``Operation``) yields that tag
    """
    if isinstance(value, OperationTag):
        return value
    tag = getattr(value, "tag", None)
    if isinstance(tag, OperationTag):
        return tag
    raise TagError(f"Expected an OperationTag or Operation, got {type(value).__name__}: {value!r}")
