"""
Curried boolean helpers.

    from protokit import boolean as Bool

    Bool.and_(True, False)      # False
    Bool.and_(True)(False)      # False
    Bool.compare(True, False)   # Ordering.GT
    Bool.from_int(5)            # True
"""

from __future__ import annotations

from typing import Any, Callable

from protokit.core import curry
from protokit.ordering import Ordering

__all__ = [
    "F",
    "T",
    "and_",
    "both",
    "compare",
    "complement",
    "condition",
    "either",
    "either_exclusive",
    "eq",
    "from_int",
    "max_bound",
    "min_bound",
    "neither",
    "not_",
    "or_",
    "show",
    "to_int",
    "xor",
]

Predicate = Callable[..., bool]


def _always(value: Any) -> Callable[..., Any]:
    def constant(*_args: Any, **_kwargs: Any) -> Any:
        return value

    return constant


# Eq / Ord

@curry
def eq(left: bool, right: bool) -> bool:
    return left is right


@curry
def compare(left: bool, right: bool) -> Ordering:
    """True is greater than False."""
    return Ordering.from_int(int(left) - int(right))


# Enumerable

def to_int(value: bool) -> int:
    return int(value)


def from_int(value: int) -> bool:
    """False for 0, True for anything else."""
    return value != 0


# Bounded

min_bound = _always(False)
max_bound = _always(True)


# Show

def show(value: bool) -> str:
    return str(value)


# Logic

@curry
def and_(left: bool, right: bool) -> bool:
    return left and right


@curry
def or_(left: bool, right: bool) -> bool:
    return left or right


@curry
def xor(left: bool, right: bool) -> bool:
    return bool(left) != bool(right)


def not_(value: bool) -> bool:
    return not value


@curry
def both(left: Predicate, right: Predicate) -> Predicate:
    """Predicate true when both ``left`` and ``right`` are."""

    def _both(*args: Any, **kwargs: Any) -> bool:
        return left(*args, **kwargs) and right(*args, **kwargs)

    return _both


@curry
def either(left: Predicate, right: Predicate) -> Predicate:
    def _either(*args: Any, **kwargs: Any) -> bool:
        return left(*args, **kwargs) or right(*args, **kwargs)

    return _either


def complement(fn: Predicate) -> Predicate:
    """Predicate returning the negation of ``fn``."""

    def _complement(*args: Any, **kwargs: Any) -> bool:
        return not fn(*args, **kwargs)

    return _complement


@curry
def neither(left: Predicate, right: Predicate) -> Predicate:
    return complement(either(left, right))


@curry
def either_exclusive(left: Predicate, right: Predicate) -> Predicate:
    """Predicate true when exactly one of ``left`` and ``right`` is."""

    def _either_exclusive(*args: Any, **kwargs: Any) -> bool:
        return xor(left(*args, **kwargs), right(*args, **kwargs))

    return _either_exclusive


def condition(*branches: tuple[Predicate, Callable[..., Any]]) -> Callable[..., Any]:
    """
    Build a branching function from ``(predicate, handler)`` pairs.

    The first pair whose predicate accepts the arguments runs its handler;
    when none match the result is None.

        sizer = condition(
            (lambda v: v < 1, _always("Too small.")),
            (lambda v: v < 10, _always("A big one!")),
            (T, lambda v: f"A {v} pounder!"),
        )
    """

    def _condition(*args: Any, **kwargs: Any) -> Any:
        for predicate, handler in branches:
            if predicate(*args, **kwargs):
                return handler(*args, **kwargs)
        return None

    return _condition


T = _always(True)
F = _always(False)
