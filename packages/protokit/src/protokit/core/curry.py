"""Partial application helpers shared by operations and the function modules."""

from __future__ import annotations

import functools
import inspect
from typing import Any, Callable

__all__ = ["required_arity", "curry", "curry_n"]

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


@functools.lru_cache(maxsize=2048)
def _arity(func: Callable[..., Any]) -> int:
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        # builtins without introspectable signatures are never curried
        return 0
    return sum(
        1
        for p in signature.parameters.values()
        if p.kind in _POSITIONAL and p.default is inspect.Parameter.empty
    )


def required_arity(func: Callable[..., Any]) -> int:
    """Number of positional parameters ``func`` needs that have no default."""
    try:
        return _arity(func)
    except TypeError:
        # unhashable callables
        return _arity.__wrapped__(func)


def curry_n(arity: int, func: Callable[..., Any], *bound: Any) -> Callable[..., Any]:
    """Return ``func`` awaiting ``arity`` positional arguments, ``bound`` already supplied."""

    def curried(*args: Any, **kwargs: Any) -> Any:
        collected = bound + args
        if len(collected) >= arity or kwargs:
            return func(*collected, **kwargs)
        return curry_n(arity, func, *collected)

    functools.update_wrapper(curried, func)
    curried.arity = arity - len(bound)  # type: ignore[attr-defined]
    return curried


def curry(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator form of :func:`curry_n` using the function's own required arity."""
    return curry_n(required_arity(func), func)
