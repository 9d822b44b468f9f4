# protokit/core/dispatch.py
"""
Dispatch resolution.

Resolution order for ``(value, tag)``:
  1. per-instance overrides installed with :func:`override_instance`
  2. the dispatch table of the most specific registered class in
     ``type(value).__mro__``

Nothing else is consulted; a miss raises
:class:`~protokit.core.exceptions.OperationNotImplementedError`. Exceptions
raised by the resolved implementation propagate untouched.
"""
from __future__ import annotations

from typing import Any, Callable, Mapping

from protokit.conf import get_config

from .context import DispatchContext, get_current_context
from .curry import curry_n, required_arity
from .exceptions import AmbiguousOperationError, OperationNotImplementedError, RegistrationError
from .table import OVERRIDE, Implementation
from .tags import OperationTag, coerce_tag

__all__ = [
    "BoundOperation",
    "Surface",
    "find_implementation",
    "invoke",
    "override_instance",
    "resolve",
    "surface",
]

INSTANCE_OVERRIDES_ATTR = "__protokit_overrides__"


class BoundOperation:
    """An implementation bound to its receiver."""

    __slots__ = ("receiver", "implementation")

    def __init__(self, receiver: Any, implementation: Implementation) -> None:
        self.receiver = receiver
        self.implementation = implementation

    @property
    def tag(self) -> OperationTag:
        return self.implementation.tag

    @property
    def func(self) -> Callable[..., Any]:
        return self.implementation.func

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.implementation.func(self.receiver, *args, **kwargs)

    def __repr__(self) -> str:
        return (
            f"<BoundOperation {self.tag.label} of {type(self.receiver).__qualname__} "
            f"({self.implementation.kind}: {self.implementation.source})>"
        )


def _instance_overrides(value: Any) -> Mapping[OperationTag, Implementation] | None:
    namespace = getattr(value, "__dict__", None)
    if not isinstance(namespace, dict):
        return None
    return namespace.get(INSTANCE_OVERRIDES_ATTR)


def find_implementation(
    value: Any,
    tag: Any,
    *,
    context: DispatchContext | None = None,
    use_cache: bool | None = None,
) -> Implementation | None:
    """Return the implementation ``value`` resolves for ``tag``, or None."""
    tag = coerce_tag(tag)
    per_instance = _instance_overrides(value)
    if per_instance:
        found = per_instance.get(tag)
        if found is not None:
            return found

    ctx = context or get_current_context()
    table = ctx.table_for(type(value), use_cache=use_cache)
    if table is None:
        return None
    return table.get(tag)


def resolve(
    value: Any,
    tag: Any,
    *,
    context: DispatchContext | None = None,
    use_cache: bool | None = None,
) -> BoundOperation:
    """Return the implementation of ``tag`` for ``value`` bound to ``value``.

    :raises OperationNotImplementedError: When ``value``'s type never received one.
    """
    tag = coerce_tag(tag)
    found = find_implementation(value, tag, context=context, use_cache=use_cache)
    if found is None:
        raise OperationNotImplementedError(tag=tag, type_=type(value))
    return BoundOperation(value, found)


def invoke(
    value: Any,
    tag: OperationTag,
    args: tuple[Any, ...] = (),
    kwargs: Mapping[str, Any] | None = None,
    *,
    context: DispatchContext | None = None,
) -> Any:
    """Resolve and call; returns a partial when positional arguments are missing."""
    config = get_config()
    bound = resolve(value, tag, context=context, use_cache=config.dispatch_cache)
    if kwargs:
        return bound(*args, **kwargs)
    if config.auto_curry:
        # the receiver fills the first parameter
        arity = required_arity(bound.func) - 1
        if len(args) < arity:
            return curry_n(arity, bound, *args)
    return bound(*args)


def override_instance(value: Any, tag: Any, func: Callable[..., Any]) -> None:
    """Install a per-instance override that wins over the type's table."""
    tag = coerce_tag(tag)
    if not callable(func):
        raise RegistrationError(f"Override for {tag.label} must be callable, got {func!r}")
    namespace = getattr(value, "__dict__", None)
    if not isinstance(namespace, dict):
        raise RegistrationError(
            f"{type(value).__qualname__} instances have no __dict__; per-instance overrides are unavailable"
        )
    overrides = dict(namespace.get(INSTANCE_OVERRIDES_ATTR) or {})
    overrides[tag] = Implementation(tag=tag, func=func, kind=OVERRIDE, source="instance")
    namespace[INSTANCE_OVERRIDES_ATTR] = overrides


class Surface:
    """Receiver-style view of a value: ``surface(v)[Seq.head]()`` or ``surface(v).head()``."""

    __slots__ = ("_value", "_context")

    def __init__(self, value: Any, context: DispatchContext | None = None) -> None:
        self._value = value
        self._context = context

    def __getitem__(self, key: Any) -> BoundOperation:
        return resolve(self._value, key, context=self._context)

    def __contains__(self, key: Any) -> bool:
        return find_implementation(self._value, key, context=self._context) is not None

    def tags(self) -> tuple[OperationTag, ...]:
        """Every tag the value resolves, instance overrides first."""
        seen: dict[OperationTag, None] = {}
        per_instance = _instance_overrides(self._value) or {}
        seen.update(dict.fromkeys(per_instance))
        ctx = self._context or get_current_context()
        table = ctx.table_for(type(self._value))
        if table is not None:
            seen.update(dict.fromkeys(table))
        return tuple(seen)

    def __getattr__(self, name: str) -> BoundOperation:
        if name.startswith("_"):
            raise AttributeError(name)
        matches = [t for t in self.tags() if t.name == name]
        if not matches:
            raise AttributeError(f"{type(self._value).__qualname__} resolves no operation named {name!r}")
        if len(matches) > 1:
            labels = ", ".join(t.label for t in matches)
            raise AmbiguousOperationError(f"{name!r} is ambiguous on {type(self._value).__qualname__}: {labels}")
        return resolve(self._value, matches[0], context=self._context)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"Surface({self._value!r})"


def surface(value: Any, *, context: DispatchContext | None = None) -> Surface:
    return Surface(value, context)
