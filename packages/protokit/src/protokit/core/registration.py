# protokit/core/registration.py
"""
Protocol registration: building a type's dispatch surface.

``implement(cls, *protocols)`` runs one explicit, ordered merge pass:

1. Overrides first: the ``overrides`` mapping, then ``@override`` methods along
   ``cls.__mro__`` (most derived first), then whatever the type's existing
   table already holds. A type without a table of its own starts from a copy
   of its nearest registered base's table. An override always beats a default.
2. Protocols in argument order. Each tag of a protocol's full operation set
   that is still unresolved receives the protocol's default (aliases too).
   The first resolution of a tag wins; later protocols never overwrite it.
3. Validation. Required operations that are still unresolved fail the whole
   registration with :class:`UnresolvedOperationError` unless ``partial=True``.
4. Publication. The merged table replaces the old one in a single swap, so a
   failed registration leaves the previous surface untouched.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, Iterable, Mapping

from protokit.conf import get_config
from protokit.tracing import filter_trace_attrs, registration_span

from .exceptions import RegistrationError, TagError, UnresolvedOperationError
from .protocol import Protocol
from .records import ImplementationRecord
from .table import DEFAULT, OVERRIDE, DispatchTable, Implementation
from .tags import OperationTag, coerce_tag

if TYPE_CHECKING:
    from .context import DispatchContext

logger = logging.getLogger(__name__)

__all__ = ["implement_into", "override", "OVERRIDE_ATTR"]

OVERRIDE_ATTR = "__protokit_override__"


def override(*operations: Any) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Mark a method as the type's own implementation of ``operations``.

        class Point:
            @override(Eq.equals)
            def equals(self, other): ...
    """
    try:
        tags = tuple(coerce_tag(op) for op in operations)
    except TagError as err:
        raise RegistrationError(f"@override expects operations or tags: {err}") from err
    if not tags:
        raise RegistrationError("@override needs at least one operation")

    def _apply(func: Callable[..., Any]) -> Callable[..., Any]:
        existing = getattr(func, OVERRIDE_ATTR, ())
        setattr(func, OVERRIDE_ATTR, tuple(existing) + tags)
        return func

    return _apply


def _class_overrides(cls: type) -> Iterable[tuple[OperationTag, Callable[..., Any], str]]:
    for klass in cls.__mro__:
        for attr, member in vars(klass).items():
            for tag in getattr(member, OVERRIDE_ATTR, ()):
                yield tag, member, f"{klass.__qualname__}.{attr}"


def _explicit_overrides(cls: type, overrides: Mapping[Any, Callable[..., Any]]) -> Iterable[tuple[OperationTag, Callable[..., Any]]]:
    for key, func in overrides.items():
        try:
            tag = coerce_tag(key)
        except TagError as err:
            raise RegistrationError(f"{cls.__qualname__}: invalid override key: {err}") from err
        if not callable(func):
            raise RegistrationError(f"{cls.__qualname__}: override for {tag.label} is not callable: {func!r}")
        yield tag, func


def implement_into(
    context: DispatchContext,
    cls: type,
    protocols: Iterable[Protocol],
    *,
    overrides: Mapping[Any, Callable[..., Any]] | None = None,
    partial: bool = False,
) -> DispatchTable:
    """Merge ``protocols`` (and overrides) onto the dispatch surface of ``cls`` in ``context``."""
    if not isinstance(cls, type):
        raise RegistrationError(f"implement() expects a class, got {cls!r}")
    protocols = tuple(protocols)
    for protocol in protocols:
        if not isinstance(protocol, Protocol):
            raise RegistrationError(f"implement({cls.__qualname__}, ...) expects Protocols, got {protocol!r}")

    config = get_config()
    entries: dict[OperationTag, Implementation] = {}

    # 1) overrides
    for tag, func in _explicit_overrides(cls, overrides or {}):
        entries[tag] = Implementation(tag=tag, func=func, kind=OVERRIDE, source=cls.__qualname__)
    for tag, func, source in _class_overrides(cls):
        entries.setdefault(tag, Implementation(tag=tag, func=func, kind=OVERRIDE, source=source))

    existing = context.types.table_for_type(cls)
    # a first registration starts from the nearest registered base's table
    base = existing if existing is not None else context.table_for(cls)
    if base is not None:
        for tag, impl in base.entries.items():
            entries.setdefault(tag, impl)
    new_overrides = tuple(t.label for t, impl in entries.items() if impl.is_override)

    # 2) defaults, first resolution wins
    installed: list[str] = []
    for protocol in protocols:
        for spec in protocol.specs():
            if spec.default is None:
                continue
            for tag in (spec.tag, *spec.aliases):
                if tag not in entries:
                    entries[tag] = Implementation(tag=tag, func=spec.default, kind=DEFAULT, source=spec.owner)
                    installed.append(tag.label)

    # 3) validation, after every protocol had its chance
    missing_by_protocol = {
        protocol.name: [spec for spec in protocol.specs() if spec.tag not in entries]
        for protocol in protocols
    }
    missing = [
        (spec.owner, spec.name)
        for specs in missing_by_protocol.values()
        for spec in specs
    ]
    if missing and not partial:
        raise UnresolvedOperationError(type_=cls, missing=dict.fromkeys(missing))

    claims = dict(base.claims) if base is not None else {}
    for protocol in protocols:
        claims[protocol.name] = claims.get(protocol.name, False) or not missing_by_protocol[protocol.name]

    table = DispatchTable(cls, entries, claims)
    record = ImplementationRecord(
        type=cls,
        protocols=tuple(p.name for p in protocols),
        partial=bool(missing),
        overrides=new_overrides,
        defaults=tuple(installed),
    )

    # 4) publish
    span_attrs = filter_trace_attrs(
        {
            "protokit.type": cls.__qualname__,
            "protokit.protocols": list(record.protocols),
            "protokit.partial": record.partial,
            "protokit.overrides": list(record.overrides),
            "protokit.defaults": list(record.defaults),
            "protokit.context": context.name,
            "protokit.module": cls.__module__,
        },
        config.trace_level,
    )
    if config.trace_registration:
        with registration_span(f"protokit.implement ({cls.__qualname__})", attributes=span_attrs):
            context.types.publish(cls, table, record)
    else:
        context.types.publish(cls, table, record)

    log = logger.info if config.log_registrations else logger.debug
    log("[IMPLEMENT] ✅ %s implements %s", cls.__qualname__, ", ".join(record.protocols) or "<overrides>")
    if missing:
        logger.warning(
            "[IMPLEMENT] %s partially implements %s; unresolved: %s",
            cls.__qualname__,
            ", ".join(name for name, specs in missing_by_protocol.items() if specs),
            ", ".join(f"{o}.{n}" for o, n in missing),
        )
    return table
