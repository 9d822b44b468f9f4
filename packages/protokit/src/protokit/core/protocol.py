# protokit/core/protocol.py
"""
Protocol definition.

A :class:`Protocol` is an immutable, named set of operations. Each operation
is identified by an :class:`~protokit.core.tags.OperationTag` and either has
a default implementation or is *required* (the registering type must supply
it). Protocols may extend any number of parents; the full operation set is
the union of the inherited operations and the declared ones.

Usage
-----
    Eq = define("Eq", {
        "equals": None,
        "not_equals": lambda self, other: not Eq.equals(self, other),
    })

    Ord = define("Ord", {"lte": None, ...}, Eq)

    Eq.equals(a, b)         # dispatches on ``a``
    Ord.equals(a, b)        # inherited operations resolve through the child too

Key behaviors
-------------
- Every newly declared operation gets a freshly allocated tag; tags are never
  shared by accident, even when names repeat across protocols.
- Declaring a name a parent already declares re-uses the parent's tag: the
  child overrides the parent's default (or makes it required).
- ``alias(tag, fn)`` installs the same default under an extra, existing tag.
  When that tag is inherited, the alias replaces the parent's default.
- Malformed specs fail here, at definition time, never at dispatch time.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Callable, Iterable, Mapping

from .capability import conforms_to, implemented_by
from .context import get_current_context
from .dispatch import invoke, resolve
from .exceptions import AmbiguousOperationError, ProtocolDefinitionError, TagError
from .tags import OperationTag, allocate, coerce_tag, validate_name

if TYPE_CHECKING:
    from .dispatch import BoundOperation
    from .registry import ProtocolRegistry

logger = logging.getLogger(__name__)

__all__ = ["Alias", "Operation", "OperationSpec", "Protocol", "alias", "define"]


# -----------------------------------------------------------------------------
# Spec entries
# -----------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Alias:
    """Default implementation also installed under existing foreign tags."""

    targets: tuple[OperationTag, ...]
    default: Callable[..., Any]


def alias(*args: Any) -> Alias:
    """``alias(target, [target, ...], fn)``: register ``fn`` under extra tags."""
    if len(args) < 2:
        raise ProtocolDefinitionError("alias() needs at least one target and a default implementation")
    *targets, default = args
    if not callable(default):
        raise ProtocolDefinitionError(f"alias() default must be callable, got {default!r}")
    try:
        tags = tuple(coerce_tag(t) for t in targets)
    except TagError as err:
        raise ProtocolDefinitionError(f"alias() target is not a tag: {err}") from err
    return Alias(targets=tags, default=default)


@dataclass(frozen=True, slots=True)
class OperationSpec:
    """One entry of a protocol's full operation set."""

    name: str
    tag: OperationTag
    default: Callable[..., Any] | None
    owner: str
    aliases: tuple[OperationTag, ...] = ()

    @property
    def required(self) -> bool:
        return self.default is None


# -----------------------------------------------------------------------------
# Operation trampoline
# -----------------------------------------------------------------------------

class Operation:
    """Callable front for one tag: ``op(value, *args)`` dispatches on ``value``."""

    __slots__ = ("tag", "doc")

    def __init__(self, tag: OperationTag, doc: str | None = None) -> None:
        self.tag = tag
        self.doc = doc

    @property
    def name(self) -> str:
        return self.tag.name

    @property
    def label(self) -> str:
        return self.tag.label

    def __call__(self, value: Any, *args: Any, **kwargs: Any) -> Any:
        return invoke(value, self.tag, args, kwargs)

    def resolve(self, value: Any) -> BoundOperation:
        """Return this operation's implementation bound to ``value``."""
        return resolve(value, self.tag)

    def __repr__(self) -> str:
        return f"<Operation {self.tag.label}>"


# -----------------------------------------------------------------------------
# Protocol
# -----------------------------------------------------------------------------

_RESERVED = frozenset({
    "name", "parents", "tags", "specs", "operation", "operation_names", "required_tags",
    "extends", "member", "implemented_by", "declared_names",
})


class Protocol:
    """Immutable, named collection of operations."""

    def __init__(
        self,
        name: str,
        specs: Mapping[OperationTag, OperationSpec],
        operations: Mapping[OperationTag, Operation],
        parents: tuple[Protocol, ...],
        declared: tuple[str, ...],
        doc: str | None = None,
    ) -> None:
        by_name: dict[str, list[OperationTag]] = {}
        for tag, spec in specs.items():
            by_name.setdefault(spec.name, []).append(tag)

        object.__setattr__(self, "name", name)
        object.__setattr__(self, "parents", parents)
        object.__setattr__(self, "_specs", dict(specs))
        object.__setattr__(self, "_operations", dict(operations))
        object.__setattr__(self, "_by_name", {k: tuple(v) for k, v in by_name.items()})
        object.__setattr__(self, "declared_names", declared)
        object.__setattr__(self, "__doc__", doc)

    def __setattr__(self, key: str, value: Any) -> None:
        raise AttributeError(f"Protocol {self.name} is immutable")

    # ------------------- Operation access -------------------
    def __getattr__(self, item: str) -> Operation:
        if item.startswith("_"):
            raise AttributeError(item)
        return self.operation(item)

    def operation(self, name: str) -> Operation:
        tags = self._by_name.get(name)
        if not tags:
            raise AttributeError(f"Protocol {self.name} has no operation {name!r}")
        if len(tags) > 1:
            labels = ", ".join(t.label for t in tags)
            raise AmbiguousOperationError(
                f"{self.name}.{name} is ambiguous; it is inherited as {labels}"
            )
        return self._operations[tags[0]]

    def __iter__(self):
        return iter(self._operations.values())

    def __dir__(self) -> Iterable[str]:
        return sorted(set(super().__dir__()) | set(self._by_name))

    # ------------------- Introspection -------------------
    @property
    def tags(self) -> tuple[OperationTag, ...]:
        """Every tag in the full (inherited + declared) operation set."""
        return tuple(self._specs)

    @property
    def required_tags(self) -> tuple[OperationTag, ...]:
        return tuple(t for t, s in self._specs.items() if s.required)

    @property
    def operation_names(self) -> tuple[str, ...]:
        return tuple(self._by_name)

    def specs(self) -> tuple[OperationSpec, ...]:
        return tuple(self._specs.values())

    def extends(self, other: Protocol) -> bool:
        """True when ``other`` is a (transitive) parent of this protocol."""
        return any(p is other or p.extends(other) for p in self.parents)

    # ------------------- Capability checks -------------------
    def member(self, value: Any) -> bool:
        """True when ``value`` resolves every operation of this protocol."""
        return conforms_to(value, self)

    def implemented_by(self, cls: type) -> bool:
        """True when instances of ``cls`` resolve every operation of this protocol."""
        return implemented_by(cls, self)

    def __repr__(self) -> str:
        return f"<Protocol {self.name}>"


# -----------------------------------------------------------------------------
# define()
# -----------------------------------------------------------------------------

def _parse_entry(protocol_name: str, op_name: str, value: Any) -> tuple[Callable | None, tuple[OperationTag, ...]]:
    if value is None:
        return None, ()
    if isinstance(value, Alias):
        return value.default, value.targets
    if isinstance(value, (tuple, list)):
        if len(value) != 2 or not callable(value[1]):
            raise ProtocolDefinitionError(
                f"{protocol_name}.{op_name}: alias entries must be (tag, function) pairs, got {value!r}"
            )
        try:
            return value[1], (coerce_tag(value[0]),)
        except TagError as err:
            raise ProtocolDefinitionError(f"{protocol_name}.{op_name}: {err}") from err
    if callable(value):
        return value, ()
    raise ProtocolDefinitionError(
        f"{protocol_name}.{op_name}: expected None, a function, or an alias; got {type(value).__name__}"
    )


def _linearize(name: str, parents: tuple[Protocol, ...]) -> tuple[dict[OperationTag, OperationSpec], dict[OperationTag, Operation]]:
    """Inherited specs, depth first and left to right; the first parent to supply a tag wins."""
    specs: dict[OperationTag, OperationSpec] = {}
    operations: dict[OperationTag, Operation] = {}
    for parent in parents:
        for spec in parent.specs():
            if spec.tag not in specs:
                specs[spec.tag] = spec
                operations[spec.tag] = parent._operations[spec.tag]
            elif spec.default is not specs[spec.tag].default:
                logger.debug(
                    "%s: %s keeps the default from %s; the one from %s is ignored",
                    name,
                    spec.tag.label,
                    specs[spec.tag].owner,
                    spec.owner,
                )
    return specs, operations


def define(
    name: str,
    spec: Mapping[str, Any] | None = None,
    *parents: Protocol,
    registry: ProtocolRegistry | None = None,
    doc: str | None = None,
) -> Protocol:
    """Define and register a new protocol.

    :param name: Protocol name, unique within the active protocol registry chain.
    :param spec: ``{operation_name: None | function | alias(...) | (tag, function)}``.
    :param parents: Protocols whose operations this one includes.
    :param registry: Protocol registry to record into (defaults to the active context's).
    :raises ProtocolDefinitionError: On any malformed input.
    """
    try:
        validate_name(name.replace(".", "_") if isinstance(name, str) else name, "protocol name")
    except TagError as err:
        raise ProtocolDefinitionError(str(err)) from err
    if spec is not None and not isinstance(spec, Mapping):
        raise ProtocolDefinitionError(f"{name}: operation spec must be a mapping, got {type(spec).__name__}")
    for parent in parents:
        if not isinstance(parent, Protocol):
            raise ProtocolDefinitionError(f"{name}: parents must be Protocols, got {parent!r}")

    specs, operations = _linearize(name, tuple(parents))
    inherited_by_name: dict[str, set[OperationTag]] = {}
    for tag, s in specs.items():
        inherited_by_name.setdefault(s.name, set()).add(tag)

    declared: list[str] = []
    for op_name, value in (spec or {}).items():
        try:
            validate_name(op_name, "operation name")
        except TagError as err:
            raise ProtocolDefinitionError(f"{name}: {err}") from err
        if op_name.startswith("_"):
            raise ProtocolDefinitionError(f"{name}: operation names may not start with an underscore: {op_name!r}")
        if op_name in _RESERVED:
            raise ProtocolDefinitionError(f"{name}: operation name {op_name!r} is reserved")

        default, aliases = _parse_entry(name, op_name, value)

        inherited = inherited_by_name.get(op_name, set())
        if len(inherited) > 1:
            raise ProtocolDefinitionError(
                f"{name}.{op_name} would override several inherited operations: "
                + ", ".join(sorted(t.label for t in inherited))
            )
        if inherited:
            (tag,) = inherited
        else:
            tag = allocate(op_name, owner=name)
            operations[tag] = Operation(tag, doc=getattr(default, "__doc__", None))

        specs[tag] = OperationSpec(
            name=op_name,
            tag=tag,
            default=default,
            owner=name,
            aliases=tuple(a for a in aliases if a is not tag),
        )
        declared.append(op_name)

    # an alias onto an inherited operation replaces that operation's default
    declared_tags = {s.tag for s in specs.values() if s.owner == name}
    for s in list(specs.values()):
        if s.owner != name or s.default is None:
            continue
        for target in s.aliases:
            if target in specs and target not in declared_tags:
                specs[target] = replace(specs[target], default=s.default, owner=name)
                declared_tags.add(target)

    protocol = Protocol(
        name,
        specs=specs,
        operations=operations,
        parents=tuple(parents),
        declared=tuple(declared),
        doc=doc,
    )

    if registry is None:
        registry = get_current_context().protocols
    registry.register(protocol)

    logger.debug(
        "defined protocol %s (%d operations, parents=%s)",
        name,
        len(specs),
        ",".join(p.name for p in parents) or "-",
    )
    return protocol
