import logging

import pytest

from protokit.core import (
    AmbiguousOperationError,
    DuplicateProtocolError,
    Operation,
    Protocol,
    ProtocolDefinitionError,
    ProtocolNotFoundError,
    alias,
    define,
    implement,
)
from protokit.protocols import Eq, Foldable, Monoid, Semigroup, Sequential


def test_define_exposes_operation_trampolines(ctx):
    P = define("Greeter", {"greet": None, "shout": lambda self: P.greet(self).upper()})

    assert isinstance(P, Protocol)
    assert isinstance(P.greet, Operation)
    assert P.greet.name == "greet"
    assert P.greet.label == "Greeter.greet"
    assert P.operation_names == ("greet", "shout")
    assert P.required_tags == (P.greet.tag,)
    assert P.declared_names == ("greet", "shout")


def test_define_registers_in_active_context(ctx):
    P = define("Registered", {"op": None})

    assert ctx.protocols.get("Registered") is P
    assert "Registered" in ctx.protocols
    assert "Eq" in ctx.protocols  # visible through the parent chain
    with pytest.raises(ProtocolNotFoundError):
        ctx.protocols.get("NeverDefined")


def test_duplicate_protocol_name_is_rejected(ctx):
    define("Once", {"op": None})

    with pytest.raises(DuplicateProtocolError):
        define("Once", {"op": None})
    with pytest.raises(DuplicateProtocolError):
        define("Eq", {"equals": None})


def test_inherited_operations_are_reachable_through_the_child(ctx):
    A = define("LevelA", {"a": None})
    B = define("LevelB", {"b": lambda self: "b"}, A)
    C = define("LevelC", {"c": lambda self: "c"}, B)

    assert C.a is A.a
    assert C.b is B.b
    assert set(C.tags) == {A.a.tag, B.b.tag, C.c.tag}
    assert C.extends(A) and C.extends(B)
    assert not A.extends(C)


def test_redeclared_name_reuses_parent_tag_and_replaces_default(ctx):
    def parent_default(self):
        return "parent"

    def child_default(self):
        return "child"

    Parent = define("Parent", {"describe": parent_default})
    Child = define("Child", {"describe": child_default}, Parent)

    assert Child.describe is Parent.describe
    (spec,) = Child.specs()
    assert spec.default is child_default
    assert spec.owner == "Child"


def test_child_can_make_parent_default_required(ctx):
    Parent = define("SoftParent", {"x": lambda self: 1})
    Child = define("StrictChild", {"x": None}, Parent)

    assert Child.required_tags == (Parent.x.tag,)
    assert Parent.required_tags == ()


def test_diamond_inheritance_deduplicates_tags(ctx):
    Root = define("DiamondRoot", {"root": None})
    Left = define("DiamondLeft", {"left": None}, Root)
    Right = define("DiamondRight", {"right": None}, Root)
    Bottom = define("DiamondBottom", {}, Left, Right)

    assert Bottom.tags.count(Root.root.tag) == 1
    assert len(Bottom.tags) == 3


def test_sequential_reuses_inherited_container_tags():
    assert Sequential.concat is Semigroup.concat
    assert Sequential.isempty is Monoid.isempty
    assert Sequential.reduce.tag is Foldable.reduce.tag
    assert "equals" not in Sequential.operation_names


def test_alias_registers_default_under_foreign_tag(ctx):
    Host = define("AliasHost", {"size": None})

    def is_blank(self):
        return True

    Guest = define("AliasGuest", {"blank": alias(Host.size, is_blank)})
    (spec,) = Guest.specs()

    assert spec.aliases == (Host.size.tag,)
    assert spec.default is is_blank


def test_tuple_alias_form(ctx):
    Host = define("TupleAliasHost", {"size": None})
    Guest = define("TupleAliasGuest", {"blank": (Host.size, lambda self: True)})

    assert Guest.specs()[0].aliases == (Host.size.tag,)


@pytest.mark.parametrize(
    "spec",
    [
        {"op": 42},
        {"op": "not callable"},
        {"op": ("not-a-tag", lambda self: None)},
        {"op": (None, None)},
        {"bad name": None},
        {"_private": None},
        {"name": None},
        {"member": None},
    ],
)
def test_malformed_specs_fail_at_definition_time(ctx, spec):
    with pytest.raises(ProtocolDefinitionError):
        define("Malformed", spec)


def test_alias_helper_validates_arguments():
    with pytest.raises(ProtocolDefinitionError):
        alias(lambda self: None)
    with pytest.raises(ProtocolDefinitionError):
        alias("nope", lambda self: None)
    with pytest.raises(ProtocolDefinitionError):
        alias(Eq.equals, "not callable")


def test_parents_must_be_protocols(ctx):
    with pytest.raises(ProtocolDefinitionError):
        define("Orphan", {"op": None}, "Eq")


def test_spec_must_be_a_mapping(ctx):
    with pytest.raises(ProtocolDefinitionError):
        define("ListSpec", ["op"])


def test_ambiguous_inherited_names(ctx):
    First = define("FirstSizer", {"size": None})
    Second = define("SecondSizer", {"size": None})
    Both = define("BothSizers", {}, First, Second)

    with pytest.raises(AmbiguousOperationError):
        Both.size
    with pytest.raises(ProtocolDefinitionError):
        define("OverridesBoth", {"size": lambda self: 0}, First, Second)


def test_protocols_are_immutable(ctx):
    P = define("Frozen", {"op": None})

    with pytest.raises(AttributeError):
        P.op = None
    with pytest.raises(AttributeError):
        P.missing


def test_alias_onto_inherited_operation_replaces_parent_default(ctx):
    Sized = define("Sized", {"size": lambda self: "parent"})
    Blank = define("Blank", {"blank": alias(Sized.size, lambda self: "child")}, Sized)

    class Thing:
        pass

    class Other:
        pass

    implement(Thing, Blank)
    implement(Other, Sized)

    assert Sized.size(Thing()) == "child"
    assert Blank.blank(Thing()) == "child"
    assert Sized.size(Other()) == "parent"


def test_alias_does_not_beat_an_explicit_redeclaration(ctx):
    Sized = define("SizedTwice", {"size": lambda self: "parent"})
    Child = define(
        "ExplicitSize",
        {"blank": alias(Sized.size, lambda self: "alias"), "size": lambda self: "declared"},
        Sized,
    )

    class Thing:
        pass

    implement(Thing, Child)

    assert Sized.size(Thing()) == "declared"
    assert Child.blank(Thing()) == "alias"


def test_diamond_logs_the_ignored_default(ctx, caplog):
    Top = define("DiamondTop", {"op": None})
    Left = define("DiamondLeftDefault", {"op": lambda self: "left"}, Top)
    Right = define("DiamondRightDefault", {"op": lambda self: "right"}, Top)

    with caplog.at_level(logging.DEBUG, logger="protokit.core.protocol"):
        Bottom = define("DiamondBottomDefault", {}, Left, Right)

    assert "DiamondTop.op keeps the default from DiamondLeftDefault" in caplog.text
    assert "DiamondRightDefault is ignored" in caplog.text

    class Thing:
        pass

    implement(Thing, Bottom)
    assert Bottom.op(Thing()) == "left"
