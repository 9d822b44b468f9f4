import logging

import pytest

from protokit.core import (
    RegistrationError,
    RegistryFrozenError,
    UnresolvedOperationError,
    alias,
    define,
    implement,
    override,
    register,
)
from protokit.protocols import Eq, Sequential, Show


@pytest.fixture
def Describe(ctx):
    def describe(self):
        return f"<{proto.name_of(self)}>"

    proto = define("Describe", {"name_of": None, "describe": describe})
    return proto


class Widget:
    pass


def test_defaults_fill_unresolved_tags(Describe, ctx):
    table = implement(Widget, Describe, overrides={Describe.name_of: lambda self: "widget"})

    assert Describe.describe(Widget()) == "<widget>"
    assert table.get(Describe.describe.tag).kind == "default"
    assert table.get(Describe.name_of.tag).kind == "override"
    assert table.claims == {"Describe": True}


def test_override_beats_default_from_mapping(Describe, ctx):
    implement(
        Widget,
        Describe,
        overrides={
            Describe.name_of: lambda self: "widget",
            Describe.describe: lambda self: "custom",
        },
    )

    assert Describe.describe(Widget()) == "custom"


def test_override_beats_default_from_class_body(Describe, ctx):
    class Gadget:
        @override(Describe.name_of)
        def label(self):
            return "gadget"

        @override(Describe.describe)
        def render(self):
            return "rendered gadget"

    implement(Gadget, Describe)

    assert Describe.name_of(Gadget()) == "gadget"
    assert Describe.describe(Gadget()) == "rendered gadget"


def test_override_registered_after_default_still_wins(Describe, ctx):
    implement(Widget, Describe, overrides={Describe.name_of: lambda self: "w"})
    assert Describe.describe(Widget()) == "<w>"

    register(Widget, {Describe.describe: lambda self: "late override"})

    assert Describe.describe(Widget()) == "late override"


def test_class_overrides_are_inherited_by_subclasses(Describe, ctx):
    class Base:
        @override(Describe.name_of)
        def name_of(self):
            return "base"

    class Derived(Base):
        pass

    implement(Derived, Describe)

    assert Describe.describe(Derived()) == "<base>"


def test_unresolved_required_operation_fails_registration(Describe, ctx):
    with pytest.raises(UnresolvedOperationError) as excinfo:
        implement(Widget, Describe)

    err = excinfo.value
    assert err.type is Widget
    assert err.missing == (("Describe", "name_of"),)
    assert "Describe.name_of" in str(err)
    # nothing was published
    assert ctx.types.own_table(Widget) is None


def test_failed_registration_leaves_previous_table_untouched(ctx):
    Small = define("SmallProto", {"one": None})
    Big = define("BigProto", {"two": None})
    implement(Widget, Small, overrides={Small.one: lambda self: 1})
    before = ctx.types.own_table(Widget)

    with pytest.raises(UnresolvedOperationError):
        implement(Widget, Big)

    assert ctx.types.own_table(Widget) is before


def test_later_protocol_can_resolve_required_operation_of_earlier_one(ctx):
    Needs = define("Needs", {"size": None})
    Gives = define("Gives", {"blank": alias(Needs.size, lambda self: 0)})

    implement(Widget, Needs, Gives)

    assert Needs.size(Widget()) == 0
    assert Gives.blank(Widget()) == 0


def test_first_resolution_wins_between_protocol_defaults(ctx):
    Parent = define("FirstParent", {"who": lambda self: "parent"})
    Child = define("FirstChild", {"who": lambda self: "child"}, Parent)

    class ParentFirst:
        pass

    class ChildFirst:
        pass

    implement(ParentFirst, Parent, Child)
    implement(ChildFirst, Child, Parent)

    assert Parent.who(ParentFirst()) == "parent"
    assert Parent.who(ChildFirst()) == "child"


def test_partial_registration_is_explicit_and_recorded(Describe, ctx, caplog):
    with caplog.at_level(logging.WARNING, logger="protokit.core.registration"):
        table = implement(Widget, Describe, partial=True)

    assert table.claims == {"Describe": False}
    assert Describe.describe.tag in table
    assert Describe.name_of.tag not in table
    assert "partially implements Describe" in caplog.text
    assert ctx.records()[-1].partial is True


def test_each_type_owns_its_table(Describe, ctx):
    class Left:
        pass

    class Right:
        pass

    left = implement(Left, Describe, overrides={Describe.name_of: lambda self: "l"})
    right = implement(Right, Describe, overrides={Describe.name_of: lambda self: "r"})

    assert left is not right
    assert left.owner is Left and right.owner is Right
    assert Describe.describe(Left()) == "<l>"
    assert Describe.describe(Right()) == "<r>"


def test_records_capture_registration(Describe, ctx):
    implement(Widget, Describe, overrides={Describe.name_of: lambda self: "w"})

    (record,) = ctx.records()
    assert record.type is Widget
    assert record.protocols == ("Describe",)
    assert record.overrides == ("Describe.name_of",)
    assert record.defaults == ("Describe.describe",)
    assert record.label == "Widget: Describe"


def test_registration_logs_at_info(Describe, ctx, caplog, settings):
    settings["LOG_REGISTRATIONS"] = True
    with caplog.at_level(logging.INFO, logger="protokit.core.registration"):
        implement(Widget, Describe, overrides={Describe.name_of: lambda self: "w"})

    assert "[IMPLEMENT]" in caplog.text
    assert "Widget implements Describe" in caplog.text


def test_registration_without_tracing(Describe, ctx, settings):
    settings["TRACE_REGISTRATION"] = False

    implement(Widget, Describe, overrides={Describe.name_of: lambda self: "w"})

    assert Describe.describe(Widget()) == "<w>"


def test_frozen_context_rejects_registration(Describe, ctx):
    ctx.finalize()

    with pytest.raises(RegistryFrozenError):
        implement(Widget, Describe, overrides={Describe.name_of: lambda self: "w"})
    with pytest.raises(RegistryFrozenError):
        define("TooLate", {"op": None})


def test_finalize_without_freezing(Describe, ctx, settings):
    settings["FREEZE_ON_FINALIZE"] = False
    ctx.finalize()

    implement(Widget, Describe, overrides={Describe.name_of: lambda self: "w"})
    assert not ctx.types.frozen


@pytest.mark.parametrize(
    "call",
    [
        lambda P: implement(Widget(), P),
        lambda P: implement(Widget, "Describe"),
        lambda P: implement(Widget, P, overrides={"name_of": lambda self: "w"}),
        lambda P: implement(Widget, P, overrides={P.name_of: "w"}),
    ],
)
def test_invalid_registration_arguments(Describe, ctx, call):
    with pytest.raises(RegistrationError):
        call(Describe)


def test_override_decorator_requires_operations():
    with pytest.raises(RegistrationError):
        override()
    with pytest.raises(RegistrationError):
        override("equals")


def test_registering_a_subclass_keeps_base_capabilities(ctx):
    class Stack(list):
        pass

    assert Sequential.head(Stack([1, 2])) == 1

    table = implement(Stack, Show, overrides={Show.show: lambda self: f"Stack{list(self)}"})

    assert Show.show(Stack([1])) == "Stack[1]"
    assert Sequential.head(Stack([1, 2])) == 1
    assert Eq.equals(Stack([1]), Stack([1]))
    assert Sequential.member(Stack())
    assert table.claims["Sequential"] is True
    assert table.get(Sequential.at.tag).kind == "override"


def test_subclass_of_user_type_starts_from_base_table(Describe, ctx):
    implement(Widget, Describe, overrides={Describe.name_of: lambda self: "widget"})

    class Gizmo(Widget):
        pass

    Extra = define("GizmoExtra", {"spin": None})
    implement(Gizmo, Extra, overrides={Extra.spin: lambda self: "spinning"})

    assert Describe.describe(Gizmo()) == "<widget>"
    assert Extra.spin(Gizmo()) == "spinning"
    with pytest.raises(NotImplementedError):
        Extra.spin(Widget())
