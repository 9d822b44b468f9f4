import pytest

from protokit.core import conforms_to, define, implement, implemented_by, missing_operations, override_instance
from protokit.protocols import Eq, Functor, Ord, Sequential, Show


class Box:
    pass


@pytest.fixture
def Pair(ctx):
    return define("Pair", {"first": None, "second": None, "swap": lambda self: None})


def test_conforms_when_every_tag_resolves(Pair, ctx):
    implement(Box, Pair, overrides={Pair.first: lambda self: 1, Pair.second: lambda self: 2})

    assert conforms_to(Box(), Pair)
    assert Pair.member(Box())
    assert Pair.implemented_by(Box)
    assert implemented_by(Box, Pair)
    assert missing_operations(Box, Pair) == ()


def test_single_missing_required_tag_flips_conformance(Pair, ctx):
    implement(Box, Pair, overrides={Pair.first: lambda self: 1}, partial=True)

    assert not conforms_to(Box(), Pair)
    assert not Pair.implemented_by(Box)
    assert missing_operations(Box, Pair) == ("Pair.second",)


def test_instance_override_completes_a_single_value(Pair, ctx):
    implement(Box, Pair, overrides={Pair.first: lambda self: 1}, partial=True)
    complete = Box()
    override_instance(complete, Pair.second, lambda self: 2)

    assert conforms_to(complete, Pair)
    assert not conforms_to(Box(), Pair)
    assert not implemented_by(Box, Pair)


def test_unregistered_type_conforms_to_nothing(Pair, ctx):
    assert not conforms_to(Box(), Pair)
    assert missing_operations(Box, Pair) == ("Pair.first", "Pair.second", "Pair.swap")


def test_conformance_includes_inherited_operations(ctx):
    Child = define("ShowableEq", {"describe": lambda self: Show.show(self)}, Eq, Show)
    implement(Box, Child, overrides={Eq.equals: lambda self, other: self is other}, partial=True)

    assert not Child.member(Box())
    implement(Box, Child, overrides={Show.show: lambda self: "box"})
    assert Child.member(Box())
    assert Eq.member(Box())


def test_context_level_queries(Pair, ctx):
    implement(Box, Pair, overrides={Pair.first: lambda self: 1, Pair.second: lambda self: 2})

    assert ctx.conforms_to(Box(), Pair)
    assert ctx.implemented_by(Box, Pair)
    assert not ctx.parent.conforms_to(Box(), Pair)


@pytest.mark.parametrize(
    "value, protocol, expected",
    [
        ([], Functor, True),
        (None, Functor, True),
        (False, Functor, False),
        (1, Functor, False),
        ("abc", Sequential, True),
        ((1, 2), Sequential, True),
        (True, Ord, True),
        (1.5, Ord, True),
        (object(), Eq, False),
    ],
)
def test_builtin_capabilities(value, protocol, expected):
    assert protocol.member(value) is expected
