import pytest

from protokit import Ordering
from protokit import boolean as Bool
from protokit.protocols import (
    DEFAULT,
    Bounded,
    BoundsError,
    Case,
    Enumerable,
    Logical,
    MissingCaseError,
    Numeric,
    Ord,
    Show,
)


# -- function module -----------------------------------------------------------

def test_logic_helpers():
    assert Bool.and_(True, False) is False
    assert Bool.or_(False, True) is True
    assert Bool.xor(True, True) is False
    assert Bool.xor(True, False) is True
    assert Bool.not_(False) is True


def test_helpers_are_curried():
    assert Bool.and_(True)(False) is False
    assert Bool.or_(False)(False) is False
    assert Bool.eq(True)(True) is True


def test_compare():
    assert Bool.compare(True, False) is Ordering.GT
    assert Bool.compare(False, True) is Ordering.LT
    assert Bool.compare(False, False) is Ordering.EQ


def test_int_conversion():
    assert Bool.from_int(0) is False
    assert Bool.from_int(5) is True
    assert Bool.to_int(True) == 1


def test_bounds_and_show():
    assert Bool.min_bound() is False
    assert Bool.max_bound() is True
    assert Bool.show(True) == "True"


def test_predicate_combinators():
    positive = lambda v: v > 0
    even = lambda v: v % 2 == 0

    assert Bool.both(positive, even)(4)
    assert not Bool.both(positive, even)(3)
    assert Bool.either(positive, even)(-2)
    assert Bool.neither(positive, even)(-3)
    assert Bool.either_exclusive(positive, even)(3)
    assert not Bool.either_exclusive(positive, even)(4)
    assert Bool.complement(positive)(-1)


def test_condition_picks_first_matching_branch():
    sizer = Bool.condition(
        (lambda v: v < 1, lambda v: "Too small."),
        (lambda v: v < 10, lambda v: "A big one!"),
        (Bool.T, lambda v: f"A {v} pounder!"),
    )

    assert sizer(0) == "Too small."
    assert sizer(5) == "A big one!"
    assert sizer(50) == "A 50 pounder!"
    assert Bool.condition((Bool.F, Bool.T))(1) is None


# -- protocol registrations ------------------------------------------------------

def test_bool_orders_false_below_true():
    assert Ord.compare(True, False) is Ordering.GT
    assert Ord.lt(False, True)
    assert Ord.max(False, True) is True
    assert Ord.equals(True, True)
    assert not Ord.equals(True, 1)


def test_bool_enumerable_bounds():
    assert Enumerable.next(False) is True
    assert Enumerable.prev(True) is False
    assert Enumerable.enum_to(False, True) == [False, True]
    with pytest.raises(BoundsError):
        Enumerable.next(True)
    with pytest.raises(ValueError):
        Enumerable.prev(False)


def test_bool_bounded_numeric_show():
    assert Bounded.min_bound(True) is False
    assert Bounded.max_bound(False) is True
    assert Numeric.to_number(True) == 1
    assert Numeric.from_number(False, 3) is True
    assert Show.show(False) == "False"


def test_bool_logical():
    assert Logical.and_(True, False) is False
    assert Logical.or_(False, True) is True
    assert Logical.xor(True, True) is False
    assert Logical.not_(True) is False
    assert Logical.to_false(True) is False


def test_bool_case():
    cases = {True: "yes", "false": "no"}

    assert Case.case(True, cases) == "yes"
    assert Case.case(False, cases) == "no"
    assert Case.case(False, {DEFAULT: lambda v: f"fallback {v}"}) == "fallback False"
    with pytest.raises(MissingCaseError):
        Case.case(True, {"false": "no"})


# -- Ordering ---------------------------------------------------------------------

@pytest.mark.parametrize("value, expected", [(-7, Ordering.LT), (0, Ordering.EQ), (0.5, Ordering.GT)])
def test_ordering_from_int(value, expected):
    assert Ordering.from_int(value) is expected


def test_ordering_invert():
    assert Ordering.LT.invert() is Ordering.GT
    assert Ordering.EQ.invert() is Ordering.EQ
    assert Ordering.GT.to_int() == 1
