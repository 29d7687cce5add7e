import math

import pytest
from hypothesis import given, strategies as st

from mclisp import primitives
from mclisp.builtin.env_builtin import PRIMITIVE_FUNCTIONS
from mclisp.types.constants import TRUE, FALSE, Undefined
from mclisp.types.errors import McLispArityError, McLispBadArgument, McLispTypeError
from mclisp.types.function import Function
from mclisp.types.nil import Nil
from mclisp.types.pair import Pair, make_list
from mclisp.types.symbol import Symbol

a, b, c = Symbol("a"), Symbol("b"), Symbol("c")


def test_cons_car_cdr():
    p = primitives.cons(a, b)
    assert isinstance(p, Pair)
    assert primitives.car(p) is a
    assert primitives.cdr(p) is b


@pytest.mark.parametrize("left,right", [(None, a), (a, None), (None, None)])
def test_cons_rejects_missing_argument(left, right):
    with pytest.raises(McLispBadArgument):
        primitives.cons(left, right)


@pytest.mark.parametrize("value", [Nil, a, 1, 2.5, TRUE, "s", Undefined])
def test_car_cdr_of_atom_is_type_error(value):
    with pytest.raises(McLispTypeError):
        primitives.car(value)
    with pytest.raises(McLispTypeError):
        primitives.cdr(value)


@pytest.mark.parametrize("value", [Nil, a, 0, -3, 1.5, TRUE, FALSE, "text", Function("f", lambda args: Nil)])
def test_atom_true_for_non_pairs(value):
    assert primitives.atom(value) is TRUE


def test_atom_false_for_pairs_and_undefined():
    assert primitives.atom(make_list([a])) is FALSE
    assert primitives.atom(Undefined) is FALSE


@pytest.mark.parametrize(
    "left,right,expected",
    [
        (a, Symbol("a"), TRUE),
        (a, b, FALSE),
        (Nil, Nil, TRUE),
        (1, 1, TRUE),
        (1, 2, FALSE),
        (1, 1.0, FALSE),  # kinds differ
        (2.5, 2.5, TRUE),
        (TRUE, TRUE, TRUE),
        (TRUE, FALSE, FALSE),
        ("abc", "abc", TRUE),
        ("abc", a, FALSE),
        (Symbol("abc"), "abc", FALSE),
        (Nil, FALSE, FALSE),
        (Undefined, Undefined, FALSE),
        (a, Undefined, FALSE),
        (make_list([a]), make_list([a]), FALSE),
    ],
)
def test_eq_table(left, right, expected):
    assert primitives.eq(left, right) is expected


def test_eq_same_pair_is_still_false():
    p = make_list([a, b])
    assert primitives.eq(p, p) is FALSE


def test_eq_nan_is_eq_to_itself():
    assert primitives.eq(math.nan, math.nan) is TRUE


def test_checked_eq_requires_both_arguments():
    with pytest.raises(McLispArityError):
        primitives.checked_eq(a, None)
    assert primitives.checked_eq(a, a) is TRUE


def test_primitive_functions_take_argument_lists():
    assert PRIMITIVE_FUNCTIONS["car"](make_list([make_list([a, b])])) is a
    assert PRIMITIVE_FUNCTIONS["cdr"](make_list([make_list([a, b])])) == make_list([b])
    assert PRIMITIVE_FUNCTIONS["cons"](make_list([a, b])) == Pair(a, b)
    assert PRIMITIVE_FUNCTIONS["atom"](make_list([a])) is TRUE
    assert PRIMITIVE_FUNCTIONS["eq?"](make_list([a, a])) is TRUE


@pytest.mark.parametrize(
    "name,args",
    [
        ("car", Nil),
        ("car", make_list([a, b])),
        ("cons", make_list([a])),
        ("eq?", make_list([a, b, c])),
        ("atom", Pair(a, b)),
    ],
)
def test_primitive_functions_check_arity(name, args):
    with pytest.raises(McLispArityError):
        PRIMITIVE_FUNCTIONS[name](args)


# -------------------------------
# Hypothesis: invariants
# -------------------------------
atom_strat = st.one_of(
    st.integers(min_value=-(2**63), max_value=2**63 - 1),
    st.floats(allow_nan=True, allow_infinity=True),
    st.text(max_size=10),
    st.text(min_size=1, max_size=10).map(Symbol),
    st.sampled_from([Nil, TRUE, FALSE]),
)

value_strat = st.recursive(
    atom_strat,
    lambda children: st.tuples(children, children).map(lambda ab: Pair(*ab)),
    max_leaves=10,
)


@given(atom_strat)
def test_atom_holds_for_every_atom(x):
    assert primitives.atom(x) is TRUE


@given(atom_strat)
def test_eq_is_reflexive_on_atoms(x):
    assert primitives.eq(x, x) is TRUE


@given(value_strat, value_strat)
def test_car_cdr_of_cons(x, y):
    p = primitives.cons(x, y)
    assert primitives.car(p) is x
    assert primitives.cdr(p) is y


@given(value_strat, value_strat)
def test_eq_is_symmetric(x, y):
    assert primitives.eq(x, y) is primitives.eq(y, x)
