import pytest

from funlang.ast import Abs, App, If, Int, Let, Seq, TermStmt, Var, abs_, app, seq, var
from funlang.checker import type_of
from funlang.context import ProgramContext
from funlang.environment import Environment
from funlang.errors import Expected, Mismatch, Undefined
from funlang.types import BOOL, INT, UNIT, Func, func


@pytest.fixture
def prelude_types():
    return ProgramContext.default().types


def test_identity_has_arrow_type():
    assert type_of(Abs('x', INT, Var('x')), Environment()) == Func(INT, INT)


def test_application_of_non_function():
    with pytest.raises(Expected) as info:
        type_of(App(Int(1), Int(2)), Environment())
    assert info.value.description == 'arrow type'
    assert info.value.actual == INT
    assert str(info.value) == 'Expected arrow type but found "Int"'


def test_undefined_variable():
    with pytest.raises(Undefined) as info:
        type_of(Var('y'), Environment())
    assert info.value.name == 'y'
    assert str(info.value) == 'Variable "y" isn\'t defined'


def test_argument_mismatch(prelude_types):
    term = app('not', Int(1))
    with pytest.raises(Mismatch) as info:
        type_of(term, prelude_types)
    assert info.value.expected == BOOL
    assert info.value.actual == INT


def test_no_covariance_between_arrows():
    env = Environment().insert('f', func(func(INT, INT), INT)).insert('g', func(INT, BOOL))
    with pytest.raises(Mismatch):
        type_of(app('f', 'g'), env)


def test_multi_argument_application(prelude_types):
    assert type_of(app('add', Int(1), Int(2)), prelude_types) == INT
    assert type_of(app('add', Int(1)), prelude_types) == func(INT, INT)
    assert type_of(app('lt', Int(1), Int(2)), prelude_types) == BOOL


def test_if_requires_bool_condition():
    with pytest.raises(Mismatch) as info:
        type_of(If(Int(1), Int(2), Int(3)), Environment())
    assert info.value.expected == BOOL
    assert info.value.actual == INT


def test_if_branches_must_agree():
    env = Environment().insert('b', BOOL)
    with pytest.raises(Mismatch) as info:
        type_of(If(Var('b'), Int(1), Var('b')), env)
    assert (info.value.expected, info.value.actual) == (INT, BOOL)
    assert type_of(If(Var('b'), Int(1), Int(2)), env) == INT


def test_placeholder_parameter_binds_nothing():
    with pytest.raises(Undefined) as info:
        type_of(Abs('_', INT, Var('_')), Environment())
    assert info.value.name == '_'


def test_placeholder_does_not_shadow_outer_binding():
    env = Environment().insert('_', BOOL)
    assert type_of(Abs('_', INT, Var('_')), env) == Func(INT, BOOL)


def test_abstraction_parameter_shadows_outer():
    env = Environment().insert('x', BOOL)
    assert type_of(abs_([('x', INT)], 'x'), env) == Func(INT, INT)
    assert env.get('x') == BOOL


def test_empty_sequence_is_unit():
    assert type_of(Seq(()), Environment()) == UNIT


def test_sequence_type_is_last_statement():
    env = Environment().insert('b', BOOL)
    assert type_of(seq(Int(1), 'b'), env) == BOOL
    assert type_of(Seq((Let('a', Int(1)),)), env) == INT


def test_let_visible_to_later_statements_only():
    term = Seq((TermStmt(Var('a')), Let('a', Int(1))))
    with pytest.raises(Undefined):
        type_of(term, Environment())


def test_let_shadows_outer_binding():
    env = Environment().insert('a', BOOL)
    term = Seq((TermStmt(Var('a')), Let('a', Int(1)), TermStmt(Var('a'))))
    assert type_of(term, env) == INT
    before = Seq((TermStmt(Var('a')),))
    assert type_of(before, env) == BOOL


def test_let_does_not_leak_out_of_sequence():
    term = seq(seq(Let('inner', Int(1))), var('inner'))
    assert type_of(seq(Let('inner', Int(1))), Environment()) == INT
    with pytest.raises(Undefined):
        type_of(term, Environment())


def test_bare_statement_errors_still_reported():
    term = Seq((TermStmt(App(Int(1), Int(1))), TermStmt(Int(2))))
    with pytest.raises(Expected):
        type_of(term, Environment())
