"""Environment-passing, call-by-value evaluator.

`evaluate` must only be called on terms that already type-checked against
a type environment matching the value environment. It trusts the checker
but keeps light tag checks: a violated precondition raises AssertionError,
which signals a defect in the checker or in context construction rather
than an error in the user's program.
"""

from __future__ import annotations

from typing import Any

from .ast import PLACEHOLDER, Abs, App, If, Int, Let, Node, Seq, TermStmt, Var
from .builtin_function import Native
from .environment import ValueEnv
from .types import UNIT_VALUE, Closure


def evaluate(term: Node, env: ValueEnv) -> Any:
    if isinstance(term, Var):
        value = env.get(term.name)
        if value is None:
            raise AssertionError(f"unbound variable {term.name} in a checked term")
        return value
    if isinstance(term, Abs):
        return Closure(env, term.param_name, term.body)
    if isinstance(term, App):
        func = evaluate(term.func, env)
        arg = evaluate(term.arg, env)
        return apply(func, arg)
    if isinstance(term, Int):
        return term.value
    if isinstance(term, If):
        cond = evaluate(term.cond, env)
        if not isinstance(cond, bool):
            raise AssertionError(f"non-boolean condition {cond!r} in a checked term")
        return evaluate(term.then if cond else term.else_, env)
    if isinstance(term, Seq):
        current: Any = UNIT_VALUE
        for stmt in term.stmts:
            if isinstance(stmt, Let):
                current = evaluate(stmt.term, env)
                env = env.insert(stmt.name, current)
            elif isinstance(stmt, TermStmt):
                current = evaluate(stmt.term, env)
            else:
                raise NotImplementedError(f"evaluate: unexpected statement {type(stmt).__name__}")
        return current
    raise NotImplementedError(f"evaluate: unexpected node type {type(term).__name__}")


def apply(func: Any, arg: Any) -> Any:
    """Apply a function value to an already evaluated argument."""
    if isinstance(func, Closure):
        env = func.env
        if func.param != PLACEHOLDER:
            env = env.insert(func.param, arg)
        return evaluate(func.body, env)
    if isinstance(func, Native):
        return func(arg)
    raise AssertionError(f"cannot apply non-function {func!r} in a checked term")
