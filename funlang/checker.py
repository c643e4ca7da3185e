"""Structural type checker.

`type_of` computes the type of a term under a type environment or raises
one of the `TypingError` subclasses. Types are compared by exact
structural equality; there is no inference, subtyping or conversion.
"""

from __future__ import annotations

from .ast import PLACEHOLDER, Abs, App, If, Int, Let, Node, Seq, TermStmt, Var
from .environment import TypeEnv
from .errors import Expected, Mismatch, Undefined
from .types import BOOL, INT, UNIT, Func, Typ


def type_of(term: Node, env: TypeEnv) -> Typ:
    if isinstance(term, Var):
        typ = env.get(term.name)
        if typ is None:
            raise Undefined(term.name)
        return typ
    if isinstance(term, Abs):
        body_env = env
        if term.param_name != PLACEHOLDER:
            body_env = env.insert(term.param_name, term.param_type)
        return Func(term.param_type, type_of(term.body, body_env))
    if isinstance(term, App):
        func_type = type_of(term.func, env)
        arg_type = type_of(term.arg, env)
        if not isinstance(func_type, Func):
            raise Expected('arrow type', func_type)
        if func_type.from_ != arg_type:
            raise Mismatch(func_type.from_, arg_type)
        return func_type.to
    if isinstance(term, Int):
        return INT
    if isinstance(term, If):
        cond_type = type_of(term.cond, env)
        if cond_type != BOOL:
            raise Mismatch(BOOL, cond_type)
        then_type = type_of(term.then, env)
        else_type = type_of(term.else_, env)
        if then_type != else_type:
            raise Mismatch(then_type, else_type)
        return then_type
    if isinstance(term, Seq):
        current: Typ = UNIT
        for stmt in term.stmts:
            if isinstance(stmt, Let):
                current = type_of(stmt.term, env)
                env = env.insert(stmt.name, current)
            elif isinstance(stmt, TermStmt):
                current = type_of(stmt.term, env)
            else:
                raise NotImplementedError(f"type_of: unexpected statement {type(stmt).__name__}")
        return current
    raise NotImplementedError(f"type_of: unexpected node type {type(term).__name__}")
