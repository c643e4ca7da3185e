"""Abstract Syntax Tree (AST) definitions for funlang.

Terms form an immutable tree: every node owns its subterms and nothing is
shared or cyclic. A parsed source file is a `Program`, an ordered list of
top-level declarations. The builder helpers at the bottom of the module
are the construction API for hosts that assemble terms directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple, Union

from .types import INT32_MAX, INT32_MIN, Typ

PLACEHOLDER = '_'


@dataclass(frozen=True)
class Node:
    """Base class for all AST nodes."""
    pass


@dataclass(frozen=True)
class Var(Node):
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Abs(Node):
    param_name: str
    param_type: Typ
    body: Node

    def __str__(self) -> str:
        return f"(fun {self.param_name}:{self.param_type} => {self.body})"


@dataclass(frozen=True)
class App(Node):
    func: Node
    arg: Node

    def __str__(self) -> str:
        return f"({self.func} {self.arg})"


@dataclass(frozen=True)
class Int(Node):
    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"integer literal must be an int, got {self.value!r}")
        if not INT32_MIN <= self.value <= INT32_MAX:
            raise ValueError(f"integer literal {self.value} does not fit in 32 bits")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class If(Node):
    cond: Node
    then: Node
    else_: Node

    def __str__(self) -> str:
        return f"(if {self.cond} then {self.then} else {self.else_})"


@dataclass(frozen=True)
class TermStmt(Node):
    term: Node

    def __str__(self) -> str:
        return str(self.term)


@dataclass(frozen=True)
class Let(Node):
    name: str
    term: Node

    def __str__(self) -> str:
        return f"let {self.name} = {self.term}"


Stmt = Union[TermStmt, Let]


@dataclass(frozen=True)
class Seq(Node):
    stmts: Tuple[Stmt, ...]

    def __str__(self) -> str:
        return '{' + '; '.join(str(s) for s in self.stmts) + '}'


Term = Union[Var, Abs, App, Int, If, Seq]


# Top-level declarations

@dataclass(frozen=True)
class LetDecl(Node):
    name: str
    term: Node


@dataclass(frozen=True)
class TypeDecl(Node):
    name: str
    typ: Typ


Decl = Union[LetDecl, TypeDecl]


@dataclass(frozen=True)
class Program(Node):
    decls: Tuple[Decl, ...]


# Builders

def var(name: str) -> Var:
    return Var(name)


def _term(node: Union[Node, str]) -> Node:
    return Var(node) if isinstance(node, str) else node


def abs_(params: List[Tuple[str, Typ]], body: Union[Node, str]) -> Node:
    """Build nested single-argument abstractions.

    `abs_([('x', INT), ('y', INT)], body)` is `fun x:Int => fun y:Int => body`.
    """
    if not params:
        raise ValueError('abs_ needs at least one parameter')
    result = _term(body)
    for name, typ in reversed(params):
        result = Abs(name, typ, result)
    return result


def app(func: Union[Node, str], *args: Union[Node, str]) -> Node:
    """Build a left-nested application; strings stand for variables."""
    result = _term(func)
    for arg in args:
        result = App(result, _term(arg))
    return result


def if_(cond: Union[Node, str], then: Union[Node, str], else_: Union[Node, str]) -> If:
    return If(_term(cond), _term(then), _term(else_))


def seq(*stmts: Union[Stmt, Node, str]) -> Seq:
    """Build a sequence; bare terms are wrapped into `TermStmt`."""
    wrapped = []
    for stmt in stmts:
        if isinstance(stmt, (TermStmt, Let)):
            wrapped.append(stmt)
        else:
            wrapped.append(TermStmt(_term(stmt)))
    return Seq(tuple(wrapped))
