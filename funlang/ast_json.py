"""JSON serialization/deserialization for funlang ASTs.

This module converts between funlang AST dataclasses and plain Python
dict/list structures suitable for JSON encoding. It covers programs,
declarations, statements, terms and types.
"""

from __future__ import annotations

from typing import Any, Dict

from .ast import (
    Abs,
    App,
    If,
    Int,
    Let,
    LetDecl,
    Program,
    Seq,
    TermStmt,
    TypeDecl,
    Var,
)
from .types import Atom, Func, Typ


def typ_to_obj(t: Typ) -> Dict[str, Any]:
    if isinstance(t, Func):
        return {"kind": "Func", "from": typ_to_obj(t.from_), "to": typ_to_obj(t.to)}
    return {"kind": "Atom", "name": t.name}


def typ_from_obj(o: Dict[str, Any]) -> Typ:
    if o["kind"] == "Func":
        return Func(typ_from_obj(o["from"]), typ_from_obj(o["to"]))
    if o["kind"] == "Atom":
        return Atom(o["name"])
    raise ValueError(f"Unknown type kind: {o['kind']}")


def ast_to_obj(node: Any) -> Any:
    if isinstance(node, (Atom, Func)):
        return {"__type__": "Typ", "value": typ_to_obj(node)}

    if isinstance(node, Program):
        return {"type": "Program", "decls": [ast_to_obj(d) for d in node.decls]}
    if isinstance(node, LetDecl):
        return {"type": "LetDecl", "name": node.name, "term": ast_to_obj(node.term)}
    if isinstance(node, TypeDecl):
        return {"type": "TypeDecl", "name": node.name, "typ": ast_to_obj(node.typ)}
    if isinstance(node, Var):
        return {"type": "Var", "name": node.name}
    if isinstance(node, Abs):
        return {
            "type": "Abs",
            "param_name": node.param_name,
            "param_type": ast_to_obj(node.param_type),
            "body": ast_to_obj(node.body),
        }
    if isinstance(node, App):
        return {"type": "App", "func": ast_to_obj(node.func), "arg": ast_to_obj(node.arg)}
    if isinstance(node, Int):
        return {"type": "Int", "value": node.value}
    if isinstance(node, If):
        return {
            "type": "If",
            "cond": ast_to_obj(node.cond),
            "then": ast_to_obj(node.then),
            "else": ast_to_obj(node.else_),
        }
    if isinstance(node, Seq):
        return {"type": "Seq", "stmts": [ast_to_obj(s) for s in node.stmts]}
    if isinstance(node, TermStmt):
        return {"type": "TermStmt", "term": ast_to_obj(node.term)}
    if isinstance(node, Let):
        return {"type": "Let", "name": node.name, "term": ast_to_obj(node.term)}

    raise TypeError(f"Unsupported node for serialization: {type(node).__name__}")


def ast_from_obj(obj: Any) -> Any:
    if not isinstance(obj, dict):
        raise TypeError("Invalid AST object")
    if obj.get("__type__") == "Typ":
        return typ_from_obj(obj["value"])
    t = obj.get("type")
    if t == "Program":
        return Program(decls=tuple(ast_from_obj(d) for d in obj["decls"]))
    if t == "LetDecl":
        return LetDecl(name=obj["name"], term=ast_from_obj(obj["term"]))
    if t == "TypeDecl":
        return TypeDecl(name=obj["name"], typ=ast_from_obj(obj["typ"]))
    if t == "Var":
        return Var(name=obj["name"])
    if t == "Abs":
        return Abs(
            param_name=obj["param_name"],
            param_type=ast_from_obj(obj["param_type"]),
            body=ast_from_obj(obj["body"]),
        )
    if t == "App":
        return App(func=ast_from_obj(obj["func"]), arg=ast_from_obj(obj["arg"]))
    if t == "Int":
        return Int(value=obj["value"])
    if t == "If":
        return If(
            cond=ast_from_obj(obj["cond"]),
            then=ast_from_obj(obj["then"]),
            else_=ast_from_obj(obj["else"]),
        )
    if t == "Seq":
        return Seq(stmts=tuple(ast_from_obj(s) for s in obj["stmts"]))
    if t == "TermStmt":
        return TermStmt(term=ast_from_obj(obj["term"]))
    if t == "Let":
        return Let(name=obj["name"], term=ast_from_obj(obj["term"]))

    raise ValueError(f"Unknown AST node type: {t}")
