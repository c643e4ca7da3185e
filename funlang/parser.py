"""Parser for the funlang surface syntax.

The source is fed into a Lark LALR parser configured with the grammar
below, and the resulting parse tree is turned into AST nodes by
`ASTTransformer`. A program is a list of `;`-terminated declarations:

    let inc = fun x:Int => add x 1;
    let main = fun _:Unit => print (inc 41);

`parse_program` is the public entry point; `parse_term` and `parse_type`
parse a single term or type, which is handy for hosts and tests.
"""

from __future__ import annotations

from lark import Lark, Transformer
from lark.exceptions import UnexpectedInput, VisitError

from .ast import (
    Abs, App, If, Int, Let, LetDecl, Program, Seq, TermStmt, TypeDecl, Var,
)
from .errors import ParseError
from .types import Atom, Func


FUN_GRAMMAR = r"""
    program: decl*

    ?decl: let_decl
         | type_decl
    let_decl: "let" IDENT "=" term ";"
    type_decl: "type" IDENT "=" typ ";"

    // Terms
    ?term: fun_expr
         | if_expr
         | app
    fun_expr: "fun" param ("," param)* "=>" term
    param: IDENT ":" typ
    if_expr: "if" term "then" term "else" term

    ?app: atom
        | app atom
    ?atom: IDENT -> var
         | INT -> int_lit
         | "(" term ")"
         | block
    block: "{" [stmt (";" stmt)* [";"]] "}"
    ?stmt: let_stmt
         | term -> term_stmt
    let_stmt: "let" IDENT "=" term

    // Types
    ?typ: atyp
        | atyp "->" typ -> arrow
    ?atyp: IDENT -> atom_type
         | "(" typ ")"

    // Tokens
    INT: /-?[0-9]+/
    %import common.CNAME -> IDENT
    %import common.WS
    %ignore WS

    // Comments
    LINE_COMMENT: /\/\/[^\n]*/
    %ignore LINE_COMMENT
"""


FUN_PARSER = Lark(
    FUN_GRAMMAR,
    start=['program', 'term', 'typ'],
    parser='lalr',
    propagate_positions=True,
    maybe_placeholders=False,
    lexer='basic',
)


class ASTTransformer(Transformer):
    """Transforms the raw parse tree into an AST."""

    def program(self, items):
        return Program(decls=tuple(items))

    def let_decl(self, items):
        return LetDecl(name=str(items[0]), term=items[1])

    def type_decl(self, items):
        return TypeDecl(name=str(items[0]), typ=items[1])

    def fun_expr(self, items):
        # items: param+, body
        body = items[-1]
        for name, typ in reversed(items[:-1]):
            body = Abs(name, typ, body)
        return body

    def param(self, items):
        return (str(items[0]), items[1])

    def if_expr(self, items):
        cond, then, else_ = items
        return If(cond, then, else_)

    def app(self, items):
        func, arg = items
        return App(func, arg)

    def var(self, items):
        return Var(str(items[0]))

    def int_lit(self, items):
        token = items[0]
        try:
            return Int(int(token.value))
        except ValueError as e:
            raise ParseError(str(e), token.line, token.column)

    def block(self, items):
        return Seq(tuple(items))

    def term_stmt(self, items):
        return TermStmt(items[0])

    def let_stmt(self, items):
        return Let(name=str(items[0]), term=items[1])

    def arrow(self, items):
        from_, to = items
        return Func(from_, to)

    def atom_type(self, items):
        return Atom(str(items[0]))


def _parse(source: str, start: str):
    try:
        tree = FUN_PARSER.parse(source, start=start)
    except UnexpectedInput as e:
        line = max(getattr(e, 'line', 0), 0)
        column = max(getattr(e, 'column', 0), 0)
        raise ParseError(f"unexpected {_describe(e)}", line, column) from e
    try:
        return ASTTransformer().transform(tree)
    except VisitError as e:
        if isinstance(e.orig_exc, ParseError):
            raise e.orig_exc from e
        raise


def _describe(e: UnexpectedInput) -> str:
    token = getattr(e, 'token', None)
    if token is not None:
        if token.type == '$END':
            return 'end of input'
        return repr(str(token))
    char = getattr(e, 'char', None)
    if char is not None:
        return repr(char)
    return 'input'


def parse_program(source: str) -> Program:
    """Parse funlang source code into a `Program`.

    Any syntax error is raised as a `ParseError` carrying its position.
    """
    return _parse(source, 'program')


def parse_term(source: str):
    return _parse(source, 'term')


def parse_type(source: str):
    return _parse(source, 'typ')
