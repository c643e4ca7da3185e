"""Declaration driver for funlang programs.

The `Interpreter` owns the initial `ProgramContext` (the standard prelude
plus the I/O natives and anything a host registers) and folds the
declarations of a parsed program into it, one `let` at a time. Each
declaration is type checked and evaluated eagerly; the entry point is
checked against `Unit -> Unit` and applied to the unit value once every
other declaration has been processed.
"""

from __future__ import annotations

from typing import Any, Optional, TextIO

from .ast import App, LetDecl, Node, Program, TypeDecl, Var
from .context import ProgramContext
from .errors import DriverError
from .parser import parse_program
from .std.io import BasicIO, populate_io_context
from .types import UNIT, Func, Typ, check_value, to_string, type_name

MAIN_TYPE = Func(UNIT, UNIT)


class Interpreter:
    """Runs funlang programs against a growing program context."""
    def __init__(self, debug_level: int = 0, debug_file: str = 'debug.txt',
                 out: Optional[TextIO] = None, entry_point: str = 'main'):
        self.debug_level = debug_level
        self.debug_fp = open(debug_file, 'w') if debug_level > 0 else None
        self.entry_point = entry_point
        self.basic_io = BasicIO(out)
        self.context = ProgramContext()
        self.load_standard_module()

    def debug(self, msg: str):
        if self.debug_level > 0:
            if self.debug_fp:
                self.debug_fp.write(msg + '\n')
                self.debug_fp.flush()
            else:
                print(msg)

    def load_standard_module(self):
        self.context = populate_io_context(ProgramContext.default(), self.basic_io)

    def register(self, name: str, typ: Typ, value: Any):
        """Make a host-provided value available to programs under `name`."""
        if name in self.context:
            raise DriverError(f"Term defined twice at the global scope: {name}")
        if not check_value(value, typ):
            raise DriverError(f"Value registered for {name} is a {type_name(value)}, not a {typ}")
        self.context = self.context.insert_val(name, typ, value)

    # Public API
    def run(self, program: Program) -> Any:
        try:
            main = self.declare_all(program)
            return self.run_main(main)
        finally:
            if self.debug_fp:
                self.debug_fp.close()
                self.debug_fp = None

    def declare_all(self, program: Program) -> Node:
        """Fold every declaration into the context; return the entry point term."""
        main: Optional[Node] = None
        for decl in program.decls:
            if isinstance(decl, TypeDecl):
                raise DriverError(f"Type declarations are not supported: {decl.name}")
            if not isinstance(decl, LetDecl):
                raise NotImplementedError(f"declare_all: unexpected declaration {type(decl).__name__}")
            if decl.name in self.context:
                raise DriverError(f"Term defined twice at the global scope: {decl.name}")
            if main is not None:
                raise DriverError(f"Term defined after {self.entry_point}: {decl.name}")
            if decl.name == self.entry_point:
                main = decl.term
                continue
            self.context = self.context.insert_term(decl.name, decl.term)
            value, typ = self.context.get_val(decl.name)
            self.debug(f"declare {decl.name} : {typ}")
            if self.debug_level >= 2:
                self.debug(f"  {decl.name} = {to_string(value)}")
        if main is None:
            raise DriverError(f"No {self.entry_point} function defined")
        return main

    def run_main(self, main: Node) -> Any:
        typ = self.context.type_of(main)
        if typ != MAIN_TYPE:
            raise DriverError(
                f"Invalid type defined for {self.entry_point} ({typ}): it must have type {MAIN_TYPE.from_} -> {MAIN_TYPE.to}"
            )
        if self.debug_level >= 3:
            self.debug(f"call {self.entry_point} Unit")
        return self.context.evaluate(App(main, Var('Unit')))


def run_program(source: str, debug_level: int = 0, out: Optional[TextIO] = None) -> Any:
    """Convenience function to parse and run a funlang program from source string."""
    ast_program = parse_program(source)
    interpreter = Interpreter(debug_level=debug_level, out=out)
    return interpreter.run(ast_program)


def compile_module(file_path: str, debug_level: int = 0) -> Interpreter:
    """Parse and run a funlang file, returning the interpreter instance."""
    with open(file_path, 'r', encoding='utf-8') as f:
        source = f.read()
    ast_program = parse_program(source)
    interpreter = Interpreter(debug_level=debug_level)
    interpreter.run(ast_program)
    return interpreter
