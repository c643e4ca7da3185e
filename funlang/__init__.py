# funlang package
# A small statically-typed functional language: parser, type checker and evaluator.
from .interpreter import run_program, compile_module, Interpreter
from .context import ProgramContext
from .errors import FunError

__all__ = [
    'run_program',
    'compile_module',
    'Interpreter',
    'ProgramContext',
    'FunError',
]
