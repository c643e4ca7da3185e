"""CLI entry point for the funlang interpreter.

Usage:
    python -m funlang [-v|-vv|-vvv] <program_file>
    python -m funlang [-v...] --emit-ast <program_file>
    python -m funlang [-v...] --ast <ast_json_file>

Options:
  -v            Increase debug verbosity (can be repeated)
  --emit-ast    Parse the given program file and emit an AST JSON file
  --ast         Execute a previously emitted AST JSON file

Debug information is written to `debug.txt` in the current directory when
verbosity is greater than zero. The interpreter loads the standard prelude
and `print` automatically, then runs the program's `main` declaration.
"""

import argparse
import json
import sys
from pathlib import Path
from .ast_json import ast_to_obj, ast_from_obj
from .errors import FunError
from .interpreter import Interpreter
from .parser import parse_program


def _read(path: Path) -> str:
    if not path.exists():
        print(f"Error: file {path} not found", file=sys.stderr)
        sys.exit(1)
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def _execute(ast_program, verbosity: int) -> None:
    interpreter = Interpreter(debug_level=verbosity)
    try:
        interpreter.run(ast_program)
    except FunError as e:
        print(f"{e.kind} error: {e}", file=sys.stderr)
        sys.exit(1)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog='funlang', description="funlang interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--emit-ast', metavar='PROGRAM_FILE', help='emit AST JSON for the given program file')
    group.add_argument('--ast', metavar='AST_JSON_FILE', help='execute AST from a JSON file')
    parser.add_argument('program', nargs='?', help='program file to execute')
    args = parser.parse_args(argv)

    try:
        # Emit AST mode
        if args.emit_ast:
            program_file = Path(args.emit_ast)
            ast_program = parse_program(_read(program_file))
            obj = ast_to_obj(ast_program)
            out_path = program_file.with_name(program_file.name + '.ast.json')
            with open(out_path, 'w', encoding='utf-8') as out:
                json.dump(obj, out, ensure_ascii=False, indent=2)
            print(str(out_path))
            return

        # Execute from AST JSON
        if args.ast:
            ast_path = Path(args.ast)
            ast_program = ast_from_obj(json.loads(_read(ast_path)))
            _execute(ast_program, args.v)
            return

        # Default: execute source file
        if not args.program:
            parser.error('missing program file; or use --emit-ast/--ast')
        ast_program = parse_program(_read(Path(args.program)))
    except FunError as e:
        print(f"{e.kind} error: {e}", file=sys.stderr)
        sys.exit(1)
    _execute(ast_program, args.v)


if __name__ == '__main__':
    main()
