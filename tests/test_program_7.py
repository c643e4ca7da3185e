import pytest

from funlang.errors import DriverError
from funlang.interpreter import parse_program, Interpreter


def test_program_7_term_after_main(example_source, capsys):
    ast = parse_program(example_source('program_7.fun'))
    interp = Interpreter()
    with pytest.raises(DriverError, match='Term defined after main: late'):
        interp.run(ast)
    # main never ran
    assert capsys.readouterr().out == ''
