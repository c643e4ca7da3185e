from funlang.interpreter import parse_program, Interpreter


def test_program_4_higher_order(example_source, capsys):
    """Closures returned from `adder` keep the argument they captured."""
    ast = parse_program(example_source('program_4.fun'))
    interp = Interpreter()
    interp.run(ast)
    out_lines = capsys.readouterr().out.strip().split('\n')
    assert out_lines == ['21', '81']
