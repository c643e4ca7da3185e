from funlang.interpreter import parse_program, Interpreter


def test_program_3_conditionals(example_source, capsys):
    ast = parse_program(example_source('program_3.fun'))
    interp = Interpreter()
    interp.run(ast)
    out_lines = capsys.readouterr().out.strip().split('\n')
    assert out_lines == ['9', '12', '7', '5']
