from funlang.interpreter import parse_program, Interpreter


def test_program_1_increment(example_source, capsys):
    ast = parse_program(example_source('program_1.fun'))
    interp = Interpreter()
    interp.run(ast)
    out = capsys.readouterr().out.strip()
    assert out == '42'
