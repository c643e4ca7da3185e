import json

import pytest

from funlang.__main__ import main


def write(tmp_path, name, source):
    path = tmp_path / name
    path.write_text(source, encoding='utf-8')
    return path


def test_runs_program_file(tmp_path, capsys):
    path = write(tmp_path, 'ok.fun', 'let main = fun _:Unit => print 42;')
    main([str(path)])
    assert capsys.readouterr().out.strip() == '42'


def test_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as info:
        main([str(tmp_path / 'missing.fun')])
    assert info.value.code == 1
    assert 'not found' in capsys.readouterr().err


def test_type_error_is_reported(tmp_path, capsys):
    path = write(tmp_path, 'bad.fun', 'let main = fun _:Unit => print Unit;')
    with pytest.raises(SystemExit) as info:
        main([str(path)])
    assert info.value.code == 1
    assert capsys.readouterr().err.strip() == 'Type error: Expected type "Int" but found "Unit"'


def test_parse_error_is_reported(tmp_path, capsys):
    path = write(tmp_path, 'bad.fun', 'let main = ;')
    with pytest.raises(SystemExit):
        main([str(path)])
    assert capsys.readouterr().err.startswith('Parse error:')


def test_driver_error_is_reported(tmp_path, capsys):
    path = write(tmp_path, 'late.fun', 'let main = fun _:Unit => Unit; let x = 1;')
    with pytest.raises(SystemExit):
        main([str(path)])
    assert capsys.readouterr().err.strip() == 'Driver error: Term defined after main: x'


def test_emit_and_run_ast(tmp_path, capsys):
    path = write(tmp_path, 'prog.fun', 'let inc = fun x:Int => add x 1;\nlet main = fun _:Unit => print (inc 1);\n')
    main(['--emit-ast', str(path)])
    out_path = capsys.readouterr().out.strip()
    assert out_path.endswith('prog.fun.ast.json')
    with open(out_path, encoding='utf-8') as f:
        assert json.load(f)['type'] == 'Program'
    main(['--ast', out_path])
    assert capsys.readouterr().out.strip() == '2'
