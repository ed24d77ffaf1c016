"""Tests for the command-line entry point."""

import yaz


def test_runs_script(tmp_path, capsys):
    script = tmp_path / "hello.yaz"
    script.write_text('string s = "hello"; yaz(s);\n', encoding="utf-8")
    assert yaz.main(["yaz", str(script)]) == 0
    assert capsys.readouterr().out == "hello\n"


def test_missing_file(tmp_path, capsys):
    assert yaz.main(["yaz", str(tmp_path / "missing.yaz")]) == 1
    assert "Could not read" in capsys.readouterr().err


def test_parse_error_is_reported(tmp_path, capsys):
    script = tmp_path / "broken.yaz"
    script.write_text('yaz("x")\n', encoding="utf-8")
    assert yaz.main(["yaz", str(script)]) == 1
    err = capsys.readouterr().err
    assert err.startswith("UnexpectedTokenException:")
    assert "SEMICOLON" in err
    assert str(script) in err


def test_lexical_error_is_reported(tmp_path, capsys):
    script = tmp_path / "bad.yaz"
    script.write_text('string s = "a";\n$\n', encoding="utf-8")
    assert yaz.main(["yaz", str(script)]) == 1
    assert "LexicalException" in capsys.readouterr().err


def test_help(capsys):
    assert yaz.main(["yaz", "--help"]) == 0
    assert "Usage:" in capsys.readouterr().out


def test_too_many_arguments(capsys):
    assert yaz.main(["yaz", "a", "b"]) == 1


def test_debug_dump(tmp_path, capsys, monkeypatch):
    monkeypatch.setenv('YAZDEBUG', '1')
    script = tmp_path / "debug.yaz"
    script.write_text('bool b = true;\n', encoding="utf-8")
    assert yaz.main(["yaz", str(script)]) == 0
    err = capsys.readouterr().err
    assert "Tokens:" in err
    assert "b = true;" in err
