import pytest

from lispy import __version__
from lispy.cli import main


def test_expression_flag(capsys):
    assert main(["-c", "+ 1 (* 2 3)"]) == 0
    assert capsys.readouterr().out == "7\n"


def test_expression_flag_semantic_error(capsys):
    assert main(["-c", "+ 99999999999999999999"]) == 1
    assert capsys.readouterr().out == "Error: Invalid Number!\n"


def test_expression_flag_syntax_error(capsys):
    assert main(["-c", "+ 1 2)"]) == 1
    assert capsys.readouterr().err.startswith("<string>:1:6: error:")


def test_script(tmp_path, capsys):
    script = tmp_path / "ok.lispy"
    script.write_text("+ 1 2\n- 10 2 3\n", encoding="utf-8")

    assert main([str(script)]) == 0
    assert capsys.readouterr().out.splitlines() == ["lispy> + 1 2", "3", "lispy> - 10 2 3", "5"]


def test_script_with_failures(tmp_path):
    script = tmp_path / "bad.lispy"
    script.write_text("/ 1 0\n", encoding="utf-8")

    assert main([str(script)]) == 1


def test_missing_script(tmp_path, capsys):
    assert main([str(tmp_path / "missing.lispy")]) == 2
    assert "cannot read" in capsys.readouterr().err


def test_interactive_session(feed_input, capsys):
    feed_input(["* 6 7"])

    assert main([]) == 0
    assert "42\n" in capsys.readouterr().out


def test_version(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--version"])

    assert info.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_script_that_is_not_utf8(tmp_path, capsys):
    script = tmp_path / "binary.lispy"
    script.write_bytes(b"+ 1 2\n\xff\xfe\n")

    assert main([str(script)]) == 2
    assert "not valid UTF-8" in capsys.readouterr().err
