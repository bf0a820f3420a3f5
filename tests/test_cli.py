import logging

import pytest
import yaml

from typedini.__main__ import main

from .conftest import EXAMPLE


@pytest.fixture(autouse=True)
def _reset_root_logger():
    # basicConfig is a no-op once the root logger has handlers.
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_prints_typed_value(write_ini, capsys):
    path = write_ini(EXAMPLE)
    assert main([str(path), "Section1", "var1", "--type", "int"]) == 0
    assert capsys.readouterr().out == "Section1, var1: 42\n"


def test_float_value_uses_decimal_comma(write_ini, capsys):
    path = write_ini(EXAMPLE)
    assert main([str(path), "Section1", "var3", "-t", "float"]) == 0
    assert capsys.readouterr().out == "Section1, var3: 3.14\n"


def test_default_type_is_string(write_ini, capsys):
    path = write_ini(EXAMPLE)
    assert main([str(path), "Section1", "var2"]) == 0
    assert capsys.readouterr().out == "Section1, var2: hello\n"


def test_library_errors_go_to_stderr(write_ini, capsys):
    path = write_ini(EXAMPLE)
    assert main([str(path), "Section1", "var2", "--type", "int"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "Error: Invalid integer format: hello\n"


def test_missing_file(tmp_path, capsys):
    missing = tmp_path / "example.ini"
    assert main([str(missing), "Section1", "var1"]) == 1
    assert capsys.readouterr().err == f"Error: Unable to open file: {missing}\n"


def test_dump_as_yaml(write_ini, capsys):
    path = write_ini(EXAMPLE + "[Other]\nname = Пример\n")
    assert main([str(path), "--dump"]) == 0
    assert yaml.safe_load(capsys.readouterr().out) == {
        "Section1": {"var1": "42", "var2": "hello", "var3": "3,14"},
        "Other": {"name": "Пример"},
    }


def test_section_and_key_required_without_dump(write_ini):
    path = write_ini(EXAMPLE)
    with pytest.raises(SystemExit) as info:
        main([str(path), "Section1"])
    assert info.value.code == 2


def test_rejects_unknown_type(write_ini):
    path = write_ini(EXAMPLE)
    with pytest.raises(SystemExit):
        main([str(path), "Section1", "var1", "--type", "bool"])


def test_unknown_encoding(write_ini, capsys):
    path = write_ini(EXAMPLE)
    assert main([str(path), "Section1", "var1", "--encoding", "bogus"]) == 1
    assert capsys.readouterr().err == f"Error: Unknown encoding: {path}\n"


def test_verbose_enables_debug_logging(write_ini, caplog):
    path = write_ini("[A]\nk = 1\nk = 2\n")
    assert main([str(path), "A", "k"]) == 0
    assert "redefined" not in caplog.text
    assert main([str(path), "A", "k", "-v"]) == 0
    assert '"k" redefined' in caplog.text
