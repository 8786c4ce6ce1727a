"""CLI - tests for argument parsing and the strkit entry point.

Tests cover:
    - key=value passes strings, key:=json passes JSON literals
    - Malformed assignments are usage errors (exit 2)
    - Successful operations print an ok envelope and exit 0
    - Error envelopes exit 1, stdout stays valid JSON
    - --list prints every registered operation
"""

import json

import pytest

from strkit.main import EXIT_ERROR, EXIT_OK, EXIT_USAGE, main, parse_assignment


# --- parse_assignment ---------------------------------------------------------

def test_parse_assignment_string_value():
    assert parse_assignment("s=Hello World") == ("s", "Hello World")


def test_parse_assignment_keeps_later_equals_signs():
    assert parse_assignment("s=a=b") == ("s", "a=b")


def test_parse_assignment_json_value():
    assert parse_assignment("length:=5") == ("length", 5)
    assert parse_assignment('pad_type:="both"') == ("pad_type", "both")


def test_parse_assignment_string_may_contain_json_marker():
    assert parse_assignment("s=x:=1") == ("s", "x:=1")


@pytest.mark.parametrize("token", ["novalue", "=x", ":=5", "n:=["])
def test_parse_assignment_rejects_malformed(token):
    with pytest.raises(ValueError):
        parse_assignment(token)


# --- main ---------------------------------------------------------------------

def test_main_runs_operation(capsys):
    code = main(["truncate", "s=Hello World", "length:=5"])
    envelope = json.loads(capsys.readouterr().out)
    assert code == EXIT_OK
    assert envelope == {"status": "ok", "operation": "truncate", "result": "Hello..."}


def test_main_keeps_unicode_in_output(capsys):
    main(["to_title_case", "s=élan vital"])
    assert '"Élan Vital"' in capsys.readouterr().out


def test_main_error_envelope_exit_code(capsys):
    code = main(["repeat", "s=ab", "times:=-1"])
    envelope = json.loads(capsys.readouterr().out)
    assert code == EXIT_ERROR
    assert envelope["error_code"] == "INVALID_ARGUMENT"


def test_main_unknown_operation(capsys):
    code = main(["frobnicate"])
    envelope = json.loads(capsys.readouterr().out)
    assert code == EXIT_ERROR
    assert envelope["error_code"] == "UNKNOWN_OPERATION"


def test_main_lists_operations(capsys):
    code = main(["--list"])
    names = capsys.readouterr().out.split()
    assert code == EXIT_OK
    assert "slugify" in names
    assert len(names) == 38


def test_main_without_operation_is_usage_error(capsys):
    assert main([]) == EXIT_USAGE


def test_main_malformed_argument_is_usage_error(capsys):
    code = main(["slugify", "oops"])
    captured = capsys.readouterr()
    assert code == EXIT_USAGE
    assert captured.out == ""
    assert "oops" in captured.err


def test_main_uses_settings_from_environment(monkeypatch, capsys):
    monkeypatch.setenv("STRKIT_DEFAULT_HASH_ALGORITHM", "md5")
    main(["hash_text", "s=abc"])
    envelope = json.loads(capsys.readouterr().out)
    assert envelope["result"] == "900150983cd24fb0d6963f7d28e17f72"


def test_main_unknown_encoding_is_error_envelope(capsys):
    code = main(["url_encode", "s=x", "encoding=nope"])
    envelope = json.loads(capsys.readouterr().out)
    assert code == EXIT_ERROR
    assert envelope["error"]["context"]["argument"] == "encoding"
