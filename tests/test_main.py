import logging

import pytest

from treecalc.main import main, parse_args, run


@pytest.fixture
def log_file(tmp_path):
    yield str(tmp_path / "logs" / "calc.log")
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()


def test_main_prints_tokens_and_result(log_file, capsys):
    assert main(["--log-file", log_file, "1", "+", "2", "*", "3"]) == 0
    assert capsys.readouterr().out == "1 + 2 * 3\nadd(1, mul(2, 3)) = 7\n"


def test_main_default_expression(log_file, capsys):
    main(["--log-file", log_file])
    assert capsys.readouterr().out == ("3 * (4 + 5) / 0.5 ^ 2 + 1\n"
                                       "add(mul(3, div(add(4, 5), pow(0.5, 2))), 1) = 109\n")


def test_main_lexer_error(log_file, capsys):
    assert main(["--log-file", log_file, "1 & 2"]) == 0
    assert capsys.readouterr().out == "Error: Invalid character\n1 & 2\n  ^\n"


def test_main_creates_log_file(log_file):
    main(["--log-file", log_file, "2^10"])
    with open(log_file, encoding="utf-8") as f:
        assert "expression: 2^10" in f.read()


@pytest.mark.parametrize("expression, expected",
                         [
                             ("(1)(2)", ["(1)(2)", "Error: Ambiguous numbers: no operator between them"]),
                             ("2*", ["2 * ", "Error: Missing operand"]),
                             ("1/0", ["1 / 0", "div(1, 0) = inf"]),
                             ("(1+2", ["Error: Parenthesis not closed\n(1+2\n   ^"]),
                         ])
def test_run(expression, expected):
    assert run(expression) == expected


@pytest.mark.parametrize("words, expected",
                         [
                             (["-3+4"], " - 3 + 4\nadd(inv(3), 4) = 1\n"),
                             (["-(1+2)"], " - (1 + 2)\ninv(add(1, 2)) = -3\n"),
                             (["-.5"], " - 0.5\ninv(0.5) = -0.5\n"),
                             (["-", "2", "*", "3"], " - 2 * 3\nmul(inv(2), 3) = -6\n"),
                         ])
def test_main_expression_starting_with_minus(log_file, capsys, words, expected):
    assert main(["--log-file", log_file, *words]) == 0
    assert capsys.readouterr().out == expected


def test_main_options_after_expression(log_file, capsys):
    assert main(["1", "-", "2", "--log-file", log_file]) == 0
    assert capsys.readouterr().out == "1 - 2\nsub(1, 2) = -1\n"


def test_parse_args_keeps_word_order():
    args, words = parse_args(["-3", "-v", "+", "-(4)"])
    assert args.verbose
    assert words == ["-3", "+", "-(4)"]
