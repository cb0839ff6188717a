import logging
from pathlib import Path

import pytest

from zeus import config
from zeus.interpreter import Interpreter
from zeus.repl import load_preludes, run
from zeus.types.errors import ThrowSignal, ZeusError, ZeusSyntaxError
from zeus.types.symbol import Symbol


def _lines(*lines):
    """A read_line stand-in that raises EOFError once the lines run out."""
    it = iter(lines)

    def read_line(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read_line


def test_session_keeps_definitions():
    itp = Interpreter()
    itp.eval("(define x 10)")
    itp.eval("(defun add-x (n) (+ n x))")
    assert itp.eval("(add-x 5)") == 15


def test_sessions_are_independent():
    a, b = Interpreter(), Interpreter()
    a.eval("(define only-in-a 1)")
    assert not b.env.is_bound("only-in-a")
    a.eval("(gensym)")
    assert b.eval("(gensym)").name == "G1"


def test_eval_reads_exactly_one_expression(itp):
    with pytest.raises(ZeusSyntaxError, match="Extra tokens after expression"):
        itp.eval("1 2")
    assert itp.eval("") == []
    assert itp.eval("   ; only a comment") == []


def test_eval_prelude_runs_every_form():
    itp = Interpreter(prelude="""
      ; helpers
      (defun square (x) (* x x))
      (define base 3)
    """)
    assert itp.eval("(square base)") == 9
    assert itp.eval_prelude("(define a 1) (define b 2) (+ a b)") == 3


def test_eval_prelude_of_nothing_is_nil(itp):
    assert itp.eval_prelude("") == []


def test_signals_become_errors_at_eval(itp):
    with pytest.raises(ZeusError, match="Uncaught throw for tag boom") as excinfo:
        itp.eval("(throw 'boom 1)")
    assert isinstance(excinfo.value.__cause__, ThrowSignal)
    with pytest.raises(ZeusError, match="Unhandled go to label x"):
        itp.eval_prelude("(define y 1) (go x)")


def test_error_leaves_session_usable(itp):
    with pytest.raises(ZeusError):
        itp.eval("(let ((x 1)) (car x))")
    assert itp.env.depth == 1
    assert itp.eval("(+ 1 1)") == 2


# -------------------------------
# Console
# -------------------------------
def test_run_prints_results_and_goodbye(itp, capsys):
    run(itp, _lines("(+ 1 2)", "", "(list 1 \"a\")", "exit", "(+ 9 9)"), prompt="")
    assert capsys.readouterr().out == '3\n(1 "a")\nGoodbye!\n'


def test_run_reports_errors_and_continues(itp, capsys):
    run(itp, _lines("(/ 1 0)", "(car 1 2)", "(define z 4)", "z"), prompt="")
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Error: Division by zero"
    assert out[1].startswith("Error: car requires exactly 1 argument")
    assert out[2:] == ["4", "4", "", "Goodbye!"]


def test_run_survives_runaway_recursion(itp, capsys):
    run(
        itp,
        _lines("(defun count-down (n) (if (= n 0) 0 (count-down (- n 1))))", "(count-down 100000)", "(+ 1 2)"),
        prompt="",
    )
    out = capsys.readouterr().out.splitlines()
    assert out[1] == "Error: maximum recursion depth exceeded"
    assert out[2] == "3"
    assert itp.env.depth == 1


def test_run_passes_prompt(itp, capsys):
    prompts = []

    def read_line(prompt):
        prompts.append(prompt)
        raise EOFError

    run(itp, read_line, prompt="> ")
    assert prompts == ["> "]


def test_load_preludes_from_env(tmp_path, monkeypatch):
    first = tmp_path / "first.zs"
    second = tmp_path / "second.zs"
    first.write_text("(define greeting 'hello)", encoding="utf-8")
    second.write_text("(define farewell 'bye)", encoding="utf-8")
    missing = tmp_path / "missing.zs"
    monkeypatch.setenv("ZEUS_PRELUDE_PATH", config._sep().join(map(str, [first, missing, second])))

    itp = Interpreter()
    load_preludes(itp)
    assert itp.eval("(list greeting farewell)") == [Symbol("hello"), Symbol("bye")]


# -------------------------------
# Configuration
# -------------------------------
def test_config_defaults(monkeypatch):
    for var in ("ZEUS_LOG_LEVEL", "ZEUS_PROMPT", "ZEUS_PRELUDE_PATH"):
        monkeypatch.delenv(var, raising=False)
    assert config.get_log_level() == logging.WARNING
    assert config.get_prompt() == "zeus> "
    assert config.get_prelude_paths() == []


@pytest.mark.parametrize(
    "value,expected",
    [("debug", logging.DEBUG), (" INFO ", logging.INFO), ("nonsense", logging.WARNING)]
)
def test_config_log_level(monkeypatch, value, expected):
    monkeypatch.setenv("ZEUS_LOG_LEVEL", value)
    assert config.get_log_level() == expected


def test_config_prompt(monkeypatch):
    monkeypatch.setenv("ZEUS_PROMPT", "λ ")
    assert config.get_prompt() == "λ "


def test_paths_from_env_uses_defaults_when_unset(monkeypatch):
    monkeypatch.delenv("ZEUS_TEST_PATHS", raising=False)
    assert config.paths_from_env("ZEUS_TEST_PATHS", ["a"]) == [Path("a")]
    monkeypatch.setenv("ZEUS_TEST_PATHS", config._sep().join(["x", " ", "y"]))
    assert config.paths_from_env("ZEUS_TEST_PATHS", ["a"]) == [Path("x"), Path("y")]
