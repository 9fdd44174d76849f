import pytest

from twinscheme.__main__ import main, make_completer
from twinscheme.config import get_default_evaluator, get_history_file, get_log_level
from twinscheme.interpreter import Interpreter


def test_default_evaluator_is_cps(monkeypatch):
    monkeypatch.delenv("TWINSCHEME_EVALUATOR", raising=False)
    assert get_default_evaluator() == "cps"
    assert Interpreter().evaluator == "cps"


def test_evaluator_from_environment(monkeypatch):
    monkeypatch.setenv("TWINSCHEME_EVALUATOR", " AST_WALK ")
    assert Interpreter().evaluator == "ast_walk"
    # An explicit choice wins over the environment
    assert Interpreter("cps").evaluator == "cps"


def test_invalid_evaluator(monkeypatch):
    monkeypatch.setenv("TWINSCHEME_EVALUATOR", "bytecode")
    with pytest.raises(ValueError):
        get_default_evaluator()
    with pytest.raises(ValueError):
        Interpreter("bytecode")


def test_log_level(monkeypatch):
    monkeypatch.delenv("TWINSCHEME_LOG_LEVEL", raising=False)
    assert get_log_level() == "WARNING"
    monkeypatch.setenv("TWINSCHEME_LOG_LEVEL", "debug")
    assert get_log_level() == "DEBUG"


def test_run_file(tmp_path, capsys, backend):
    source = tmp_path / "prog.scm"
    source.write_text('(define (greet who) (display "hello ") (displayln who))\n(greet "world")\n')
    assert main([str(source), "--evaluator", backend]) == 0
    assert capsys.readouterr().out == "hello world\n"


def test_run_file_reports_errors(tmp_path, capsys):
    source = tmp_path / "bad.scm"
    source.write_text("(display 1)\n(car 5)\n(display 2)\n")
    assert main([str(source)]) == 1
    assert capsys.readouterr().out == "1RuntimeError: Bad argument types to car: (5)\n"


def test_repl(monkeypatch, capsys, tmp_path):
    monkeypatch.setenv("TWINSCHEME_HISTORY", str(tmp_path / "history"))
    lines = iter(["(define x 4)", "", "(* x x)", "(oops", "y"])

    def fake_input(prompt):
        try:
            return next(lines)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)
    assert main(["--evaluator", "cps"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[1:] == [
        "Welcome to the twinscheme REPL!",
        "'()",
        "16",
        "SyntaxError: Unclosed list (line: 1, column: 1)",
        "RuntimeError: Identifier not found: 'y",
        "",
    ]


def test_history_file(monkeypatch, tmp_path):
    monkeypatch.setenv("TWINSCHEME_HISTORY", str(tmp_path / "hist"))
    assert get_history_file() == str(tmp_path / "hist")
    monkeypatch.delenv("TWINSCHEME_HISTORY")
    assert get_history_file().endswith(".twinscheme_history")


def test_repl_completion_uses_root_bindings():
    interp = Interpreter("cps")
    interp.execute("(define display-twice 1)")
    complete = make_completer(interp)
    assert complete("displ", 0) == "display"
    assert complete("displ", 1) == "display-twice"
    assert complete("displ", 2) == "displayln"
    assert complete("displ", 3) is None
    assert complete("no-such-prefix", 0) is None
