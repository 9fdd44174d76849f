"""Both evaluators must agree on results, on error text and on side effects."""
import pytest

from twinscheme.errors import SchemeError
from twinscheme.interpreter import Interpreter


def outcome(backend: str, code: str) -> str:
    """Run `code` on a fresh interpreter; the written result or the error text."""
    try:
        return Interpreter(backend).run_str(code)
    except SchemeError as ex:
        return str(ex)


PROGRAMS = [
    "(+ 1 2)",
    "(define (fib n) (if (< n 2) n (+ (fib (- n 1)) (fib (- n 2))))) (fib 15)",
    "(let ((x 1) (y 2)) (list x y (+ x y)))",
    "(define x 10) (define (f) x) (let ((x 20)) (f))",
    "`(1 ,@(list 2 3) (4 ,(+ 2 3)))",
    "(apply (lambda (a b) (list b a)) '(1 2))",
    "(eval (list '+ 1 2))",
    "(define-syntax-rule (swap! a b) (let ((tmp a)) (set! a b) (set! b tmp))) "
    "(define p 1) (define q 2) (swap! p q) (list p q)",
    "(and 1 2 (or #f '()))",
    "(begin (define z 3) (set! z (* z z)) z)",
    "((lambda (f) (f f 5)) (lambda (self n) (if (= n 0) 'done (self self (- n 1)))))",
    # Errors
    "undefined-name",
    "(set! missing 1)",
    "(car '())",
    "(1 2 3)",
    "((lambda (a b) a) 1)",
    "(if 1)",
    "(let ((1 2)) 1)",
    "(define)",
    "(/ 5 0)",
    "(error '(code 42))",
    "`(a ,@1)",
    "(unquote-splicing x)",
    "(apply car 5)",
    "(eval)",
    "(define-syntax-rule m 1)",
    "(22+)",
    "(+ 1",
]


@pytest.mark.parametrize("code", PROGRAMS)
def test_evaluators_agree(code):
    assert outcome("ast_walk", code) == outcome("cps", code)


def test_error_text_is_shared_verbatim():
    assert outcome("cps", "(car '())") == "RuntimeError: Bad argument types to car: (())"
    assert outcome("cps", "(error '(code 42))") == "RuntimeError: '(code 42)"


def test_side_effects_happen_in_the_same_order(capsys):
    code = "(define (show x) (display x) x) (+ (show 1) (show 2)) (list (show 3) `(,(show 4)))"
    outputs = []
    for backend in ("ast_walk", "cps"):
        outcome(backend, code)
        outputs.append(capsys.readouterr().out)
    assert outputs == ["1234", "1234"]
