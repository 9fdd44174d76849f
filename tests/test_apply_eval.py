import pytest

from twinscheme.errors import SchemeError
from twinscheme.interpreter import Interpreter


def execute(backend, code):
    return Interpreter(backend).run_str(code)


def execute_fail(backend, code):
    with pytest.raises(SchemeError) as exc:
        Interpreter(backend).run_str(code)
    return str(exc.value)


def test_apply(backend):
    assert execute(backend, "(apply + '(1 2 3))") == "6"
    assert execute(
        backend,
        "(define foo (lambda (f) (lambda (x y) (f (f x y) y)))) (apply (apply foo (list +)) '(5 3))",
    ) == "11"


def test_apply_to_closure_and_empty_list(backend):
    assert execute(backend, "(apply (lambda (a b) (- a b)) (list 10 4))") == "6"
    assert execute(backend, "(apply + '())") == "0"
    assert execute(backend, "(apply list '())") == "'()"


def test_apply_does_not_re_evaluate_values(backend):
    assert execute(backend, "(apply list '(a (b c)))") == "'(a (b c))"
    assert execute(backend, "(apply car '((x y)))") == "'x"


def test_apply_to_special_form(backend):
    assert execute(backend, "(apply if '(#f 1 2))") == "2"


def test_apply_checks_operands(backend):
    assert execute_fail(backend, "(apply 1 '(2))") == "RuntimeError: First argument to apply must be a procedure: 1"
    assert execute_fail(backend, "(apply + 2)") == "RuntimeError: Second argument to apply must be a list: 2"
    assert execute_fail(backend, "(apply (lambda (x) x) '(1 2))") == (
        "RuntimeError: Must supply exactly one argument to procedure: (1 2)"
    )


def test_eval(backend):
    assert execute(backend, "(eval '(+ 1 2 3))") == "6"
    assert execute(backend, "(eval 5)") == "5"
    assert execute(
        backend,
        "(define eval-formula (lambda (formula) (eval `((lambda (x y) ,formula) 2 3)))) "
        "(eval-formula '(+ (- y x) y))",
    ) == "4"


def test_eval_runs_in_root_environment(backend):
    assert execute_fail(
        backend,
        "(define bad-eval-formula (lambda (formula) ((lambda (x y) (eval formula)) 2 3))) "
        "(bad-eval-formula '(+ x y))",
    ) == "RuntimeError: Identifier not found: 'x"
    assert execute(backend, "(define x 1) (let ((x 2)) (eval 'x))") == "1"


def test_eval_define_lands_in_root(backend):
    assert execute(backend, "((lambda () (eval '(define y 9)))) y") == "9"


def test_apply_binding_forms(backend):
    interp = Interpreter(backend)
    assert interp.run_str("(apply define (list 'x 5)) x") == "5"
    assert interp.run_str("(apply define (list 'xs '(1 2))) xs") == "'(1 2)"
    assert interp.run_str("(apply set! (list 'x 6)) x") == "6"
    assert interp.run_str("(apply quote '(sym))") == "'sym"
    assert interp.run_str("(apply let (list '((y 3)) 'y))") == "'y"
    # quote itself was left alone
    assert interp.run_str("(quote (1 2))") == "'(1 2)"
    assert interp.run_str("'z") == "'z"


def test_apply_binding_form_errors(backend):
    assert execute_fail(backend, "(apply set! (list 1 2))") == (
        "RuntimeError: First argument to set! must be a symbol: 1"
    )
    assert execute_fail(backend, "(apply define (list \"x\" 1))") == (
        'RuntimeError: First argument to define must be a symbol: "x"'
    )
    assert execute_fail(backend, "(apply set! (list 'undefined-name 1))") == (
        'RuntimeError: Can\'t set! an undefined variable: "undefined-name"'
    )
