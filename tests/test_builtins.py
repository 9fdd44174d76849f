import pytest

from twinscheme.interpreter import Interpreter


def execute(backend, code):
    return Interpreter(backend).run_str(code)


@pytest.mark.parametrize(
    "code, expected",
    [
        ("(+)", "0"),
        ("(+ 1 2 3 4)", "10"),
        ("(- 5)", "-5"),
        ("(- 10 1 2)", "7"),
        ("(*)", "1"),
        ("(* 2 3 4)", "24"),
        ("(/ 20 2 5)", "2"),
        ("(/ 7 2)", "3"),
        ("(/ -7 2)", "-3"),
        ("(/ 7 -2)", "-3"),
        ("(= 1 1 1)", "#t"),
        ("(= 1 2)", "#f"),
        ("(< 1 2 3)", "#t"),
        ("(< 1 3 2)", "#f"),
        ("(> 3 2 1)", "#t"),
        ("(<= 1 1 2)", "#t"),
        ("(>= 2 2 3)", "#f"),
        ("(not #f)", "#t"),
        ("(not 0)", "#f"),
    ],
)
def test_arithmetic_and_comparison(backend, code, expected):
    assert execute(backend, code) == expected


@pytest.mark.parametrize(
    "code, expected",
    [
        ("(car '(1 2 3))", "1"),
        ("(cdr '(1 2 3))", "'(2 3)"),
        ("(cdr '(1))", "'()"),
        ("(null? '())", "#t"),
        ("(null? '(1))", "#f"),
        ("(null? 0)", "#f"),
        ("(list? '())", "#t"),
        ("(list? 'a)", "#f"),
        ("(length '(1 (2 3) 4))", "3"),
        ("(append '(1) '() '(2 3))", "'(1 2 3)"),
        ("(append)", "'()"),
    ],
)
def test_list_operations(backend, code, expected):
    assert execute(backend, code) == expected


def test_cons_does_not_modify_its_argument(backend):
    assert execute(backend, "(define xs '(2 3)) (cons 1 xs) xs") == "'(2 3)"


def test_recursive_list_functions(backend):
    code = """
    (define (map f xs)
      (if (null? xs) '() (cons (f (car xs)) (map f (cdr xs)))))
    (define (fold f acc xs)
      (if (null? xs) acc (fold f (f acc (car xs)) (cdr xs))))
    (fold + 0 (map (lambda (x) (* x x)) '(1 2 3 4)))
    """
    assert execute(backend, code) == "30"


def test_factorial(backend):
    code = "(define (fact n) (if (< n 2) 1 (* n (fact (- n 1))))) (fact 20)"
    assert execute(backend, code) == "2432902008176640000"
