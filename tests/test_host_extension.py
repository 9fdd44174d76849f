import pytest

from twinscheme.errors import SchemeRuntimeError
from twinscheme.printer import write
from twinscheme.types.custom import CustomType


def test_define_primitive(interp):
    interp.define_primitive("double", lambda values: values[0] * 2)
    assert interp.run_str("(double (+ 1 2))") == "6"
    assert interp.run_str("(apply double '(21))") == "42"


def test_define_special_native(interp):
    calls = []

    def my_if(args, env, evaluate):
        calls.append(len(args))
        cond = evaluate(args[0], env)
        return evaluate(args[1] if cond != 0 else args[2], env)

    interp.define("my-if", my_if)
    assert interp.run_str('(my-if 0 (error "bad") (+ 1 1))') == "2"
    assert interp.run_str("(define x 5) (my-if x (let ((y 2)) (* x y)) 0)") == "10"
    assert calls == [3, 3]


def test_special_native_receives_unevaluated_args(interp):
    interp.define("quote-all", lambda args, env, evaluate: list(args))
    assert interp.run_str("(quote-all a (b c) 1)") == "'(a (b c) 1)"


def test_special_native_through_apply_gets_plain_values(interp):
    interp.define("first-arg", lambda args, env, evaluate: evaluate(args[0], env))
    assert interp.run_str("(apply first-arg '((undefined form)))") == "'(undefined form)"


def test_native_errors_propagate(interp):
    def fail(values):
        raise SchemeRuntimeError(f"refused {write(values)}")

    interp.define_primitive("refuse", fail)
    with pytest.raises(SchemeRuntimeError) as exc:
        interp.run_str("(refuse 1 'a)")
    assert str(exc.value) == "RuntimeError: refused '(1 a)"


class Counter:
    def __init__(self):
        self.count = 0


def test_custom_type_handles(interp):
    interp.root.register_custom_type("counter", Counter)

    def make_counter(args, env, evaluate):
        name = evaluate(args[0], env)
        return env.root().set_custom("counter", name, Counter())

    def bump(args, env, evaluate):
        handle = evaluate(args[0], env)
        counter = env.get_custom(handle.tag, handle.identifier, Counter)
        counter.count += 1
        return counter.count

    interp.define("make-counter", make_counter)
    interp.define("bump!", bump)

    assert interp.run_str('(define c (make-counter "clicks")) c') == "#<counter:clicks>"
    assert interp.run_str("(bump! c) (bump! c) (bump! c)") == "3"
    assert interp.root.get_custom("counter", "clicks", Counter).count == 3


def test_custom_type_values_are_plain_data(interp):
    interp.define_primitive("handle", lambda values: CustomType("file", values[0]))
    assert interp.run_str('(car (list (handle "a.txt")))') == "#<file:a.txt>"
    assert interp.run_str('(if (handle "x") 1 2)') == "1"


def test_primitives_cannot_rewrite_quoted_program_data(interp):
    def grab(values):
        values[0].append(99)
        return values[0]

    interp.define_primitive("grab!", grab)
    interp.execute("(define (f) '(1 (2)))")
    assert interp.run_str("(grab! (f))") == "'(1 (2) 99)"
    assert interp.run_str("(f)") == "'(1 (2))"
    assert interp.run_str("(grab! (car (cdr (f))))") == "'(2 99)"
    assert interp.run_str("(f)") == "'(1 (2))"


def test_special_native_through_apply_sees_values_not_syntax(interp):
    interp.define("value-of", lambda args, env, evaluate: evaluate(args[0], env))
    assert interp.run_str("(apply value-of (list 'sym))") == "'sym"
    # A rebound quote does not change what apply passes along
    interp.execute("(define (quote x) 'never)")
    assert interp.run_str("(apply value-of (list 7))") == "7"
