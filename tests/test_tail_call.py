import pytest

from twinscheme.errors import SchemeRuntimeError
from twinscheme.interpreter import Interpreter

LOOP = "(define (loop n acc) (if (= n 0) acc (loop (- n 1) (+ acc 1))))"


def peak_for(interp, code):
    interp.execute(code)
    return interp.backend.machine.peak_depth


def test_deep_tail_recursion_on_cps():
    interp = Interpreter("cps")
    interp.execute(LOOP)
    assert interp.run_str("(loop 100000 0)") == "100000"


def test_tail_calls_run_in_constant_frame_depth():
    interp = Interpreter("cps")
    interp.execute(LOOP)
    assert peak_for(interp, "(loop 10 0)") == peak_for(interp, "(loop 20000 0)")


@pytest.mark.parametrize(
    "wrapper",
    [
        "(begin 1 (step (- n 1)))",
        "(let ((m (- n 1))) (step m))",
        "(and #t (step (- n 1)))",
        "(or #f (step (- n 1)))",
        "(apply step (list (- n 1)))",
        "(eval `(step ,(- n 1)))",
    ],
)
def test_tail_positions_do_not_grow_the_stack(wrapper):
    interp = Interpreter("cps")
    interp.execute(f"(define (step n) (if (= n 0) 'done {wrapper}))")
    small = peak_for(interp, "(step 5)")
    assert peak_for(interp, "(step 5000)") == small


def test_tail_recursive_macro_expansion():
    interp = Interpreter("cps")
    interp.execute(
        "(define-syntax-rule (countdown v) (if (= v 0) 'done (begin (set! v (- v 1)) (again))))"
        "(define k 30000)"
        "(define (again) (countdown k))"
    )
    assert interp.run_str("(again)") == "'done"


def test_deep_non_tail_recursion_on_cps():
    interp = Interpreter("cps")
    interp.execute("(define (count n) (if (= n 0) 0 (+ 1 (count (- n 1)))))")
    assert interp.run_str("(count 50000)") == "50000"


def test_mutual_recursion_on_cps():
    interp = Interpreter("cps")
    interp.execute(
        "(define (even? n) (if (= n 0) #t (odd? (- n 1))))"
        "(define (odd? n) (if (= n 0) #f (even? (- n 1))))"
    )
    assert interp.run_str("(even? 100001)") == "#f"


def test_tree_walker_reports_exhausted_stack():
    interp = Interpreter("ast_walk")
    interp.execute(LOOP)
    with pytest.raises(SchemeRuntimeError) as exc:
        interp.execute("(loop 100000 0)")
    assert str(exc.value) == "RuntimeError: Maximum recursion depth exceeded"
    # The interpreter is still usable afterwards
    assert interp.run_str("(loop 10 0)") == "10"


def test_shallow_loops_agree(backend):
    interp = Interpreter(backend)
    interp.execute(LOOP)
    assert interp.run_str("(loop 50 0)") == "50"
