import pytest

from egg.errors import EggReferenceError, EggSyntaxError, EggTypeError
from egg.evaluation.evaluator import evaluate
from egg.evaluation.special_forms import SPECIAL_FORMS
from egg.reader.parser import parse
from egg.types.function import HostFunction


def ev(source, scope):
    return evaluate(parse(source), scope)


def test_special_form_table_is_read_only():
    assert set(SPECIAL_FORMS) == {"if", "while", "do", "define", "set", "fun"}
    with pytest.raises(TypeError):
        SPECIAL_FORMS["let"] = None


# ------------------ if ------------------

@pytest.mark.parametrize(
    "source, expected",
    [
        ("if(true, 1, 2)", 1),
        ("if(false, 1, 2)", 2),
        ("if(0, 1, 2)", 1),
        ('if("", 1, 2)', 1),
        ("if(array(), 1, 2)", 1),
        ("if(==(1, 2), 1, 2)", 2),
        ("if(<(1, 2), \"yes\", \"no\")", "yes"),
    ],
)
def test_if_truthiness_is_identity_with_false(scope, source, expected):
    assert ev(source, scope) == expected


def test_if_evaluates_only_the_chosen_branch(scope, printed):
    assert ev('if(true, print("then"), print("else"))', scope) == "then"
    assert printed == ["then"]


@pytest.mark.parametrize("source", ["if(true, 1)", "if(true)", "if(true, 1, 2, 3)", "if()"])
def test_if_arity(scope, source):
    with pytest.raises(EggSyntaxError):
        ev(source, scope)


# ------------------ while ------------------

def test_while_runs_body_while_condition_holds(scope):
    program = """
    do(define(i, 0),
       define(total, 0),
       define(result, while(<(i, 5),
                            do(set(total, +(total, i)),
                               set(i, +(i, 1))))),
       array(result, i, total))
    """
    assert ev(program, scope) == [False, 5, 10]


def test_while_with_false_condition_never_runs_body(scope, printed):
    assert ev('while(false, print("never"))', scope) is False
    assert printed == []


def test_unbounded_while_needs_a_host_side_cap(scope):
    class StepLimit(Exception):
        pass

    steps = []

    def tick(args):
        steps.append(1)
        if len(steps) > 100:
            raise StepLimit("step budget exhausted")
        return True

    scope.define("tick", HostFunction("tick", tick, 0))
    with pytest.raises(StepLimit):
        ev("while(true, tick())", scope)
    assert len(steps) == 101


@pytest.mark.parametrize("source", ["while(true)", "while(false, 1, 2)"])
def test_while_arity(scope, source):
    with pytest.raises(EggSyntaxError):
        ev(source, scope)


# ------------------ do ------------------

def test_do_returns_last_value(scope, printed):
    assert ev("do(print(1), print(2), 3)", scope) == 3
    assert printed == ["1", "2"]


def test_empty_do_is_false(scope):
    assert ev("do()", scope) is False


# ------------------ define ------------------

def test_define_returns_value_and_binds_innermost(global_scope, scope):
    assert ev("define(x, +(1, 1))", scope) == 2
    assert scope.vars["x"] == 2
    assert "x" not in global_scope.vars


def test_define_overwrites(scope):
    assert ev("do(define(x, 1), define(x, 2), x)", scope) == 2


@pytest.mark.parametrize("source", ["define(x)", "define(1, 2)", 'define("x", 2)', "define(f(x), 1)", "define(x, 1, 2)"])
def test_define_shape(scope, source):
    with pytest.raises(EggSyntaxError):
        ev(source, scope)


def test_define_inside_function_does_not_leak(scope):
    program = """
    do(define(x, 1),
       define(f, fun(do(define(x, 2), x))),
       array(f(), x))
    """
    assert ev(program, scope) == [2, 1]


# ------------------ set ------------------

def test_set_never_creates_bindings(scope):
    with pytest.raises(EggReferenceError) as exc_info:
        ev("set(undefinedName, 1)", scope)
    assert exc_info.value.name == "undefinedName"
    assert "undefinedName" not in scope


def test_set_mutates_enclosing_binding(scope):
    program = """
    do(define(x, 4),
       define(setx, fun(val, set(x, val))),
       setx(50),
       x)
    """
    assert ev(program, scope) == 50
    assert scope.vars["x"] == 50


def test_set_returns_value(scope):
    assert ev("do(define(x, 1), set(x, 7))", scope) == 7


def test_set_value_errors_before_lookup(scope):
    with pytest.raises(EggReferenceError) as exc_info:
        ev("set(x, y)", scope)
    assert exc_info.value.name == "y"


@pytest.mark.parametrize("source", ["set(x)", "set(1, 2)", "set(x, 1, 2)"])
def test_set_shape(scope, source):
    with pytest.raises(EggSyntaxError):
        ev(source, scope)


# ------------------ fun ------------------

def test_closures_capture_defining_scope(scope):
    assert ev("do(define(f, fun(a, fun(b, +(a, b)))), f(4)(5))", scope) == 9


def test_closure_does_not_see_caller_scope(scope):
    program = """
    do(define(getx, fun(x)),
       define(call, fun(x, getx())),
       call(1))
    """
    with pytest.raises(EggReferenceError):
        ev(program, scope)


def test_counter_closure_keeps_private_state(scope):
    program = """
    do(define(counter, fun(do(define(n, 0), fun(set(n, +(n, 1)))))),
       define(c1, counter()),
       define(c2, counter()),
       c1(), c1(), c2(),
       array(c1(), c2()))
    """
    assert ev(program, scope) == [3, 2]


def test_recursion(scope):
    program = """
    do(define(pow, fun(base, exp,
         if(==(exp, 0), 1, *(base, pow(base, -(exp, 1)))))),
       pow(2, 10))
    """
    assert ev(program, scope) == 1024


def test_zero_parameter_function(scope):
    assert ev("fun(42)()", scope) == 42


@pytest.mark.parametrize("call", ["add(1)", "add(1, 2, 3)", "add()"])
def test_arity_mismatch(scope, call):
    ev("define(add, fun(a, b, +(a, b)))", scope)
    with pytest.raises(EggTypeError) as exc_info:
        ev(call, scope)
    assert "Wrong number of arguments" in str(exc_info.value)


def test_fun_body_is_not_evaluated_at_definition(scope, printed):
    ev('define(f, fun(print("called")))', scope)
    assert printed == []


@pytest.mark.parametrize("source", ["fun()", "fun(1, a)", 'fun("a", a)', "fun(f(a), a)"])
def test_fun_shape(scope, source):
    with pytest.raises(EggSyntaxError):
        ev(source, scope)
