import pytest

from bendkit.imp_ast import (
    Assign,
    Bin,
    Call,
    Constructor,
    Definition,
    If,
    Lam,
    Num,
    Op,
    PatVar,
    Return,
    Var,
)
from bendkit.kwargs import KwargsError, order_call_kwargs, order_kwargs


def test_order_call_kwargs_reorders():
    result = order_call_kwargs(["a", "b", "c"], [Num(1)], [("c", Num(3)), ("b", Num(2))])
    assert result == [Num(1), Num(2), Num(3)]


def test_order_call_kwargs_wrong_count():
    with pytest.raises(KwargsError) as info:
        order_call_kwargs(["a", "b"], [Num(1)], [])
    assert str(info.value) == (
        "Named args are only allowed when calling a function with the exact number of arguments."
    )


def test_order_call_kwargs_missing():
    with pytest.raises(KwargsError, match="Named arg 'b' is missing."):
        order_call_kwargs(["a", "b"], [], [("a", Num(1)), ("z", Num(2))])


def test_order_kwargs_in_definition():
    call = Call(Var("f"), [], [("y", Num(2)), ("x", Num(1))])
    d = Definition("main", [], Return(call))
    order_kwargs(d, {"f": ["x", "y"]})
    assert d.body.term == Call(Var("f"), [Num(1), Num(2)], [])


def test_order_kwargs_with_callable_lookup():
    call = Call(Var("g"), [Num(0)], [("b", Num(5))])
    d = Definition("main", [], Assign(PatVar("r"), call, Return(Var("r"))))
    order_kwargs(d, lambda name: ["a", "b"] if name == "g" else None)
    assert d.body.val.args == [Num(0), Num(5)]
    assert d.body.val.kwargs == []


def test_call_on_unknown_variable():
    d = Definition("main", [], Return(Call(Var("g"), [], [("a", Num(1))])))
    with pytest.raises(KwargsError) as info:
        order_kwargs(d, {})
    assert str(info.value) == (
        "In function 'main':\n  Named args are only allowed when calling a named function, "
        "not when calling variable 'g'."
    )


def test_call_on_expression():
    fun = Lam([("x", False)], Var("x"))
    d = Definition("main", [], Return(Call(fun, [], [("x", Num(1))])))
    with pytest.raises(KwargsError, match="not when calling an expression"):
        order_kwargs(d, {})


def test_positional_call_on_unknown_is_fine():
    call = Call(Var("g"), [Num(1)], [])
    d = Definition("main", [], Return(call))
    order_kwargs(d, {})
    assert d.body.term.args == [Num(1)]


def test_constructor_not_found():
    d = Definition("main", [], Return(Constructor("Foo", [], [])))
    with pytest.raises(KwargsError, match="Constructor 'Foo' not found."):
        order_kwargs(d, {})


def test_constructor_reorders_nested_in_if():
    ctr = Constructor("Pair", [], [("snd", Num(2)), ("fst", Bin(Op.ADD, Num(1), Num(1)))])
    d = Definition("main", [], If(Var("c"), Return(ctr), Return(Num(0))))
    order_kwargs(d, {"Pair": ["fst", "snd"]})
    assert d.body.then.term.args == [Bin(Op.ADD, Num(1), Num(1)), Num(2)]
    assert d.body.then.term.kwargs == []