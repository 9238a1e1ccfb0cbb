import itertools

from bendkit.imp_ast import (
    Assign,
    Bin,
    Call,
    Constructor,
    Definition,
    Do,
    If,
    Lam,
    MapGet,
    MapInit,
    Num,
    Op,
    PatTup,
    PatVar,
    Return,
    Var,
)
from bendkit.map_get import gen_map_get, substitute_map_gets


def _contains_map_get(node):
    if isinstance(node, MapGet):
        return True
    if isinstance(node, (list, tuple)):
        return any(_contains_map_get(item) for item in node)
    if hasattr(node, "__dataclass_fields__"):
        return any(_contains_map_get(getattr(node, f)) for f in node.__dataclass_fields__)
    return False


def test_return_of_map_get():
    d = Definition("main", ["m"], Return(MapGet("m", Num(1))))
    gen_map_get(d)
    assert d.body == Assign(
        PatTup([PatVar("map/get%0"), PatVar("m")]),
        Call(Var("Map/get"), [Var("m"), Num(1)], []),
        Return(Var("map/get%0")),
    )


def test_substitute_in_binary_expression():
    counter = itertools.count()
    expr = Bin(Op.ADD, MapGet("a", Num(1)), MapGet("b", Num(2)))
    new, subs = substitute_map_gets(expr, counter)
    names = list(subs)
    assert new == Bin(Op.ADD, Var(names[0]), Var(names[1]))
    assert [subs[n] for n in names] == [("a", Num(1)), ("b", Num(2))]
    assert len(set(names)) == 2


def test_no_map_get_leaves_expression():
    expr = Call(Var("f"), [Num(1)], [])
    new, subs = substitute_map_gets(expr, itertools.count())
    assert subs == {}
    assert new == Call(Var("f"), [Num(1)], [])


def test_lambda_body_and_map_init_values():
    expr = Lam([("x", False)], MapInit([(Num(0), MapGet("m", Var("x")))]))
    new, subs = substitute_map_gets(expr, itertools.count())
    assert len(subs) == 1
    assert not _contains_map_get(new)
    (name,) = subs
    assert new.bod.entries[0][1] == Var(name)


def test_constructor_positional_args_untouched():
    expr = Constructor("C", [MapGet("m", Num(1))], [])
    new, subs = substitute_map_gets(expr, itertools.count())
    assert subs == {}
    assert isinstance(new.args[0], MapGet)


def test_next_statement_numbered_first():
    d = Definition(
        "main",
        [],
        Assign(PatVar("x"), MapGet("m", Num(1)), Return(MapGet("m", Num(2)))),
    )
    gen_map_get(d)
    outer = d.body
    inner_assign = outer.nxt
    ret_wrapper = inner_assign.nxt
    # outer wrapper binds the lookup of key 1, which was numbered after key 2
    assert outer.val.args[1] == Num(1)
    assert ret_wrapper.val.args[1] == Num(2)
    assert outer.pat.els[0].nam != ret_wrapper.pat.els[0].nam
    assert inner_assign.val == Var(outer.pat.els[0].nam)
    assert ret_wrapper.nxt == Return(Var(ret_wrapper.pat.els[0].nam))


def test_last_substitution_is_outermost():
    d = Definition("f", [], Return(Bin(Op.ADD, MapGet("m", Num(1)), MapGet("n", Num(2)))))
    gen_map_get(d)
    assert d.body.pat.els[1] == PatVar("n")
    assert d.body.nxt.pat.els[1] == PatVar("m")
    assert isinstance(d.body.nxt.nxt, Return)


def test_nested_statements_have_no_map_gets():
    body = If(
        MapGet("m", Num(0)),
        Return(MapGet("m", Num(1))),
        Do("IO", Return(MapGet("m", Num(2)))),
    )
    d = Definition("f", ["m"], body)
    gen_map_get(d)
    assert not _contains_map_get(d.body)
    assert d.body.val == Call(Var("Map/get"), [Var("m"), Num(0)], [])
    assert d.body.pat.els[1] == PatVar("m")
    branch = d.body.nxt
    assert branch.cond == Var(d.body.pat.els[0].nam)
    assert branch.then.val == Call(Var("Map/get"), [Var("m"), Num(1)], [])
    assert branch.then.nxt == Return(Var(branch.then.pat.els[0].nam))
    inner = branch.otherwise.bod
    assert inner.val == Call(Var("Map/get"), [Var("m"), Num(2)], [])
    assert inner.nxt == Return(Var(inner.pat.els[0].nam))