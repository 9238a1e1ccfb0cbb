"""Lowering of map lookups ``m[k]`` into explicit ``Map/get`` calls.

Every map lookup inside an expression is replaced by a fresh variable, and
the statement holding the expression is preceded by an assignment
``(fresh, m) = Map/get(m, k)`` that binds it.
"""

from __future__ import annotations

import itertools
from typing import Iterator

from .imp_ast import (
    Ask,
    Assign,
    Bend,
    Bin,
    Call,
    Comprehension,
    Constructor,
    Definition,
    Do,
    ErrStmt,
    Expr,
    Fold,
    If,
    InPlace,
    Lam,
    Lst,
    MapGet,
    MapInit,
    Match,
    Open,
    PatTup,
    PatVar,
    Return,
    Stmt,
    Sup,
    Switch,
    Tup,
    Use,
    Var,
)

Substitutions = dict[str, tuple[str, Expr]]
"""Fresh variable name mapped to the map name and key it was read from."""

MAP_GET_FUNCTION = "Map/get"


def gen_map_get(definition: Definition) -> None:
    """Replace every map lookup in the definition's body, in place."""
    definition.body = _stmt(definition.body, itertools.count())


def substitute_map_gets(expr: Expr, counter: Iterator[int]) -> tuple[Expr, Substitutions]:
    """Replace map lookups in ``expr`` with fresh variables.

    Returns the rewritten expression and the substitutions made, in the order
    they were made. ``counter`` supplies the numbers of the fresh names.
    """
    substitutions: Substitutions = {}
    return _expr(expr, substitutions, counter), substitutions


def _expr(expr: Expr, subs: Substitutions, counter: Iterator[int]) -> Expr:
    if isinstance(expr, MapGet):
        name = f"map/get%{next(counter)}"
        subs[name] = (expr.nam, expr.key)
        return Var(name)
    if isinstance(expr, Call):
        expr.fun = _expr(expr.fun, subs, counter)
        expr.args = [_expr(arg, subs, counter) for arg in expr.args]
        expr.kwargs = [(name, _expr(arg, subs, counter)) for name, arg in expr.kwargs]
    elif isinstance(expr, Lam):
        expr.bod = _expr(expr.bod, subs, counter)
    elif isinstance(expr, Bin):
        expr.lhs = _expr(expr.lhs, subs, counter)
        expr.rhs = _expr(expr.rhs, subs, counter)
    elif isinstance(expr, (Lst, Tup, Sup)):
        expr.els = [_expr(el, subs, counter) for el in expr.els]
    elif isinstance(expr, Constructor):
        expr.kwargs = [(name, _expr(arg, subs, counter)) for name, arg in expr.kwargs]
    elif isinstance(expr, Comprehension):
        expr.term = _expr(expr.term, subs, counter)
        expr.iter = _expr(expr.iter, subs, counter)
        if expr.cond is not None:
            expr.cond = _expr(expr.cond, subs, counter)
    elif isinstance(expr, MapInit):
        expr.entries = [(key, _expr(val, subs, counter)) for key, val in expr.entries]
    return expr


def _opt(stmt: Stmt | None, counter: Iterator[int]) -> Stmt | None:
    return None if stmt is None else _stmt(stmt, counter)


def _stmt(stmt: Stmt, counter: Iterator[int]) -> Stmt:
    if isinstance(stmt, Assign):
        stmt.nxt = _opt(stmt.nxt, counter)
        stmt.val, subs = substitute_map_gets(stmt.val, counter)
    elif isinstance(stmt, (Ask, InPlace)):
        stmt.nxt = _stmt(stmt.nxt, counter)
        stmt.val, subs = substitute_map_gets(stmt.val, counter)
    elif isinstance(stmt, If):
        stmt.then = _stmt(stmt.then, counter)
        stmt.otherwise = _stmt(stmt.otherwise, counter)
        stmt.nxt = _opt(stmt.nxt, counter)
        stmt.cond, subs = substitute_map_gets(stmt.cond, counter)
    elif isinstance(stmt, (Match, Fold)):
        for arm in stmt.arms:
            arm.rgt = _stmt(arm.rgt, counter)
        stmt.nxt = _opt(stmt.nxt, counter)
        stmt.arg, subs = substitute_map_gets(stmt.arg, counter)
    elif isinstance(stmt, Switch):
        stmt.arms = [_stmt(arm, counter) for arm in stmt.arms]
        stmt.nxt = _opt(stmt.nxt, counter)
        stmt.arg, subs = substitute_map_gets(stmt.arg, counter)
    elif isinstance(stmt, Bend):
        stmt.step = _stmt(stmt.step, counter)
        stmt.base = _stmt(stmt.base, counter)
        stmt.nxt = _opt(stmt.nxt, counter)
        stmt.cond, subs = substitute_map_gets(stmt.cond, counter)
        new_init = []
        for init in stmt.init:
            init, init_subs = substitute_map_gets(init, counter)
            subs.update(init_subs)
            new_init.append(init)
        stmt.init = new_init
    elif isinstance(stmt, Do):
        stmt.bod = _stmt(stmt.bod, counter)
        stmt.nxt = _opt(stmt.nxt, counter)
        return stmt
    elif isinstance(stmt, Return):
        stmt.term, subs = substitute_map_gets(stmt.term, counter)
    elif isinstance(stmt, Open):
        stmt.nxt = _stmt(stmt.nxt, counter)
        return stmt
    elif isinstance(stmt, Use):
        stmt.nxt = _stmt(stmt.nxt, counter)
        stmt.val, subs = substitute_map_gets(stmt.val, counter)
    elif isinstance(stmt, ErrStmt):
        return stmt
    else:
        raise TypeError(f"not a statement: {stmt!r}")
    return _wrap(stmt, subs)


def _wrap(stmt: Stmt, subs: Substitutions) -> Stmt:
    """Precede ``stmt`` with one ``Map/get`` assignment per substitution."""
    acc = stmt
    for var, (map_var, key) in subs.items():
        call = Call(Var(MAP_GET_FUNCTION), [Var(map_var), key], [])
        pat = PatTup([PatVar(var), PatVar(map_var)])
        acc = Assign(pat, call, acc)
    return acc