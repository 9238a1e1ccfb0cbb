"""Reordering of named arguments into positional order."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Iterator, Optional, Union

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
    MapInit,
    Match,
    Open,
    Return,
    Stmt,
    Sup,
    Switch,
    Tup,
    Use,
    Var,
)

ArgLookup = Union[
    Mapping[str, Sequence[str]],
    Callable[[str], Optional[Sequence[str]]],
]
"""Gives the parameter names of a function or constructor, or None if unknown."""

_STMT_TYPES = (Assign, InPlace, If, Match, Switch, Bend, Fold, Do, Ask, Return, Open, Use, ErrStmt)


class KwargsError(Exception):
    """Named arguments that cannot be put into positional order."""


def order_kwargs(definition: Definition, lookup: ArgLookup) -> None:
    """Rewrite every call in the definition so named arguments become positional."""
    find = lookup.get if isinstance(lookup, Mapping) else lookup
    try:
        _stmt(definition.body, find)
    except KwargsError as err:
        raise KwargsError(f"In function '{definition.name}':\n  {err}") from None


def order_call_kwargs(
    names: Sequence[str], args: Sequence[Expr], kwargs: Sequence[tuple[str, Expr]]
) -> list[Expr]:
    """Return the full positional argument list for a call to a function with ``names``."""
    if len(args) + len(kwargs) != len(names):
        raise KwargsError(
            "Named args are only allowed when calling a function with the exact number of arguments."
        )
    pending = dict(kwargs)
    ordered = list(args)
    for name in names[len(args):]:
        try:
            ordered.append(pending.pop(name))
        except KeyError:
            raise KwargsError(f"Named arg '{name}' is missing.") from None
    if pending:
        raise KwargsError(f"Unexpected named arg in function call {next(iter(pending))}.")
    return ordered


def _parts(stmt: Stmt) -> Iterator[Union[Expr, Stmt]]:
    """Child expressions and statements of ``stmt``, in visiting order."""
    if isinstance(stmt, (Assign, Ask, InPlace, Use)):
        yield stmt.val
        if stmt.nxt is not None:
            yield stmt.nxt
    elif isinstance(stmt, If):
        yield stmt.cond
        yield stmt.then
        yield stmt.otherwise
        if stmt.nxt is not None:
            yield stmt.nxt
    elif isinstance(stmt, (Match, Fold)):
        yield stmt.arg
        for arm in stmt.arms:
            yield arm.rgt
        if stmt.nxt is not None:
            yield stmt.nxt
    elif isinstance(stmt, Switch):
        yield stmt.arg
        yield from stmt.arms
        if stmt.nxt is not None:
            yield stmt.nxt
    elif isinstance(stmt, Bend):
        yield from stmt.init
        yield stmt.cond
        yield stmt.step
        yield stmt.base
        if stmt.nxt is not None:
            yield stmt.nxt
    elif isinstance(stmt, Do):
        yield stmt.bod
        if stmt.nxt is not None:
            yield stmt.nxt
    elif isinstance(stmt, Open):
        yield stmt.nxt
    elif isinstance(stmt, Return):
        yield stmt.term


def _stmt(stmt: Stmt, find) -> None:
    for part in _parts(stmt):
        if isinstance(part, _STMT_TYPES):
            _stmt(part, find)
        else:
            _expr(part, find)


def _expr(expr: Expr, find) -> None:
    if isinstance(expr, Call):
        if expr.kwargs:
            if not isinstance(expr.fun, Var):
                raise KwargsError(
                    "Named args are only allowed when calling a named function, "
                    "not when calling an expression."
                )
            names = find(expr.fun.nam)
            if names is None:
                raise KwargsError(
                    "Named args are only allowed when calling a named function, "
                    f"not when calling variable '{expr.fun.nam}'."
                )
            expr.args = order_call_kwargs(names, expr.args, expr.kwargs)
            expr.kwargs = []
        _expr(expr.fun, find)
        for arg in expr.args:
            _expr(arg, find)
    elif isinstance(expr, Constructor):
        names = find(expr.name)
        if names is None:
            raise KwargsError(f"Constructor '{expr.name}' not found.")
        expr.args = order_call_kwargs(names, expr.args, expr.kwargs)
        expr.kwargs = []
        for arg in expr.args:
            _expr(arg, find)
    elif isinstance(expr, Lam):
        _expr(expr.bod, find)
    elif isinstance(expr, Bin):
        _expr(expr.lhs, find)
        _expr(expr.rhs, find)
    elif isinstance(expr, (Lst, Tup, Sup)):
        for el in expr.els:
            _expr(el, find)
    elif isinstance(expr, Comprehension):
        _expr(expr.term, find)
        _expr(expr.iter, find)
        if expr.cond is not None:
            _expr(expr.cond, find)
    elif isinstance(expr, MapInit):
        for _, val in expr.entries:
            _expr(val, find)