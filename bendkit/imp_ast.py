"""Syntax tree of the imperative surface language."""

from __future__ import annotations

import enum as _enum
from dataclasses import dataclass, field
from typing import Optional, Union


class Op(_enum.Enum):
    """Binary numeric operators."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    REM = "%"
    EQL = "=="
    NEQ = "!="
    LTN = "<"
    GTN = ">"
    AND = "&"
    OR = "|"
    XOR = "^"
    POW = "**"


class InPlaceOp(_enum.Enum):
    """Operators of in-place assignments such as ``x += 1``."""

    ADD = "+="
    SUB = "-="
    MUL = "*="
    DIV = "/="
    AND = "&="
    OR = "|="
    XOR = "^="

    def to_lang_op(self) -> Op:
        """The binary operator this in-place operator applies."""
        return Op[self.name]


@dataclass
class CtrField:
    """A constructor field; ``rec`` marks a recursive field."""

    nam: str
    rec: bool = False


# Expressions


@dataclass
class Eraser:
    """``*``"""


@dataclass
class Var:
    nam: str


@dataclass
class Chn:
    """Unscoped variable ``$name``."""

    nam: str


@dataclass
class Num:
    val: int


@dataclass
class Call:
    fun: "Expr"
    args: list["Expr"] = field(default_factory=list)
    kwargs: list[tuple[str, "Expr"]] = field(default_factory=list)


@dataclass
class Lam:
    """Lambda; each name is paired with whether it is an unscoped binder."""

    names: list[tuple[str, bool]]
    bod: "Expr"


@dataclass
class Bin:
    op: Op
    lhs: "Expr"
    rhs: "Expr"


@dataclass
class Str:
    val: str


@dataclass
class Lst:
    els: list["Expr"] = field(default_factory=list)


@dataclass
class Tup:
    els: list["Expr"] = field(default_factory=list)


@dataclass
class Sup:
    els: list["Expr"] = field(default_factory=list)


@dataclass
class Constructor:
    name: str
    args: list["Expr"] = field(default_factory=list)
    kwargs: list[tuple[str, "Expr"]] = field(default_factory=list)


@dataclass
class Comprehension:
    term: "Expr"
    bind: str
    iter: "Expr"
    cond: Optional["Expr"] = None


@dataclass
class MapInit:
    entries: list[tuple["Expr", "Expr"]] = field(default_factory=list)


@dataclass
class MapGet:
    nam: str
    key: "Expr"


Expr = Union[
    Eraser, Var, Chn, Num, Call, Lam, Bin, Str, Lst, Tup, Sup,
    Constructor, Comprehension, MapInit, MapGet,
]


# Assignment patterns


@dataclass
class PatEraser:
    """``*``"""


@dataclass
class PatVar:
    nam: str


@dataclass
class PatChn:
    nam: str


@dataclass
class PatTup:
    els: list["AssignPattern"]


@dataclass
class PatSup:
    els: list["AssignPattern"]


@dataclass
class PatMapSet:
    """``name[key]`` on the left of an assignment."""

    nam: str
    key: Expr


AssignPattern = Union[PatEraser, PatVar, PatChn, PatTup, PatSup, PatMapSet]


# Statements


@dataclass
class MatchArm:
    lft: Optional[str]
    rgt: "Stmt"


@dataclass
class Assign:
    pat: AssignPattern
    val: Expr
    nxt: Optional["Stmt"] = None


@dataclass
class InPlace:
    op: InPlaceOp
    var: str
    val: Expr
    nxt: "Stmt"


@dataclass
class If:
    cond: Expr
    then: "Stmt"
    otherwise: "Stmt"
    nxt: Optional["Stmt"] = None


@dataclass
class Match:
    arg: Expr
    bind: Optional[str]
    arms: list[MatchArm]
    nxt: Optional["Stmt"] = None


@dataclass
class Switch:
    arg: Expr
    bind: Optional[str]
    arms: list["Stmt"]
    nxt: Optional["Stmt"] = None


@dataclass
class Bend:
    bind: list[Optional[str]]
    init: list[Expr]
    cond: Expr
    step: "Stmt"
    base: "Stmt"
    nxt: Optional["Stmt"] = None


@dataclass
class Fold:
    arg: Expr
    bind: Optional[str]
    with_: list[str]
    arms: list[MatchArm]
    nxt: Optional["Stmt"] = None


@dataclass
class Do:
    typ: str
    bod: "Stmt"
    nxt: Optional["Stmt"] = None


@dataclass
class Ask:
    pat: AssignPattern
    val: Expr
    nxt: "Stmt"


@dataclass
class Return:
    term: Expr


@dataclass
class Open:
    typ: str
    var: str
    nxt: "Stmt"


@dataclass
class Use:
    nam: str
    val: Expr
    nxt: "Stmt"


@dataclass
class ErrStmt:
    """Placeholder statement left behind by a failed parse."""


Stmt = Union[
    Assign, InPlace, If, Match, Switch, Bend, Fold, Do, Ask, Return, Open, Use, ErrStmt,
]


# Top-level items


@dataclass
class Variant:
    name: str
    fields: list[CtrField] = field(default_factory=list)


@dataclass
class Definition:
    name: str
    params: list[str]
    body: Stmt


@dataclass
class Enum:
    name: str
    variants: list[Variant] = field(default_factory=list)