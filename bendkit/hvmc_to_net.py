"""Conversion of textual hvm nets into the intermediate net representation."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Union

from .net import ROOT, CtrKind, CtrVariant, INet, INode, NodeKind, NodeTag, Port


@dataclass(frozen=True)
class TreeEra:
    """``*``"""


@dataclass(frozen=True)
class TreeCtr:
    """A combinator with a label and any number of ports."""

    lab: int
    ports: tuple["Tree", ...] = ()


@dataclass(frozen=True)
class TreeVar:
    nam: str


@dataclass(frozen=True)
class TreeRef:
    nam: str


@dataclass(frozen=True)
class TreeNum:
    val: int


@dataclass(frozen=True)
class TreeOp:
    fst: "Tree"
    snd: "Tree"


@dataclass(frozen=True)
class TreeMat:
    zero: "Tree"
    succ: "Tree"
    out: "Tree"


Tree = Union[TreeEra, TreeCtr, TreeVar, TreeRef, TreeNum, TreeOp, TreeMat]


@dataclass
class HvmcNet:
    """A root tree and a list of active pairs."""

    root: Tree
    redexes: list[tuple[Tree, Tree]] = field(default_factory=list)


def hvmc_to_net(net: HvmcNet) -> INet:
    """Convert an hvm net into an INet."""
    return inodes_to_inet(hvmc_to_inodes(net))


def hvmc_to_inodes(net: HvmcNet) -> list[INode]:
    """Flatten the net into nodes whose ports are named wires.

    The wire ``"_"`` stands for the net's root; redex trees are rooted at
    ``a0``, ``a1``, ... and fresh wires are named ``x0``, ``x1``, ...
    """
    net_root = net.root.nam if isinstance(net.root, TreeVar) else ""
    conv = _Converter(net_root)
    inodes: list[INode] = []
    if not isinstance(net.root, TreeVar):
        inodes.extend(conv.tree(net.root, "_"))
    for i, (fst, snd) in enumerate(net.redexes):
        tree_root = f"a{i}"
        inodes.extend(conv.tree(fst, tree_root))
        inodes.extend(conv.tree(snd, tree_root))
    return inodes


def inodes_to_inet(inodes: list[INode]) -> INet:
    """Build an INet, linking ports that share a wire name."""
    inet = INet()
    waiting: dict[str, Port] = {}
    for inode in inodes:
        node = inet.new_node(inode.kind)
        for slot, name in enumerate(inode.ports):
            port = Port(node, slot)
            if name == "_":
                inet.link(port, ROOT)
            elif name in waiting:
                inet.link(port, waiting.pop(name))
            else:
                waiting[name] = port
    return inet


class _Converter:
    def __init__(self, net_root: str) -> None:
        self.net_root = net_root
        self._count = itertools.count()

    def new_var(self) -> str:
        return f"x{next(self._count)}"

    def _leaf(self, kind: NodeKind, root: str) -> INode:
        var = self.new_var()
        return INode(kind, (root, var, var))

    def tree(self, tree: Tree, tree_root: str) -> list[INode]:
        inodes: list[INode] = []
        pending: list[tuple[str, Tree]] = [(tree_root, tree)]
        while pending:
            root, sub = pending.pop()
            if isinstance(sub, TreeEra):
                inodes.append(self._leaf(NodeKind(NodeTag.ERA), root))
            elif isinstance(sub, TreeCtr):
                self._ctr(inodes, sub.lab, sub.ports, root, pending)
            elif isinstance(sub, TreeRef):
                inodes.append(self._leaf(NodeKind(NodeTag.REF, def_name=sub.nam), root))
            elif isinstance(sub, TreeNum):
                inodes.append(self._leaf(NodeKind(NodeTag.NUM, val=sub.val), root))
            elif isinstance(sub, TreeOp):
                fst = self._subtree(sub.fst, pending)
                snd = self._subtree(sub.snd, pending)
                inodes.append(INode(NodeKind(NodeTag.OPR), (root, fst, snd)))
            elif isinstance(sub, TreeMat):
                zero = self._subtree(sub.zero, pending)
                succ = self._subtree(sub.succ, pending)
                sel = self.new_var()
                con = NodeKind(NodeTag.CTR, ctr=CtrKind(CtrVariant.CON))
                inodes.append(INode(con, (sel, zero, succ)))
                ret = self._subtree(sub.out, pending)
                inodes.append(INode(NodeKind(NodeTag.MAT), (root, sel, ret)))
            elif isinstance(sub, TreeVar):
                raise ValueError(f"unexpected variable '{sub.nam}' as a tree root")
            else:
                raise TypeError(f"not a tree: {sub!r}")
        return inodes

    def _subtree(self, sub: Tree, pending: list[tuple[str, Tree]]) -> str:
        if isinstance(sub, TreeVar):
            return "_" if sub.nam == self.net_root else sub.nam
        if isinstance(sub, TreeCtr) and len(sub.ports) == 1:
            return self._subtree(sub.ports[0], pending)
        var = self.new_var()
        pending.append((var, sub))
        return var

    def _ctr(self, inodes, lab, ports, principal, pending) -> None:
        if not ports:
            inodes.append(self._leaf(NodeKind(NodeTag.ERA), principal))
        elif len(ports) == 1:
            pending.append((principal, ports[0]))
        else:
            kind = NodeKind(NodeTag.CTR, ctr=CtrKind.from_lab(lab))
            rgt = self._sub_ctr(inodes, lab, ports[1:], pending)
            lft = self._subtree(ports[0], pending)
            inodes.append(INode(kind, (principal, lft, rgt)))

    def _sub_ctr(self, inodes, lab, ports, pending) -> str:
        if len(ports) == 1:
            return self._subtree(ports[0], pending)
        principal = self.new_var()
        self._ctr(inodes, lab, ports, principal, pending)
        return principal