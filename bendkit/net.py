"""Intermediate interaction-net representation used during readback."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import NamedTuple, Optional


class Port(NamedTuple):
    """A slot (0 main, 1 and 2 auxiliary) of a node."""

    node: int
    slot: int


ROOT = Port(0, 1)
"""The root port, on the deadlocked root node at address 0."""

TAG_WIDTH = 4
TAG = 64 - TAG_WIDTH
LABEL_MASK = (1 << TAG) - 1
TAG_MASK = ~LABEL_MASK & ((1 << 64) - 1)


class CtrVariant(enum.Enum):
    CON = "con"
    TUP = "tup"
    DUP = "dup"


@dataclass(frozen=True)
class CtrKind:
    """Kind of a binary combinator node and its optional label."""

    variant: CtrVariant
    lab: Optional[int] = None

    def to_lab(self) -> int:
        """The hvm label for this combinator kind."""
        if self.variant is CtrVariant.CON:
            if self.lab is None:
                return 0
            raise NotImplementedError("Tagged lambdas/applications not implemented for hvm32")
        if self.variant is CtrVariant.TUP:
            if self.lab is None:
                return 0
            raise NotImplementedError("Tagged tuples not implemented for hvm32")
        if self.lab == 0:
            return 1
        raise NotImplementedError("Tagged dups/sups not implemented for hvm32")

    @classmethod
    def from_lab(cls, lab: int) -> CtrKind:
        """Label 0 is a constructor; any other label n is a dup labelled n - 1."""
        if lab == 0:
            return cls(CtrVariant.CON)
        return cls(CtrVariant.DUP, lab - 1)


class NodeTag(enum.Enum):
    ROT = "rot"
    ERA = "era"
    CTR = "ctr"
    REF = "ref"
    NUM = "num"
    OPR = "opr"
    MAT = "mat"


@dataclass(frozen=True)
class NodeKind:
    """What a node is; ``ctr``, ``def_name`` and ``val`` belong to CTR, REF and NUM."""

    tag: NodeTag
    ctr: Optional[CtrKind] = None
    def_name: Optional[str] = None
    val: Optional[int] = None

    def __post_init__(self) -> None:
        if self.tag is NodeTag.CTR and self.ctr is None:
            raise ValueError("combinator node needs a CtrKind")
        if self.tag is NodeTag.REF and self.def_name is None:
            raise ValueError("reference node needs a definition name")
        if self.tag is NodeTag.NUM and self.val is None:
            raise ValueError("number node needs a value")


@dataclass
class Node:
    main: Port
    aux1: Port
    aux2: Port
    kind: NodeKind

    _SLOTS = ("main", "aux1", "aux2")

    def port(self, slot: int) -> Port:
        """The port stored in the given slot."""
        return getattr(self, self._slot_name(slot))

    def set_port(self, slot: int, port: Port) -> None:
        """Store a port in the given slot."""
        setattr(self, self._slot_name(slot), port)

    @classmethod
    def _slot_name(cls, slot: int) -> str:
        if slot not in (0, 1, 2):
            raise IndexError(f"invalid slot {slot}")
        return cls._SLOTS[slot]


class INet:
    """A net of three-port nodes, starting with a deadlocked root node."""

    def __init__(self) -> None:
        self._nodes: list[Node] = [
            Node(Port(0, 2), Port(0, 1), Port(0, 0), NodeKind(NodeTag.ROT))
        ]

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self):
        return iter(self._nodes)

    def new_node(self, kind: NodeKind) -> int:
        """Add a node whose ports point to themselves and return its id."""
        idx = len(self._nodes)
        self._nodes.append(Node(Port(idx, 0), Port(idx, 1), Port(idx, 2), kind))
        return idx

    def node(self, node: int) -> Node:
        return self._nodes[node]

    def enter_port(self, port: Port) -> Port:
        """The port on the other side of the given one."""
        return self.node(port.node).port(port.slot)

    def link(self, a: Port, b: Port) -> None:
        """Connect two ports to each other."""
        self.set(a, b)
        self.set(b, a)

    def set(self, src: Port, dst: Port) -> None:
        """Make ``src`` point to ``dst``."""
        self._nodes[src.node].set_port(src.slot, dst)


@dataclass
class INode:
    """A node of the flat representation, whose ports are named wires."""

    kind: NodeKind
    ports: tuple[str, str, str]