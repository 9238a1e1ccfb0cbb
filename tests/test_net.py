import pytest

from bendkit.net import (
    ROOT,
    CtrKind,
    CtrVariant,
    INet,
    NodeKind,
    NodeTag,
    Port,
)


def test_root_port_points_to_itself():
    net = INet()
    assert len(net) == 1
    assert net.enter_port(ROOT) == ROOT
    assert net.node(0).kind.tag is NodeTag.ROT


def test_root_main_and_aux2_point_to_each_other():
    net = INet()
    assert net.enter_port(Port(0, 0)) == Port(0, 2)
    assert net.enter_port(Port(0, 2)) == Port(0, 0)


def test_new_node_is_disconnected():
    net = INet()
    idx = net.new_node(NodeKind(NodeTag.ERA))
    assert idx == 1
    for slot in range(3):
        assert net.enter_port(Port(idx, slot)) == Port(idx, slot)


def test_link_is_symmetric():
    net = INet()
    a = net.new_node(NodeKind(NodeTag.OPR))
    b = net.new_node(NodeKind(NodeTag.MAT))
    net.link(Port(a, 1), Port(b, 0))
    assert net.enter_port(Port(a, 1)) == Port(b, 0)
    assert net.enter_port(Port(b, 0)) == Port(a, 1)


def test_link_to_root():
    net = INet()
    n = net.new_node(NodeKind(NodeTag.NUM, val=3))
    net.link(Port(n, 0), ROOT)
    assert net.enter_port(ROOT) == Port(n, 0)


def test_set_is_one_directional():
    net = INet()
    n = net.new_node(NodeKind(NodeTag.ERA))
    net.set(Port(n, 2), ROOT)
    assert net.enter_port(Port(n, 2)) == ROOT
    assert net.enter_port(ROOT) == ROOT


def test_invalid_slot():
    net = INet()
    with pytest.raises(IndexError):
        net.node(0).port(3)


@pytest.mark.parametrize("lab", [0, 1])
def test_lab_round_trip(lab):
    assert CtrKind.from_lab(lab).to_lab() == lab


def test_from_lab_values():
    assert CtrKind.from_lab(0) == CtrKind(CtrVariant.CON)
    assert CtrKind.from_lab(4) == CtrKind(CtrVariant.DUP, 3)


def test_tup_without_label_is_zero():
    assert CtrKind(CtrVariant.TUP).to_lab() == 0


@pytest.mark.parametrize(
    "kind",
    [CtrKind(CtrVariant.CON, 1), CtrKind(CtrVariant.TUP, 2), CtrKind(CtrVariant.DUP, 5)],
)
def test_tagged_kinds_not_supported(kind):
    with pytest.raises(NotImplementedError):
        kind.to_lab()


def test_node_kind_requires_payload():
    with pytest.raises(ValueError):
        NodeKind(NodeTag.CTR)
    with pytest.raises(ValueError):
        NodeKind(NodeTag.REF)
    assert NodeKind(NodeTag.REF, def_name="main").def_name == "main"