from fabric_chassis.chassis.classify import (
    VTR_DEVID_SFB4,
    VTR_DEVID_SLB2024,
    VTR_DEVID_SLB8,
    VTR_VENDOR_ID,
)
from fabric_chassis.chassis.portmap import map_external_port, map_node_ports
from fabric_chassis.core.types import Node, NodeType


def make_line(device_id: int, chip: int, processed: bool = True) -> Node:
    node = Node(
        guid=0x200,
        vendor_id=VTR_VENDOR_ID,
        device_id=device_id,
        node_type=NodeType.switch,
        num_ports=24,
    )
    node.subchip_number = chip
    node.processed = processed
    for portnum in range(1, 25):
        node.add_port(portnum)
    return node


def test_slb8_shares_front_panel_ports():
    node = make_line(VTR_DEVID_SLB8, chip=2)
    map_node_ports(node)

    assert [node.port(p).ext_portnum for p in (13, 14, 15)] == [4, 4, 4]
    assert node.port(24).ext_portnum == 7


def test_slb2024_chip_one_maps_to_upper_half():
    node = make_line(VTR_DEVID_SLB2024, chip=1)
    map_node_ports(node)

    assert [node.port(p).ext_portnum for p in range(13, 25)] == list(range(13, 25))
    assert all(node.port(p).ext_portnum == 0 for p in range(1, 13))


def test_unknown_chip_maps_to_nothing():
    node = make_line(VTR_DEVID_SLB2024, chip=3)
    map_node_ports(node)

    assert all(p.ext_portnum == 0 for p in node.iter_ports())


def test_unprocessed_or_non_line_node_maps_to_nothing():
    unplaced = make_line(VTR_DEVID_SLB2024, chip=1, processed=False)
    unplaced.port(13).ext_portnum = 5
    map_external_port(unplaced.port(13))
    assert unplaced.port(13).ext_portnum == 0

    spine = make_line(VTR_DEVID_SFB4, chip=1)
    map_node_ports(spine)
    assert all(p.ext_portnum == 0 for p in spine.iter_ports())
