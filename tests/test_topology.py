import pytest

from fabric_chassis.chassis.classify import (
    VTR_DEVID_IB_IP_ROUTER,
    VTR_DEVID_SFB12,
    VTR_DEVID_SFB4,
    VTR_DEVID_SLB24,
    VTR_VENDOR_ID,
)
from fabric_chassis.chassis.topology import fill_chassis_record, line_index, spine_index
from fabric_chassis.core.errors import SlotIndexOutOfRange, UnknownHardwareModel
from fabric_chassis.core.types import ChassisType, Node, NodeType, SlotKind
from fabric_chassis.discovery.fabric import Fabric


def make_node(guid: int, device_id: int, node_type: NodeType = NodeType.switch, distance: int = 0) -> Node:
    return Node(
        guid=guid,
        vendor_id=VTR_VENDOR_ID,
        device_id=device_id,
        node_type=node_type,
        num_ports=24,
        distance=distance,
    )


def test_spine_places_itself_from_first_line_port():
    fabric = Fabric()
    spine = fabric.add_node(make_node(0x100, VTR_DEVID_SFB12))
    fabric.add_node(make_node(0x200, VTR_DEVID_SLB24, distance=1))
    fabric.add_node(make_node(0x300, VTR_DEVID_SLB24, distance=1))
    fabric.link(0x100, 1, 0x200, 5)
    fabric.link(0x100, 2, 0x300, 1)

    fill_chassis_record(spine)

    assert spine.processed
    assert spine.slot_kind == SlotKind.spine
    assert spine.chassis_type == ChassisType.isr9288
    # Line port 5 sits on spine slot 2, chip 2. The second neighbor is ignored.
    assert (spine.slot_number, spine.subchip_number) == (2, 2)
    assert spine_index(spine) == 5


def test_line_places_itself_from_spine_port():
    fabric = Fabric()
    fabric.add_node(make_node(0x100, VTR_DEVID_SFB4))
    line = fabric.add_node(make_node(0x200, VTR_DEVID_SLB24, distance=1))
    fabric.link(0x100, 10, 0x200, 3)

    fill_chassis_record(line)

    assert line.slot_kind == SlotKind.line
    assert line.chassis_type == ChassisType.isr9096
    assert (line.slot_number, line.subchip_number) == (2, 2)
    assert line_index(line) == 5


def test_line_ignores_front_panel_links():
    fabric = Fabric()
    fabric.add_node(make_node(0x100, VTR_DEVID_SFB4))
    line = fabric.add_node(make_node(0x200, VTR_DEVID_SLB24, distance=1))
    fabric.link(0x100, 10, 0x200, 13)

    fill_chassis_record(line)

    assert line.processed
    assert line.slot_kind == SlotKind.unresolved


def test_spine_places_router_neighbors():
    fabric = Fabric()
    spine = fabric.add_node(make_node(0x103, VTR_DEVID_SFB12))
    router = fabric.add_node(make_node(0x400, VTR_DEVID_IB_IP_ROUTER, NodeType.router, distance=1))
    fabric.link(0x103, 5, 0x400, 1)

    fill_chassis_record(spine)

    assert router.processed
    assert router.slot_kind == SlotKind.srbd
    assert router.chassis_type == ChassisType.isr9288
    # 0x103 % 4 == 3 guesses chip 1.
    assert (router.slot_number, router.subchip_number) == (3, 1)
    # No line neighbor, so the spine itself stays unresolved.
    assert spine.chassis_type == ChassisType.unresolved


def test_router_places_itself_from_spine():
    fabric = Fabric()
    fabric.add_node(make_node(0x100, VTR_DEVID_SFB4))
    router = fabric.add_node(make_node(0x400, VTR_DEVID_IB_IP_ROUTER, NodeType.router, distance=1))
    fabric.link(0x100, 2, 0x400, 1)

    fill_chassis_record(router)

    assert router.slot_kind == SlotKind.srbd
    assert (router.slot_number, router.subchip_number) == (1, 2)


def test_processed_node_is_skipped():
    fabric = Fabric()
    fabric.add_node(make_node(0x100, VTR_DEVID_SFB4))
    line = fabric.add_node(make_node(0x200, VTR_DEVID_SLB24, distance=1))
    fabric.link(0x100, 10, 0x200, 3)
    line.processed = True

    fill_chassis_record(line)

    assert line.slot_kind == SlotKind.unresolved


def test_line_linked_to_unknown_board_is_fatal():
    fabric = Fabric()
    fabric.add_node(make_node(0x100, VTR_DEVID_SLB24))
    line = fabric.add_node(make_node(0x200, VTR_DEVID_SLB24, distance=1))
    fabric.link(0x100, 1, 0x200, 1)

    with pytest.raises(UnknownHardwareModel) as excinfo:
        fill_chassis_record(line)

    assert excinfo.value.guid == 0x100
    assert "0x0000000000000100" in str(excinfo.value)


def test_unplaced_line_index_is_fatal():
    line = make_node(0x200, VTR_DEVID_SLB24)

    with pytest.raises(SlotIndexOutOfRange):
        line_index(line)


def test_spine_index_out_of_range_is_fatal():
    spine = make_node(0x100, VTR_DEVID_SFB4)
    spine.slot_number = 19

    with pytest.raises(SlotIndexOutOfRange):
        spine_index(spine)
