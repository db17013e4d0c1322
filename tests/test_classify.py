from fabric_chassis.chassis.classify import (
    VTR_DEVID_IB_FC_ROUTER,
    VTR_DEVID_SFB12_DDR,
    VTR_DEVID_SFB2004,
    VTR_DEVID_SFB2012,
    VTR_DEVID_SFB4,
    VTR_DEVID_SLB2024,
    VTR_DEVID_SLB8,
    VTR_DEVID_SRB2004,
    VTR_VENDOR_ID,
    LineModel,
    is_chassis_switch,
    is_line,
    is_router,
    is_spine,
    is_xsigo_ca,
    is_xsigo_guid,
    is_xsigo_hca,
    is_xsigo_leafone,
    is_xsigo_switch,
    is_xsigo_tca,
    line_model,
    spine_generation,
)
from fabric_chassis.core.types import ChassisType, Node, NodeType


def make_node(device_id: int, node_type: NodeType = NodeType.switch) -> Node:
    return Node(guid=1, vendor_id=VTR_VENDOR_ID, device_id=device_id, node_type=node_type, num_ports=24)


def test_spine_generations():
    assert spine_generation(make_node(VTR_DEVID_SFB4)) == ChassisType.isr9096
    assert spine_generation(make_node(VTR_DEVID_SFB12_DDR)) == ChassisType.isr9288
    assert spine_generation(make_node(VTR_DEVID_SFB2012)) == ChassisType.isr2012
    assert spine_generation(make_node(VTR_DEVID_SFB2004)) == ChassisType.isr2004
    assert spine_generation(make_node(VTR_DEVID_SLB8)) is None


def test_line_models():
    assert line_model(make_node(VTR_DEVID_SRB2004)) == LineModel.slb24
    assert line_model(make_node(VTR_DEVID_SLB8)) == LineModel.slb8
    assert line_model(make_node(VTR_DEVID_SLB2024)) == LineModel.slb2024
    assert line_model(make_node(VTR_DEVID_SFB4)) is None


def test_chassis_switch_is_union_of_spine_and_line():
    spine = make_node(VTR_DEVID_SFB4)
    line = make_node(VTR_DEVID_SLB2024)
    router = make_node(VTR_DEVID_IB_FC_ROUTER, NodeType.router)

    assert is_spine(spine) and not is_line(spine)
    assert is_line(line) and not is_spine(line)
    assert is_router(router)
    assert is_chassis_switch(spine)
    assert is_chassis_switch(line)
    assert not is_chassis_switch(router)


def test_xsigo_guid_families():
    assert is_xsigo_guid(0x0013971234567890)
    assert not is_xsigo_guid(0x0013981234567890)

    assert is_xsigo_switch(0x0013970112345678)
    assert is_xsigo_hca(0x0013970212345678)
    assert is_xsigo_tca(0x0013970312345678)
    assert is_xsigo_ca(0x0013970212345678)
    assert is_xsigo_ca(0x0013970312345678)
    assert not is_xsigo_ca(0x0013970112345678)


def test_xsigo_leafone_requires_slot_byte():
    assert is_xsigo_leafone(0x0013970102000055)
    assert not is_xsigo_leafone(0x0013970103000055)
    assert not is_xsigo_leafone(0x0013970202000055)
