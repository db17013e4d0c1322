"""
Vendor and model classification.

Why this file exists
The discovery graph only carries vendor ids, device ids and system image GUIDs.
Every other part of the engine needs to ask questions like:

- Is this node a fabric board, and of which generation
- Is this node a line board, and which line board model
- Does this system image GUID belong to the Xsigo family

We keep these predicates centralized so the walker, builder and port mapper
stay consistent. Everything here is pure.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from fabric_chassis.core.types import ChassisType, Node, NodeType

# Vendor ids.
VTR_VENDOR_ID = 0x08F1  # Voltaire, grouped by topology walk
TS_VENDOR_ID = 0x05AD  # Topspin
SS_VENDOR_ID = 0x066A  # InfiniCon / SilverStorm
XS_VENDOR_ID = 0x1397  # Xsigo

# Voltaire device ids.
VTR_DEVID_IB_FC_ROUTER = 0x5A00
VTR_DEVID_IB_IP_ROUTER = 0x5A01
VTR_DEVID_SFB12 = 0x5A08
VTR_DEVID_SLB24 = 0x5A09
VTR_DEVID_SFB4 = 0x5A0B
VTR_DEVID_SLB8 = 0x5A0D
VTR_DEVID_SFB12_DDR = 0x5A32
VTR_DEVID_SFB4_DDR = 0x5A33
VTR_DEVID_SLB24_DDR = 0x5A34
VTR_DEVID_SFB2012 = 0x5A37
VTR_DEVID_SLB2024 = 0x5A38
VTR_DEVID_SFB2004 = 0x5A40
VTR_DEVID_SRB2004 = 0x5A42

# System image GUID masks.
SLOT_BYTE_MASK = 0xFFFFFFFF00FFFFFF
XSIGO_PREFIX_MASK = 0xFFFFFF0000000000
XSIGO_PREFIX = 0x0013970000000000
XSIGO_SUBTYPE_MASK = 0xFFFFFFFF00000000
XSIGO_SWITCH = 0x0013970100000000
XSIGO_HCA = 0x0013970200000000
XSIGO_TCA = 0x0013970300000000
XSIGO_LEAFONE_MASK = 0xFFFFFFFFFF000000
XSIGO_LEAFONE = 0x0013970102000000


class LineModel(str, Enum):
    """
    Line board model.

    slb24
      24 port line board, also used for the sRB-2004 module.

    slb8
      8 port line board, several internal ports share one front panel port.

    slb2024
      Line board of the 2012 and 2004 chassis.
    """

    slb24 = "slb24"
    slb8 = "slb8"
    slb2024 = "slb2024"


def is_router(node: Node) -> bool:
    return node.device_id in {VTR_DEVID_IB_FC_ROUTER, VTR_DEVID_IB_IP_ROUTER}


def is_spine_9096(node: Node) -> bool:
    return node.device_id in {VTR_DEVID_SFB4, VTR_DEVID_SFB4_DDR}


def is_spine_9288(node: Node) -> bool:
    return node.device_id in {VTR_DEVID_SFB12, VTR_DEVID_SFB12_DDR}


def is_spine_2012(node: Node) -> bool:
    return node.device_id == VTR_DEVID_SFB2012


def is_spine_2004(node: Node) -> bool:
    return node.device_id == VTR_DEVID_SFB2004


def is_spine(node: Node) -> bool:
    """Return True for a fabric board of any of the four generations."""
    return spine_generation(node) is not None


def spine_generation(node: Node) -> Optional[ChassisType]:
    """
    Return the chassis generation a fabric board belongs to.

    None means the node is not a recognized fabric board.
    """
    if is_spine_9096(node):
        return ChassisType.isr9096
    if is_spine_9288(node):
        return ChassisType.isr9288
    if is_spine_2012(node):
        return ChassisType.isr2012
    if is_spine_2004(node):
        return ChassisType.isr2004
    return None


def is_line_24(node: Node) -> bool:
    return node.device_id in {VTR_DEVID_SLB24, VTR_DEVID_SLB24_DDR, VTR_DEVID_SRB2004}


def is_line_8(node: Node) -> bool:
    return node.device_id == VTR_DEVID_SLB8


def is_line_2024(node: Node) -> bool:
    return node.device_id == VTR_DEVID_SLB2024


def line_model(node: Node) -> Optional[LineModel]:
    """Return the line board model, or None if the node is not a line board."""
    if is_line_24(node):
        return LineModel.slb24
    if is_line_8(node):
        return LineModel.slb8
    if is_line_2024(node):
        return LineModel.slb2024
    return None


def is_line(node: Node) -> bool:
    return line_model(node) is not None


def is_chassis_switch(node: Node) -> bool:
    """Return True if the node is a spine or line board of a modular chassis."""
    return is_spine(node) or is_line(node)


def is_switch(node: Node) -> bool:
    return node.node_type == NodeType.switch


# ---------------------------
# SYSTEM IMAGE GUID FAMILIES
# ---------------------------


def is_xsigo_guid(guid: int) -> bool:
    """Return True if the top 24 bits carry the Xsigo prefix."""
    return (guid & XSIGO_PREFIX_MASK) == XSIGO_PREFIX


def is_xsigo_switch(guid: int) -> bool:
    return (guid & XSIGO_SUBTYPE_MASK) == XSIGO_SWITCH


def is_xsigo_hca(guid: int) -> bool:
    return (guid & XSIGO_SUBTYPE_MASK) == XSIGO_HCA


def is_xsigo_tca(guid: int) -> bool:
    return (guid & XSIGO_SUBTYPE_MASK) == XSIGO_TCA


def is_xsigo_ca(guid: int) -> bool:
    return is_xsigo_hca(guid) or is_xsigo_tca(guid)


def is_xsigo_leafone(guid: int) -> bool:
    """
    Return True for the leaf in position one of an Xsigo chassis.

    Only that leaf externalizes the chassis identity to attached adapters.
    """
    return (guid & XSIGO_LEAFONE_MASK) == XSIGO_LEAFONE
